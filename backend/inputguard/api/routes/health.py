"""Health Probe - liveness endpoint for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if the process is up
    - Reports how many features the loaded catalog exposes
"""

import logging
from fastapi import APIRouter, Depends, status

from inputguard.core.feature_catalog import FeatureCatalog
from inputguard.infrastructure.feature_registry import get_feature_catalog

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(catalog: FeatureCatalog = Depends(get_feature_catalog)):
    """Basic liveness check. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "inputguard",
        "version": "1.0.0",
        "features_available": len(catalog),
    }
