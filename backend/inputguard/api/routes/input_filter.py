"""Filter Route - exposes core.filter_input over HTTP.

Invariants:
    - Route holds no authorization logic: it delegates to core.filter_input
    - ArgumentError propagates to the global handler (400)
    - Authorization denial is a 200 with empty data, never an error status

Design Decisions:
    - Catalog injected through Depends(get_feature_catalog): tests override it
      via app.dependency_overrides instead of patching globals
"""

import logging

from fastapi import APIRouter, Depends

from inputguard.core.feature_catalog import FeatureCatalog
from inputguard.core.filter_input import filter_input
from inputguard.infrastructure.feature_registry import get_feature_catalog
from inputguard.schemas.filter import FilterRequest, FilterResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/filter", tags=["filter"])


@router.post("", response_model=FilterResponse)
async def filter_payload(
    body: FilterRequest,
    catalog: FeatureCatalog = Depends(get_feature_catalog),
):
    """Return only the input fields the user may set through the feature."""
    data = filter_input(
        body.user, body.feature, body.input, body.resource, catalog=catalog,
    )
    return FilterResponse(data=data)
