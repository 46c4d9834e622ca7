"""InputGuard API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map InputGuardError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Feature catalog loaded on startup: a bad registry fails fast, before traffic

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Error handlers live in api/error_handlers.py, registered once here
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inputguard.api.error_handlers import register_error_handlers
from inputguard.api.routes import health, input_filter
from inputguard.config import get_settings
from inputguard.infrastructure.feature_registry import get_feature_catalog
from inputguard.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    get_feature_catalog()
    logger.info("InputGuard API started")
    yield
    logger.info("InputGuard API shutting down")


app = FastAPI(
    title="InputGuard API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(input_filter.router)

register_error_handlers(app)
