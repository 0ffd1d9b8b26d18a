"""FastAPI application entry point with structured logging and health checks."""

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ledger.api import claims, funnel, pages
from ledger.dependencies import get_settings, load_claim_store
from ledger.errors import ClaimStoreError, ManifestLoadError
from ledger.health import VERSION
from ledger.health import router as health_router
from ledger.logging_config import get_logger, setup_logging

setup_logging(
    json_logs=os.getenv("JSON_LOGS", "false").lower() == "true",
    log_level=os.getenv("LOG_LEVEL", "INFO"),
)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the manifest once; a failure degrades the app instead of crashing it."""
    settings = get_settings()
    logger.info("application_startup", version=VERSION)
    app.state.claim_store = None
    app.state.load_error = None
    try:
        app.state.claim_store = await load_claim_store(settings)
        logger.info("manifest_loaded", claims=len(app.state.claim_store))
    except (ManifestLoadError, ClaimStoreError) as exc:
        app.state.load_error = str(exc)
        logger.error("manifest_load_failed", error=str(exc))
    yield
    logger.info("application_shutdown")


app = FastAPI(
    title="Legis Ledger",
    description=(
        "Threshold-filterable claim list and a funnel visualization that "
        "places each claim by confidence."
    ),
    version=VERSION,
    lifespan=lifespan,
)

app.include_router(health_router, tags=["health"])

API_V1_PREFIX = "/api/v1"

app.include_router(claims.router, prefix=f"{API_V1_PREFIX}/claims", tags=["claims"])
app.include_router(funnel.router, prefix=f"{API_V1_PREFIX}/funnel", tags=["funnel"])
app.include_router(pages.router, tags=["pages"])
