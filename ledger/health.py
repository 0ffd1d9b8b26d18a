"""Health check endpoints.

- ``/health``: application status
- ``/health/ready``: 200 once the manifest is loaded, 503 otherwise
- ``/health/live``: process is alive
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException

from ledger.config import Settings
from ledger.dependencies import get_optional_claim_store, get_settings
from ledger.logging_config import get_logger
from ledger.repositories.claim_store import ClaimStore

router = APIRouter()
logger = get_logger(__name__)

VERSION = "1.0.0"


@router.get("/health")
def health_check(
    store: Optional[ClaimStore] = Depends(get_optional_claim_store),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Basic health check, including whether claims are loaded."""
    status = "healthy" if store is not None else "degraded"
    logger.info("health_check_performed", status=status)
    return {
        "status": status,
        "service": settings.app_name,
        "version": VERSION,
        "claims": len(store) if store is not None else 0,
    }


@router.get("/health/ready")
def readiness_check(
    store: Optional[ClaimStore] = Depends(get_optional_claim_store),
) -> Dict[str, Any]:
    """Kubernetes-style readiness probe."""
    if store is None:
        raise HTTPException(status_code=503, detail={"ready": False, "reason": "Manifest not loaded"})
    return {"ready": True}


@router.get("/health/live")
def liveness_check() -> Dict[str, Any]:
    """Kubernetes-style liveness probe."""
    return {"alive": True}
