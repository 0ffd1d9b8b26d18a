"""Claim endpoints: the threshold-filtered list and single-claim lookup."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ledger.config import Settings
from ledger.dependencies import get_claim_store, get_settings, resolve_threshold
from ledger.logging_config import get_logger
from ledger.repositories.claim_store import ClaimStore
from ledger.schemas.claim import Claim

logger = get_logger(__name__)
router = APIRouter()


@router.get("/", response_model=List[Claim])
def list_claims(
    threshold: Optional[float] = Query(default=None, ge=0.0, le=1.0),
    store: ClaimStore = Depends(get_claim_store),
    settings: Settings = Depends(get_settings),
) -> List[Claim]:
    """Claims at or above ``threshold``, highest confidence first.

    An empty list is a valid answer: nothing qualifies at this threshold.
    """
    threshold = resolve_threshold(threshold, settings)
    claims = store.qualifying(threshold)
    logger.info("claims_list_completed", threshold=threshold, count=len(claims), total=len(store))
    return claims


@router.get("/{claim_id}", response_model=Claim)
def get_claim(claim_id: str, store: ClaimStore = Depends(get_claim_store)) -> Claim:
    claim = store.get(claim_id)
    if claim is None:
        logger.warning("claim_not_found", claim_id=claim_id)
        raise HTTPException(status_code=404, detail="Claim not found")
    return claim
