"""Funnel endpoints: scene graph as JSON or as SVG."""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from ledger.config import Settings
from ledger.dependencies import (
    get_claim_store,
    get_funnel_renderer,
    get_settings,
    resolve_threshold,
)
from ledger.engines.funnel_renderer import FunnelRenderer
from ledger.logging_config import get_logger
from ledger.rendering.svg import render_svg
from ledger.repositories.claim_store import ClaimStore

logger = get_logger(__name__)
router = APIRouter()


@router.get("/")
def get_funnel(
    threshold: Optional[float] = Query(default=None, ge=0.0, le=1.0),
    store: ClaimStore = Depends(get_claim_store),
    renderer: FunnelRenderer = Depends(get_funnel_renderer),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Every claim's marker, with emphasis set by ``threshold``."""
    threshold = resolve_threshold(threshold, settings)
    scene = renderer.render(store.claims, threshold)
    payload = scene.to_dict()
    payload["visible_count"] = len(scene.visible_ids)
    payload["total_count"] = len(store)
    return payload


@router.get("/svg")
def get_funnel_svg(
    threshold: Optional[float] = Query(default=None, ge=0.0, le=1.0),
    store: ClaimStore = Depends(get_claim_store),
    renderer: FunnelRenderer = Depends(get_funnel_renderer),
    settings: Settings = Depends(get_settings),
) -> Response:
    threshold = resolve_threshold(threshold, settings)
    scene = renderer.render(store.claims, threshold)
    return Response(content=render_svg(scene), media_type="image/svg+xml")
