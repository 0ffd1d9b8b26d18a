"""Server-rendered page: slider form, funnel, and the claim list."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse

from ledger.config import Settings
from ledger.dependencies import get_funnel_renderer, get_optional_claim_store, get_settings
from ledger.engines.funnel_renderer import FunnelRenderer
from ledger.logging_config import get_logger
from ledger.rendering.html import render_page
from ledger.repositories.claim_store import ClaimStore
from ledger.schemas.claim import to_percent
from ledger.services.claim_list import ClaimListView

logger = get_logger(__name__)
router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def index(
    threshold: Optional[int] = Query(default=None, ge=0, le=100),
    store: Optional[ClaimStore] = Depends(get_optional_claim_store),
    renderer: FunnelRenderer = Depends(get_funnel_renderer),
    settings: Settings = Depends(get_settings),
) -> HTMLResponse:
    """Render the page for a slider position (integer percent).

    A failed manifest load renders the error message in place of content.
    """
    percent = to_percent(settings.default_threshold) if threshold is None else threshold
    view = ClaimListView()

    if store is None:
        logger.warning("page_rendered_without_claims")
        view.show_error()
        return HTMLResponse(render_page(view, percent), status_code=503)

    value = percent / 100
    view.render(store.claims, value)
    scene = renderer.render(store.claims, value)
    return HTMLResponse(render_page(view, percent, scene=scene))
