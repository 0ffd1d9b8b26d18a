"""Certainty navigator facade: the page bootstrap.

Wires the claim store, threshold, funnel, tooltip, list, and selection
together so surfaces (FastAPI, Streamlit, CLI) only talk to this class.

Usage::

    navigator = AppContainer().navigator()
    await navigator.load()
    navigator.set_threshold_percent(85)
    navigator.pointer_enter("claim-7", Point(120, 340))
    navigator.click("claim-7")
    html = navigator.page_html()
"""

from typing import Optional

from ledger.clients.manifest_client import ManifestClient
from ledger.engines.funnel_renderer import FunnelRenderer
from ledger.errors import ClaimStoreError, ManifestLoadError, NotLoadedError
from ledger.logging_config import get_logger
from ledger.rendering.html import render_page
from ledger.rendering.svg import render_svg
from ledger.repositories.claim_store import ClaimStore
from ledger.schemas.scene import CLICK, POINTER_ENTER, POINTER_LEAVE, POINTER_MOVE, Point, SceneGraph
from ledger.services.claim_list import ERROR_MESSAGE, ClaimListView
from ledger.services.threshold_controller import ThresholdController
from ledger.services.tooltip_controller import TooltipController
from ledger.utils.scheduler import ManualScheduler

logger = get_logger(__name__)


class CertaintyNavigator:
    def __init__(
        self,
        manifest_client: ManifestClient,
        renderer: FunnelRenderer,
        threshold: ThresholdController,
        list_view: ClaimListView,
        tooltip: TooltipController,
        scheduler: Optional[ManualScheduler] = None,
    ):
        self._client = manifest_client
        self._renderer = renderer
        self._threshold = threshold
        self._list = list_view
        self._tooltip = tooltip
        self._scheduler = scheduler
        self._store: Optional[ClaimStore] = None
        self._error: Optional[str] = None

        # Funnel first, then the list: both read the same threshold value
        threshold.subscribe(self._refresh_funnel)
        threshold.subscribe(self._refresh_list)

    # ── lifecycle ────────────────────────────────────────────────────

    async def load(self) -> bool:
        """Load the manifest once and draw the initial views.

        A failed load leaves the navigator in an error state with the
        list showing a visible message. Returns whether loading succeeded.
        """
        if self._store is not None:
            return True
        try:
            manifest = await self._client.fetch()
            store = ClaimStore.from_manifest(manifest)
        except (ManifestLoadError, ClaimStoreError) as exc:
            logger.error("manifest_load_failed", source=self._client.source, error=str(exc))
            self._error = ERROR_MESSAGE
            self._list.show_error(ERROR_MESSAGE)
            return False

        self._store = store
        self._error = None
        logger.info("manifest_loaded", claims=len(store), threshold=self._threshold.value)
        self._refresh_funnel(self._threshold.value)
        self._refresh_list(self._threshold.value)
        return True

    # ── state ────────────────────────────────────────────────────────

    @property
    def loaded(self) -> bool:
        return self._store is not None

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def store(self) -> ClaimStore:
        if self._store is None:
            raise NotLoadedError("Claims have not been loaded")
        return self._store

    @property
    def scene(self) -> Optional[SceneGraph]:
        return self._renderer.scene if self.loaded else None

    @property
    def threshold(self) -> ThresholdController:
        return self._threshold

    @property
    def list_view(self) -> ClaimListView:
        return self._list

    @property
    def tooltip(self) -> TooltipController:
        return self._tooltip

    @property
    def total_count(self) -> int:
        return len(self._store) if self._store is not None else 0

    @property
    def visible_count(self) -> int:
        return self._list.visible_count

    # ── user input ───────────────────────────────────────────────────

    def set_threshold_percent(self, percent: int) -> float:
        self.tick()
        return self._threshold.set_percent(percent)

    def pointer_enter(self, claim_id: str, pointer: Point) -> bool:
        return self._dispatch(claim_id, POINTER_ENTER, pointer)

    def pointer_move(self, claim_id: str, pointer: Point) -> bool:
        return self._dispatch(claim_id, POINTER_MOVE, pointer)

    def pointer_leave(self, claim_id: str) -> bool:
        return self._dispatch(claim_id, POINTER_LEAVE, None)

    def click(self, claim_id: str) -> bool:
        return self._dispatch(claim_id, CLICK, None)

    def tick(self) -> int:
        """Run expired timers (highlight clears) before handling input."""
        if self._scheduler is None:
            return 0
        return self._scheduler.run_due()

    # ── output ───────────────────────────────────────────────────────

    def funnel_svg(self) -> str:
        scene = self.scene
        if scene is None:
            raise NotLoadedError("Claims have not been loaded")
        return render_svg(scene)

    def page_html(self) -> str:
        self.tick()
        return render_page(
            self._list,
            self._threshold.percent,
            scene=self.scene,
            tooltip=self._tooltip.tooltip,
        )

    # ── internals ────────────────────────────────────────────────────

    def _dispatch(self, claim_id: str, event: str, pointer: Optional[Point]) -> bool:
        self.tick()
        scene = self.scene
        marker = scene.marker(claim_id) if scene is not None else None
        if marker is None:
            logger.debug("marker_event_dropped", claim_id=claim_id, event=event)
            return False
        return marker.dispatch(event, pointer)

    def _refresh_funnel(self, threshold: float) -> None:
        if self._store is None:
            return
        self._renderer.render(self._store.claims, threshold)

    def _refresh_list(self, threshold: float) -> None:
        if self._store is None:
            return
        self._list.render(self._store.claims, threshold)
