"""Builds and updates the funnel scene graph.

Every claim always gets a marker. The threshold only changes emphasis:
qualifying markers are opaque and clickable, the rest are faded and inert.
The first render (or a render with a different claim set) builds the
scene; later renders with the same claims update the existing markers in
place so positions and identities survive threshold changes.
"""

from typing import Optional, Sequence, Tuple

from ledger.engines.geometry import FunnelGeometry
from ledger.engines.position_mapper import PositionMapper, check_confidence
from ledger.logging_config import get_logger
from ledger.schemas.claim import Claim
from ledger.schemas.scene import (
    CLICK,
    MARKER_TRANSITION,
    POINTER_ENTER,
    POINTER_LEAVE,
    POINTER_MOVE,
    Marker,
    SceneGraph,
)
from ledger.services.selection_bridge import SelectionBridge
from ledger.services.tooltip_controller import TooltipController

logger = get_logger(__name__)


def marker_label(claim: Claim) -> str:
    return f"{claim.title} ({claim.confidence_percent}%)"


class FunnelRenderer:
    """Projects (claims, threshold) onto a scene graph."""

    def __init__(
        self,
        geometry: FunnelGeometry,
        mapper: PositionMapper,
        tooltip: Optional[TooltipController] = None,
        selection: Optional[SelectionBridge] = None,
    ):
        self.geometry = geometry
        self.mapper = mapper
        self._tooltip = tooltip
        self._selection = selection
        self._scene: Optional[SceneGraph] = None
        self._claims_key: Tuple[Claim, ...] = ()

    @property
    def scene(self) -> Optional[SceneGraph]:
        return self._scene

    # ── public API ───────────────────────────────────────────────────

    def render(self, claims: Sequence[Claim], threshold: float) -> SceneGraph:
        """Return the scene for ``claims`` at ``threshold``.

        Raises:
            ValueError: if ``threshold`` is outside [0, 1].
        """
        threshold = check_confidence(threshold)
        key = tuple(claims)
        if self._scene is None or key != self._claims_key:
            return self._build(key, threshold)
        return self._update(key, threshold)

    # ── internals ────────────────────────────────────────────────────

    def _build(self, claims: Tuple[Claim, ...], threshold: float) -> SceneGraph:
        scene = SceneGraph(
            width=self.geometry.width,
            height=self.geometry.height,
            zones=self.geometry.shapes,
            labels=self.geometry.labels,
            threshold=threshold,
        )
        for claim in claims:
            try:
                marker = self._build_marker(claim, threshold)
            except (ValueError, TypeError, AttributeError) as exc:
                logger.error(
                    "marker_render_failed",
                    claim_id=getattr(claim, "id", None),
                    error=str(exc),
                )
                continue
            if marker.claim_id in scene.markers:
                logger.warning("marker_duplicate_skipped", claim_id=marker.claim_id)
                continue
            scene.markers[marker.claim_id] = marker

        self._scene = scene
        self._claims_key = claims
        logger.info(
            "funnel_built",
            markers=len(scene.markers),
            visible=len(scene.visible_ids),
            threshold=threshold,
        )
        return scene

    def _build_marker(self, claim: Claim, threshold: float) -> Marker:
        position = self.mapper.position(claim.confidence)
        zone = self.geometry.zone_for(claim.confidence)
        marker = Marker(
            claim_id=claim.id,
            position=position,
            fill=zone.marker_color,
            label=marker_label(claim),
        )
        marker.apply_visibility(claim.qualifies(threshold))
        self._wire(marker, claim)
        return marker

    def _wire(self, marker: Marker, claim: Claim) -> None:
        tooltip = self._tooltip
        if tooltip is not None:
            marker.handlers[POINTER_ENTER] = lambda pointer: tooltip.show(claim, pointer)
            marker.handlers[POINTER_MOVE] = lambda pointer: tooltip.move(pointer)
            marker.handlers[POINTER_LEAVE] = lambda pointer: tooltip.hide(owner=claim.id)
        selection = self._selection
        if selection is not None:
            # Marker.dispatch drops clicks while the marker is faded
            marker.handlers[CLICK] = lambda pointer: selection.select_marker(claim.id)

    def _update(self, claims: Tuple[Claim, ...], threshold: float) -> SceneGraph:
        scene = self._scene
        changed = 0
        for claim in claims:
            marker = scene.markers.get(claim.id)
            if marker is None:
                continue
            visible = claim.qualifies(threshold)
            if marker.visible != visible:
                changed += 1
            marker.apply_visibility(visible)
            marker.transition = MARKER_TRANSITION
        scene.threshold = threshold
        scene.revision += 1
        logger.debug(
            "funnel_updated",
            changed=changed,
            visible=len(scene.visible_ids),
            threshold=threshold,
        )
        return scene
