"""Scene graph for the funnel visualization.

The scene graph is a plain in-memory model: zones and labels are static,
markers are mutable only in their emphasis fields (opacity, cursor,
interactivity). The SVG serializer and the UI surfaces read it; only
FunnelRenderer writes it.
"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple


class Point(NamedTuple):
    x: float
    y: float


VISIBLE_OPACITY = 1.0
FADED_OPACITY = 0.2

MARKER_RADIUS = 8
MARKER_TRANSITION = "opacity 0.3s ease, r 0.2s ease, stroke-width 0.2s ease"

# Pointer events a marker can receive
POINTER_ENTER = "pointerenter"
POINTER_MOVE = "pointermove"
POINTER_LEAVE = "pointerleave"
CLICK = "click"

Handler = Callable[[Optional[Point]], None]


@dataclass(frozen=True)
class ZoneShape:
    """A zone polygon as drawn in the scene."""

    name: str
    points: Tuple[Point, ...]
    fill: str
    stroke: str = "#333"
    stroke_width: int = 2

    @property
    def path(self) -> str:
        """SVG path data for the polygon outline."""
        head, *rest = self.points
        segments = [f"M {head.x:g} {head.y:g}"]
        segments += [f"L {p.x:g} {p.y:g}" for p in rest]
        return " ".join(segments) + " Z"


@dataclass(frozen=True)
class TextLabel:
    text: str
    x: float
    y: float
    size: int
    fill: str = "#333"


@dataclass
class Marker:
    """One claim's dot.

    ``position`` and ``fill`` are fixed at build time. ``visible`` and the
    derived emphasis fields are recomputed on every threshold change.
    """

    claim_id: str
    position: Point
    fill: str
    label: str  # textual fallback shown by the browser's native tooltip
    visible: bool = True
    opacity: float = VISIBLE_OPACITY
    cursor: str = "pointer"
    transition: Optional[str] = None
    radius: int = MARKER_RADIUS
    handlers: Dict[str, Handler] = field(default_factory=dict, repr=False, compare=False)

    @property
    def interactive(self) -> bool:
        return self.visible

    def apply_visibility(self, visible: bool) -> None:
        self.visible = visible
        self.opacity = VISIBLE_OPACITY if visible else FADED_OPACITY
        self.cursor = "pointer" if visible else "default"

    def dispatch(self, event: str, pointer: Optional[Point] = None) -> bool:
        """Deliver a pointer event to this marker.

        Clicks on a faded marker are dropped. Returns whether a handler ran.
        """
        if event == CLICK and not self.interactive:
            return False
        handler = self.handlers.get(event)
        if handler is None:
            return False
        handler(pointer)
        return True

    def to_dict(self) -> dict:
        return {
            "claim_id": self.claim_id,
            "x": round(self.position.x, 2),
            "y": round(self.position.y, 2),
            "fill": self.fill,
            "label": self.label,
            "visible": self.visible,
            "interactive": self.interactive,
            "opacity": self.opacity,
            "cursor": self.cursor,
        }


@dataclass
class SceneGraph:
    """Everything drawn inside the funnel container."""

    width: int
    height: int
    zones: Tuple[ZoneShape, ...]
    labels: Tuple[TextLabel, ...]
    markers: Dict[str, Marker] = field(default_factory=dict)
    threshold: float = 0.0
    revision: int = 0  # bumped on every in-place update

    def marker(self, claim_id: str) -> Optional[Marker]:
        return self.markers.get(claim_id)

    @property
    def visible_ids(self) -> List[str]:
        return [m.claim_id for m in self.markers.values() if m.visible]

    @property
    def faded_ids(self) -> List[str]:
        return [m.claim_id for m in self.markers.values() if not m.visible]

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "threshold": self.threshold,
            "revision": self.revision,
            "zones": [
                {"name": z.name, "path": z.path, "fill": z.fill} for z in self.zones
            ],
            "labels": [
                {"text": l.text, "x": l.x, "y": l.y, "size": l.size} for l in self.labels
            ],
            "markers": [m.to_dict() for m in self.markers.values()],
        }
