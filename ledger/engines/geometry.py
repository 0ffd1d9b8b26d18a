"""Static funnel geometry: three tapering zones and their labels.

Zones are defined by confidence bands and the funnel half-width at each
band edge. Their outlines are laid out through the same PositionMapper
that places markers, so a marker always lands inside the zone that owns
its confidence.

Default layout (800x600 canvas)::

    confidence   y     half-width
    0.00         50    300      Speculation
    0.30         200   200      Testing
    0.70         400   100      Confirmed
    1.00         550   50
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ledger.engines.position_mapper import PositionMapper, check_confidence
from ledger.schemas.claim import to_percent
from ledger.schemas.scene import Point, TextLabel, ZoneShape

# Tolerance for points sitting exactly on an outline
_EPS = 1e-9


@dataclass(frozen=True)
class ZoneSpec:
    """Input to ``FunnelGeometry.build``: one band and its colors."""

    name: str
    title: str
    low: float
    high: float
    fill: str
    marker_color: str


DEFAULT_ZONES: Tuple[ZoneSpec, ...] = (
    ZoneSpec("speculation", "V1: SPECULATION", 0.00, 0.30, "#FFF9C4", "#FFC107"),
    ZoneSpec("testing", "V2: TESTING", 0.30, 0.70, "#BBDEFB", "#2196F3"),
    ZoneSpec("confirmed", "V3: CONFIRMED", 0.70, 1.00, "#C8E6C9", "#4CAF50"),
)

# Funnel half-width at each band edge, top to bottom
DEFAULT_HALF_WIDTHS: Tuple[float, ...] = (300.0, 200.0, 100.0, 50.0)


@dataclass(frozen=True)
class Zone:
    """One confidence band and its trapezoid outline."""

    name: str
    title: str
    low: float
    high: float
    closed_high: bool  # only the last zone includes its upper bound
    center_x: float
    top_y: float
    bottom_y: float
    top_half_width: float
    bottom_half_width: float
    fill: str
    marker_color: str

    @property
    def band_label(self) -> str:
        return f"{to_percent(self.low)}-{to_percent(self.high)}% confidence"

    @property
    def polygon(self) -> Tuple[Point, ...]:
        cx = self.center_x
        return (
            Point(cx - self.top_half_width, self.top_y),
            Point(cx + self.top_half_width, self.top_y),
            Point(cx + self.bottom_half_width, self.bottom_y),
            Point(cx - self.bottom_half_width, self.bottom_y),
        )

    @property
    def label_position(self) -> Point:
        mid = (self.top_y + self.bottom_y) / 2
        return Point(self.center_x, mid - 20)

    def holds(self, confidence: float) -> bool:
        if self.closed_high and confidence == self.high:
            return True
        return self.low <= confidence < self.high

    def half_width_at(self, y: float) -> float:
        t = (y - self.top_y) / (self.bottom_y - self.top_y)
        return self.top_half_width + t * (self.bottom_half_width - self.top_half_width)

    def contains(self, point: Point) -> bool:
        if not self.top_y - _EPS <= point.y <= self.bottom_y + _EPS:
            return False
        return abs(point.x - self.center_x) <= self.half_width_at(point.y) + _EPS

    def shape(self) -> ZoneShape:
        return ZoneShape(name=self.title, points=self.polygon, fill=self.fill)


class FunnelGeometry:
    """The three zones plus canvas size and label placements.

    Built once; nothing in here depends on claim data.
    """

    def __init__(self, zones: Sequence[Zone], width: int = 800, height: int = 600):
        self._zones = tuple(zones)
        self.width = width
        self.height = height
        self._shapes = tuple(z.shape() for z in self._zones)
        self._labels = self._build_labels()

    @classmethod
    def build(
        cls,
        mapper: PositionMapper,
        specs: Sequence[ZoneSpec] = DEFAULT_ZONES,
        half_widths: Sequence[float] = DEFAULT_HALF_WIDTHS,
        width: int = 800,
        height: int = 600,
    ) -> "FunnelGeometry":
        """Lay the zone specs out in ``mapper``'s coordinate space.

        Raises:
            ValueError: if the bands do not tile [0, 1], the funnel widens
                downwards, or an outline is narrower than the marker spread.
        """
        if len(half_widths) != len(specs) + 1:
            raise ValueError("Need one half-width per band edge")
        if specs[0].low != 0.0 or specs[-1].high != 1.0:
            raise ValueError("Zone bands must cover [0, 1]")
        for upper, lower in zip(specs, specs[1:]):
            if upper.high != lower.low:
                raise ValueError(f"Gap or overlap between {upper.name} and {lower.name}")
        if any(a < b for a, b in zip(half_widths, half_widths[1:])):
            raise ValueError("Funnel must narrow monotonically")

        zones = []
        for i, spec in enumerate(specs):
            top_y = mapper.y_for(spec.low)
            bottom_y = mapper.y_for(spec.high)
            for y, hw in ((top_y, half_widths[i]), (bottom_y, half_widths[i + 1])):
                if hw < mapper.half_spread_at(y):
                    raise ValueError(
                        f"Zone {spec.name} is narrower than the marker spread at y={y:g}"
                    )
            zones.append(
                Zone(
                    name=spec.name,
                    title=spec.title,
                    low=spec.low,
                    high=spec.high,
                    closed_high=i == len(specs) - 1,
                    center_x=mapper.center_x,
                    top_y=top_y,
                    bottom_y=bottom_y,
                    top_half_width=half_widths[i],
                    bottom_half_width=half_widths[i + 1],
                    fill=spec.fill,
                    marker_color=spec.marker_color,
                )
            )
        return cls(zones, width=width, height=height)

    @classmethod
    def default(cls, mapper: Optional[PositionMapper] = None) -> "FunnelGeometry":
        return cls.build(mapper or PositionMapper())

    # ── queries ──────────────────────────────────────────────────────

    @property
    def zones(self) -> Tuple[Zone, ...]:
        return self._zones

    @property
    def shapes(self) -> Tuple[ZoneShape, ...]:
        return self._shapes

    @property
    def labels(self) -> Tuple[TextLabel, ...]:
        return self._labels

    def zone_for(self, confidence: float) -> Zone:
        c = check_confidence(confidence)
        for zone in self._zones:
            if zone.holds(c):
                return zone
        # Unreachable while the bands tile [0, 1]
        raise ValueError(f"No zone covers confidence {c!r}")

    def zone_at(self, point: Point) -> Optional[Zone]:
        """Zone whose outline contains ``point``; shared edges go to the upper zone."""
        for zone in self._zones:
            if zone.contains(point):
                return zone
        return None

    def contains(self, point: Point) -> bool:
        return self.zone_at(point) is not None

    def _build_labels(self) -> Tuple[TextLabel, ...]:
        labels = []
        for zone in self._zones:
            pos = zone.label_position
            labels.append(TextLabel(zone.title, pos.x, pos.y, 20))
            labels.append(TextLabel(zone.band_label, pos.x, pos.y + 25, 14))
        return tuple(labels)
