"""Funnel layout and rendering engines."""

from ledger.engines.funnel_renderer import FunnelRenderer
from ledger.engines.geometry import FunnelGeometry, Zone, ZoneSpec
from ledger.engines.position_mapper import CenteredJitter, PositionMapper, RandomJitter

__all__ = [
    "CenteredJitter",
    "FunnelGeometry",
    "FunnelRenderer",
    "PositionMapper",
    "RandomJitter",
    "Zone",
    "ZoneSpec",
]
