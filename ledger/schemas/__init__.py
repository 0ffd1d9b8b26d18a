"""Pydantic schemas and scene-graph types."""

from ledger.schemas.claim import Claim, Manifest, to_percent
from ledger.schemas.scene import (
    CLICK,
    FADED_OPACITY,
    POINTER_ENTER,
    POINTER_LEAVE,
    POINTER_MOVE,
    VISIBLE_OPACITY,
    Marker,
    Point,
    SceneGraph,
    TextLabel,
    ZoneShape,
)

__all__ = [
    "Claim", "Manifest", "to_percent",
    "Marker", "Point", "SceneGraph", "TextLabel", "ZoneShape",
    "CLICK", "POINTER_ENTER", "POINTER_MOVE", "POINTER_LEAVE",
    "VISIBLE_OPACITY", "FADED_OPACITY",
]
