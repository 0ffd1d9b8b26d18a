"""Confidence → funnel coordinate mapping.

Y is a straight affine map of confidence: 0 sits at the wide top of the
funnel, 1 at the narrow bottom. The horizontal spread allowed at a given
Y shrinks linearly from ``top_spread`` to ``bottom_spread``. X is the
funnel center plus a jitter draw scaled by that spread; the jitter is
purely cosmetic and lives behind a ``JitterSource`` so layouts can be made
deterministic.

Usage::

    mapper = PositionMapper(jitter=CenteredJitter())
    mapper.position(0.9)   # Point(x=400.0, y=500.0)
"""

import math
import random
from typing import Optional, Protocol

from ledger.schemas.scene import Point


class JitterSource(Protocol):
    def draw(self) -> float:
        """Return a value in [-0.5, 0.5)."""
        ...


class RandomJitter:
    """Uniform horizontal jitter. A seed makes the sequence reproducible."""

    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def draw(self) -> float:
        return self._rng.random() - 0.5


class CenteredJitter:
    """No jitter: every marker sits on the funnel's center line."""

    def draw(self) -> float:
        return 0.0


def check_confidence(confidence: float) -> float:
    """Reject values outside [0, 1] instead of clamping them.

    Raises:
        ValueError: for NaN, infinities, booleans, or out-of-range values.
    """
    if isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
        raise ValueError(f"Confidence must be a real number, got {confidence!r}")
    if math.isnan(confidence) or not 0.0 <= confidence <= 1.0:
        raise ValueError(f"Confidence must be within [0, 1], got {confidence!r}")
    return float(confidence)


class PositionMapper:
    """Map a confidence value to a point inside the funnel."""

    def __init__(
        self,
        y_top: float = 50.0,
        y_bottom: float = 550.0,
        center_x: float = 400.0,
        top_spread: float = 250.0,
        bottom_spread: float = 50.0,
        jitter: Optional[JitterSource] = None,
    ):
        if y_bottom <= y_top:
            raise ValueError("y_bottom must be below y_top")
        if not top_spread >= bottom_spread >= 0:
            raise ValueError("Spread must narrow from top to bottom")
        self.y_top = y_top
        self.y_bottom = y_bottom
        self.center_x = center_x
        self.top_spread = top_spread
        self.bottom_spread = bottom_spread
        self.jitter = jitter if jitter is not None else RandomJitter()

    # ── public API ───────────────────────────────────────────────────

    def y_for(self, confidence: float) -> float:
        c = check_confidence(confidence)
        # Weighted form keeps both endpoints exact in floating point
        return (1.0 - c) * self.y_top + c * self.y_bottom

    def confidence_at(self, y: float) -> float:
        """Inverse of ``y_for``; used to lay zone outlines in this space."""
        return (y - self.y_top) / (self.y_bottom - self.y_top)

    def spread_at(self, y: float) -> float:
        """Full horizontal spread allowed at ``y``."""
        t = self.confidence_at(y)
        return self.top_spread - t * (self.top_spread - self.bottom_spread)

    def half_spread_at(self, y: float) -> float:
        return self.spread_at(y) / 2

    def position(self, confidence: float) -> Point:
        y = self.y_for(confidence)
        x = self.center_x + self.jitter.draw() * self.spread_at(y)
        return Point(x, y)
