"""Tests for the confidence → coordinate mapping."""

import math

import pytest

from ledger.engines.position_mapper import (
    CenteredJitter,
    PositionMapper,
    RandomJitter,
    check_confidence,
)

SAMPLES = [i / 100 for i in range(101)]


class FixedJitter:
    def __init__(self, value: float):
        self.value = value

    def draw(self) -> float:
        return self.value


class TestVerticalMapping:
    """Y is affine in confidence and inverted: higher confidence sits lower."""

    def test_endpoints_are_exact(self):
        mapper = PositionMapper(jitter=CenteredJitter())
        assert mapper.position(0.0).y == 50.0
        assert mapper.position(1.0).y == 550.0

    def test_endpoints_exact_for_awkward_ranges(self):
        mapper = PositionMapper(y_top=0.1, y_bottom=0.3, jitter=CenteredJitter())
        assert mapper.y_for(0.0) == 0.1
        assert mapper.y_for(1.0) == 0.3

    def test_y_monotonically_non_decreasing(self, mapper):
        ys = [mapper.y_for(c) for c in SAMPLES]
        assert all(a <= b for a, b in zip(ys, ys[1:]))

    def test_y_is_linear(self):
        mapper = PositionMapper(jitter=CenteredJitter())
        assert mapper.y_for(0.5) == pytest.approx(300.0)
        assert mapper.y_for(0.9) == pytest.approx(500.0)

    def test_higher_confidence_renders_lower(self, mapper):
        assert mapper.position(0.9).y > mapper.position(0.4).y

    def test_jitter_never_moves_y(self):
        left = PositionMapper(jitter=FixedJitter(-0.5))
        right = PositionMapper(jitter=FixedJitter(0.49))
        for c in SAMPLES:
            assert left.position(c).y == right.position(c).y


class TestHorizontalSpread:
    def test_spread_narrows_with_confidence(self, mapper):
        spreads = [mapper.spread_at(mapper.y_for(c)) for c in SAMPLES]
        assert all(a >= b for a, b in zip(spreads, spreads[1:]))

    def test_spread_endpoints(self, mapper):
        assert mapper.spread_at(50.0) == pytest.approx(250.0)
        assert mapper.spread_at(550.0) == pytest.approx(50.0)

    def test_x_stays_within_half_spread(self):
        mapper = PositionMapper(jitter=RandomJitter(seed=7))
        for c in SAMPLES:
            point = mapper.position(c)
            assert abs(point.x - mapper.center_x) <= mapper.half_spread_at(point.y)

    def test_centered_jitter_is_deterministic(self):
        mapper = PositionMapper(jitter=CenteredJitter())
        assert mapper.position(0.3).x == 400.0
        assert mapper.position(0.3) == mapper.position(0.3)

    def test_extreme_jitter_hits_spread_edge(self):
        mapper = PositionMapper(jitter=FixedJitter(-0.5))
        assert mapper.position(0.0).x == pytest.approx(400.0 - 125.0)
        assert mapper.position(1.0).x == pytest.approx(400.0 - 25.0)

    def test_seeded_jitter_is_reproducible(self):
        a = PositionMapper(jitter=RandomJitter(seed=3))
        b = PositionMapper(jitter=RandomJitter(seed=3))
        assert [a.position(c) for c in SAMPLES] == [b.position(c) for c in SAMPLES]

    def test_random_jitter_range(self):
        jitter = RandomJitter(seed=11)
        draws = [jitter.draw() for _ in range(500)]
        assert all(-0.5 <= d < 0.5 for d in draws)


class TestContractViolations:
    """Out-of-range confidence is rejected, never clamped."""

    @pytest.mark.parametrize("bad", [-0.01, 1.01, math.nan, math.inf, -math.inf])
    def test_rejects_out_of_range(self, mapper, bad):
        with pytest.raises(ValueError):
            mapper.position(bad)

    @pytest.mark.parametrize("bad", [None, "0.5", True])
    def test_rejects_non_numbers(self, bad):
        with pytest.raises(ValueError):
            check_confidence(bad)

    def test_accepts_integers(self):
        assert check_confidence(1) == 1.0
        assert check_confidence(0) == 0.0

    def test_invalid_geometry_rejected(self):
        with pytest.raises(ValueError):
            PositionMapper(y_top=100, y_bottom=100)
        with pytest.raises(ValueError):
            PositionMapper(top_spread=10, bottom_spread=50)
