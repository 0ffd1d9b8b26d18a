"""Tests for the static funnel geometry."""

import pytest

from ledger.engines.geometry import (
    DEFAULT_HALF_WIDTHS,
    DEFAULT_ZONES,
    FunnelGeometry,
    ZoneSpec,
)
from ledger.engines.position_mapper import PositionMapper, RandomJitter
from ledger.schemas.scene import Point


class TestZones:
    def test_three_zones_in_order(self, geometry):
        assert [z.name for z in geometry.zones] == ["speculation", "testing", "confirmed"]

    def test_zone_polygons_trace_the_funnel_outline(self, geometry):
        speculation, testing, confirmed = geometry.zones
        assert speculation.shape().path == "M 100 50 L 700 50 L 600 200 L 200 200 Z"
        assert testing.shape().path == "M 200 200 L 600 200 L 500 400 L 300 400 Z"
        assert confirmed.shape().path == "M 300 400 L 500 400 L 450 550 L 350 550 Z"

    def test_zones_narrow_monotonically(self, geometry):
        widths = []
        for zone in geometry.zones:
            widths += [zone.top_half_width, zone.bottom_half_width]
        assert all(a >= b for a, b in zip(widths, widths[1:]))

    def test_zones_are_centered(self, geometry):
        for zone in geometry.zones:
            xs = [p.x for p in zone.polygon]
            assert (min(xs) + max(xs)) / 2 == pytest.approx(400.0)

    @pytest.mark.parametrize(
        "confidence, expected",
        [
            (0.0, "speculation"),
            (0.29, "speculation"),
            (0.30, "testing"),
            (0.69, "testing"),
            (0.70, "confirmed"),
            (1.0, "confirmed"),
        ],
    )
    def test_zone_for_band_edges(self, geometry, confidence, expected):
        assert geometry.zone_for(confidence).name == expected

    def test_band_labels(self, geometry):
        texts = [label.text for label in geometry.labels]
        assert texts == [
            "V1: SPECULATION", "0-30% confidence",
            "V2: TESTING", "30-70% confidence",
            "V3: CONFIRMED", "70-100% confidence",
        ]

    def test_geometry_is_immutable(self, geometry):
        zone = geometry.zones[0]
        with pytest.raises(AttributeError):
            zone.low = 0.5


class TestContainment:
    def test_every_marker_inside_its_zone(self):
        mapper = PositionMapper(jitter=RandomJitter(seed=1))
        geometry = FunnelGeometry.default(mapper)
        for i in range(1001):
            c = i / 1000
            point = mapper.position(c)
            assert geometry.zone_for(c).contains(point), c
            assert geometry.contains(point)

    def test_point_outside_funnel(self, geometry):
        assert not geometry.contains(Point(5, 300))
        assert not geometry.contains(Point(400, 10))
        assert not geometry.contains(Point(400, 590))
        assert geometry.zone_at(Point(5, 300)) is None

    def test_zone_at_center_points(self, geometry):
        assert geometry.zone_at(Point(400, 100)).name == "speculation"
        assert geometry.zone_at(Point(400, 300)).name == "testing"
        assert geometry.zone_at(Point(400, 500)).name == "confirmed"


class TestBuildValidation:
    def test_outline_narrower_than_spread_rejected(self):
        mapper = PositionMapper(top_spread=700)
        with pytest.raises(ValueError, match="narrower"):
            FunnelGeometry.build(mapper)

    def test_gap_between_bands_rejected(self, mapper):
        specs = (
            ZoneSpec("a", "A", 0.0, 0.4, "#fff", "#000"),
            ZoneSpec("b", "B", 0.5, 1.0, "#fff", "#000"),
        )
        with pytest.raises(ValueError, match="Gap"):
            FunnelGeometry.build(mapper, specs, (300, 200, 100))

    def test_widening_funnel_rejected(self, mapper):
        with pytest.raises(ValueError, match="narrow"):
            FunnelGeometry.build(mapper, DEFAULT_ZONES, (300, 100, 200, 50))

    def test_half_width_count_must_match(self, mapper):
        with pytest.raises(ValueError):
            FunnelGeometry.build(mapper, DEFAULT_ZONES, DEFAULT_HALF_WIDTHS[:-1])

    def test_bands_must_cover_unit_interval(self, mapper):
        specs = (ZoneSpec("a", "A", 0.1, 1.0, "#fff", "#000"),)
        with pytest.raises(ValueError, match="cover"):
            FunnelGeometry.build(mapper, specs, (300, 50))
