"""Unit tests for the great-circle distance engine."""

import pytest

from ecotrip.domain.distance import EARTH_RADIUS_KM, distance_km, haversine_km
from ecotrip.domain.entities import GeoPoint

NEW_YORK = GeoPoint(40.7128, -74.0060)
LONDON = GeoPoint(51.5074, -0.1278)
SYDNEY = GeoPoint(-33.8688, 151.2093)

SAMPLE_POINTS = [
    NEW_YORK,
    LONDON,
    SYDNEY,
    GeoPoint(0.0, 0.0),
    GeoPoint(89.9, 179.9),
    GeoPoint(-45.5, -120.25),
]


class TestHaversine:
    def test_same_point_is_zero(self):
        assert haversine_km(19.0, 72.0, 19.0, 72.0) == 0.0

    def test_known_distance_new_york_london(self):
        d = distance_km(NEW_YORK, LONDON)
        assert d == pytest.approx(5570, abs=20)

    def test_symmetric(self):
        for p in SAMPLE_POINTS:
            for q in SAMPLE_POINTS:
                assert distance_km(p, q) == pytest.approx(
                    distance_km(q, p), rel=1e-9, abs=1e-9
                )

    def test_non_negative(self):
        for p in SAMPLE_POINTS:
            for q in SAMPLE_POINTS:
                assert distance_km(p, q) >= 0.0

    def test_zero_distance_identity(self):
        for p in SAMPLE_POINTS:
            assert distance_km(p, p) == 0.0

    def test_antipodal_points_half_circumference(self):
        d = haversine_km(0.0, 0.0, 0.0, 180.0)
        assert d == pytest.approx(EARTH_RADIUS_KM * 3.141592653589793)

    def test_out_of_range_coordinates_accepted(self):
        """Range validation belongs to the caller; any finite pair works."""
        assert haversine_km(95.0, 200.0, -95.0, -200.0) >= 0.0
