"""Unit tests for the Haversine formula and the distance calculator."""

import math
from unittest.mock import patch

import pytest

from src.domain.calculator import DistanceCalculator
from src.domain.distance import EARTH_RADIUS_KM, haversine_km
from src.domain.entities import Coordinate
from src.domain.enums import Axis, ErrorKind, Side
from src.domain.errors import Err, Ok
from tests.conftest import LONDON, MOSCOW, PARIS, SAINT_PETERSBURG


class TestHaversine:
    def test_same_point_is_zero(self):
        assert haversine_km(19.0, 72.0, 19.0, 72.0) == 0.0

    def test_symmetric(self):
        d1 = haversine_km(19.0, 72.0, 20.0, 73.0)
        d2 = haversine_km(20.0, 73.0, 19.0, 72.0)
        assert abs(d1 - d2) < 1e-6

    def test_antipodal_is_half_circumference(self):
        d = haversine_km(0.0, 0.0, 0.0, 180.0)
        assert d == pytest.approx(math.pi * EARTH_RADIUS_KM, abs=1e-6)

    def test_poles(self):
        d = haversine_km(90.0, 0.0, -90.0, 0.0)
        assert math.isfinite(d)
        assert d == pytest.approx(math.pi * EARTH_RADIUS_KM, abs=1e-6)

    def test_coordinate_distance_to_matches_formula(self):
        assert MOSCOW.distance_to(SAINT_PETERSBURG) == haversine_km(
            55.7558, 37.6173, 59.9311, 30.3609
        )


class TestDistanceCalculator:
    def setup_method(self):
        self.calculator = DistanceCalculator()

    def _distance(self, a, b) -> float:
        result = self.calculator.compute(a, b)
        assert isinstance(result, Ok)
        assert result.is_ok
        return result.value.distance_km

    # ── Properties ────────────────────────────────────────────────

    @pytest.mark.parametrize(
        "point",
        [MOSCOW, Coordinate(0, 0), Coordinate(90, 180), Coordinate(-90, -180)],
    )
    def test_identity(self, point):
        assert self._distance(point, point) == pytest.approx(0.0, abs=1e-6)

    @pytest.mark.parametrize(
        "a, b",
        [
            (MOSCOW, SAINT_PETERSBURG),
            (PARIS, LONDON),
            (Coordinate(-33.8688, 151.2093), Coordinate(-23.5505, -46.6333)),
        ],
    )
    def test_symmetric(self, a, b):
        assert abs(self._distance(a, b) - self._distance(b, a)) < 1e-6

    @pytest.mark.parametrize(
        "a, b",
        [
            (Coordinate(-33.8688, 151.2093), MOSCOW),  # Sydney
            (Coordinate(-23.5505, -46.6333), MOSCOW),  # Sao Paulo
            (Coordinate(0, 0), Coordinate(0, 180)),  # antipodes
            (Coordinate(45, -180), Coordinate(-45, 0)),  # antipodes
        ],
    )
    def test_non_negative_and_finite(self, a, b):
        d = self._distance(a, b)
        assert d > 0
        assert math.isfinite(d)

    # ── Scenarios ─────────────────────────────────────────────────

    def test_moscow_to_saint_petersburg(self):
        assert 630 <= self._distance(MOSCOW, SAINT_PETERSBURG) <= 640

    def test_paris_to_london(self):
        assert 335 <= self._distance(PARIS, LONDON) <= 345

    def test_rounded_to_three_decimals(self):
        raw = MOSCOW.distance_to(SAINT_PETERSBURG)
        d = self._distance(MOSCOW, SAINT_PETERSBURG)
        assert d == round(raw, 3)
        assert d == round(d, 3)

    def test_result_echoes_inputs(self):
        result = self.calculator.compute(PARIS, LONDON)
        assert result.value.from_ is PARIS
        assert result.value.to is LONDON

    # ── Failures ──────────────────────────────────────────────────

    def test_out_of_range_is_reported_not_raised(self):
        result = self.calculator.compute(Coordinate(100, 50), MOSCOW)
        assert isinstance(result, Err)
        assert not result.is_ok
        assert result.error.kind is ErrorKind.COORDINATE_OUT_OF_RANGE
        assert result.error.side is Side.FROM
        assert result.error.axis is Axis.LATITUDE

    def test_missing_from(self):
        result = self.calculator.compute(None, MOSCOW)
        assert isinstance(result, Err)
        assert result.error.kind is ErrorKind.MISSING_COORDINATE
        assert result.error.side is Side.FROM

    def test_missing_to(self):
        result = self.calculator.compute(MOSCOW, None)
        assert isinstance(result, Err)
        assert result.error.kind is ErrorKind.MISSING_COORDINATE
        assert result.error.side is Side.TO

    def test_validation_short_circuits_computation(self):
        with patch("src.domain.calculator.haversine_km") as formula:
            self.calculator.compute(Coordinate(0, 200), MOSCOW)
        formula.assert_not_called()

    def test_unexpected_exception_becomes_internal_error(self):
        with patch(
            "src.domain.calculator.haversine_km",
            side_effect=ValueError("math domain error"),
        ):
            result = self.calculator.compute(MOSCOW, PARIS)
        assert isinstance(result, Err)
        assert result.error.kind is ErrorKind.INTERNAL_COMPUTATION_ERROR
        assert result.error.details == "math domain error"

    def test_non_finite_result_becomes_internal_error(self):
        with patch("src.domain.calculator.haversine_km", return_value=float("nan")):
            result = self.calculator.compute(MOSCOW, PARIS)
        assert isinstance(result, Err)
        assert result.error.kind is ErrorKind.INTERNAL_COMPUTATION_ERROR

    def test_inputs_are_not_mutated(self):
        a, b = Coordinate(10.0, 20.0), Coordinate(30.0, 40.0)
        self.calculator.compute(a, b)
        assert a == Coordinate(10.0, 20.0)
        assert b == Coordinate(30.0, 40.0)
