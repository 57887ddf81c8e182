"""
Domain value objects.

- ``Coordinate`` is immutable; range checks live in ``validation`` so an
  out-of-range coordinate can still be constructed and reported precisely.
- ``DistanceResult`` is what a successful calculation hands back.
"""

from __future__ import annotations

from dataclasses import dataclass

from .distance import haversine_km
from .enums import AXIS_RANGES, Axis


# ── Value Objects ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def is_valid(self) -> bool:
        lat_min, lat_max = AXIS_RANGES[Axis.LATITUDE]
        lng_min, lng_max = AXIS_RANGES[Axis.LONGITUDE]
        return (
            lat_min <= self.latitude <= lat_max
            and lng_min <= self.longitude <= lng_max
        )

    def distance_to(self, other: Coordinate) -> float:
        """Unrounded great-circle distance in km; no validation."""
        return haversine_km(
            self.latitude, self.longitude, other.latitude, other.longitude
        )


@dataclass(frozen=True)
class DistanceResult:
    distance_km: float
    from_: Coordinate
    to: Coordinate
