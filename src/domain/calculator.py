"""
Distance Calculator
===================

Validates two coordinates and returns their great-circle distance.

Flow
----
1. **Presence**  -- both ``from`` and ``to`` must be given.
2. **Range**     -- latitude in [-90, 90], longitude in [-180, 180].
3. **Haversine** -- only reached when validation passes.
4. **Rounding**  -- the caller only ever sees 3 decimal places.

The calculator is stateless, so one instance can serve every request
concurrently.  Failures come back as ``Err`` values, never as raised
exceptions.

Complexity: O(1) per call.
"""

from __future__ import annotations

import logging
import math
from typing import Optional

from .distance import haversine_km
from .entities import Coordinate, DistanceResult
from .errors import DistanceError, Err, Ok, Result
from .validation import validate_pair

logger = logging.getLogger(__name__)

DECIMAL_PLACES = 3


class DistanceCalculator:
    """High-level API used by the distance route."""

    def __init__(self, decimal_places: int = DECIMAL_PLACES):
        self.decimal_places = decimal_places

    def compute(
        self, from_: Optional[Coordinate], to: Optional[Coordinate]
    ) -> Result[DistanceResult]:
        error = validate_pair(from_, to)
        if error is not None:
            return Err(error)

        try:
            distance = self._distance(from_, to)
        except Exception as exc:
            logger.exception("Distance computation failed")
            return Err(DistanceError.internal(str(exc)))

        logger.debug("Computed distance %.6f km", distance)
        return Ok(
            DistanceResult(
                distance_km=round(distance, self.decimal_places),
                from_=from_,
                to=to,
            )
        )

    @staticmethod
    def _distance(from_: Coordinate, to: Coordinate) -> float:
        distance = haversine_km(
            from_.latitude, from_.longitude, to.latitude, to.longitude
        )
        if not math.isfinite(distance) or distance < 0:
            raise ArithmeticError(f"Non-finite or negative distance: {distance}")
        return distance
