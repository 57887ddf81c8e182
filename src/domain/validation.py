"""Explicit coordinate validation, run before any distance computation."""

from __future__ import annotations

from typing import Optional

from .entities import Coordinate
from .enums import AXIS_RANGES, Axis, Side
from .errors import DistanceError


def validate_coordinate(
    side: Side, coordinate: Optional[Coordinate]
) -> Optional[DistanceError]:
    """
    Return the first violation for *coordinate*, or ``None`` if it is usable.

    Latitude is checked before longitude.  NaN and infinities fail the
    range comparison and are therefore reported as out of range.
    """
    if coordinate is None:
        return DistanceError.missing(side)

    for axis in (Axis.LATITUDE, Axis.LONGITUDE):
        value = getattr(coordinate, axis.value)
        low, high = AXIS_RANGES[axis]
        if not low <= value <= high:
            return DistanceError.out_of_range(side, axis, value)
    return None


def validate_pair(
    from_: Optional[Coordinate], to: Optional[Coordinate]
) -> Optional[DistanceError]:
    """Presence of both sides first, then ranges (``from`` before ``to``)."""
    if from_ is None:
        return DistanceError.missing(Side.FROM)
    if to is None:
        return DistanceError.missing(Side.TO)
    return validate_coordinate(Side.FROM, from_) or validate_coordinate(
        Side.TO, to
    )
