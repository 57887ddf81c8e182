"""
Error taxonomy and the tagged result returned by the calculator.

The calculator never raises across its boundary: it returns either
``Ok(value)`` or ``Err(DistanceError)`` and the API layer decides how each
error kind maps to a transport response.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

from .enums import AXIS_RANGES, Axis, ErrorKind, Side

T = TypeVar("T")

MISSING_MESSAGE = "Both 'from' and 'to' are required"
OUT_OF_RANGE_MESSAGE = (
    "Coordinates must be within ranges: Lat[-90,90], Lon[-180,180]"
)
INTERNAL_MESSAGE = "Server error while calculating distance"


@dataclass(frozen=True)
class DistanceError:
    kind: ErrorKind
    message: str
    side: Optional[Side] = None
    axis: Optional[Axis] = None
    value: Optional[float] = None
    cause: Optional[str] = None

    @property
    def details(self) -> Optional[str]:
        """Human-readable diagnostic naming what exactly failed."""
        if self.kind is ErrorKind.MISSING_COORDINATE:
            return f"Coordinate '{self.side.value}' is missing"
        if self.kind is ErrorKind.COORDINATE_OUT_OF_RANGE:
            low, high = AXIS_RANGES[self.axis]
            return (
                f"'{self.side.value}' {self.axis.value} {self.value} "
                f"is outside [{low:g}, {high:g}]"
            )
        return self.cause

    @property
    def is_validation_error(self) -> bool:
        return self.kind in (
            ErrorKind.MISSING_COORDINATE,
            ErrorKind.COORDINATE_OUT_OF_RANGE,
        )

    # ── Factories ─────────────────────────────────────────────────

    @classmethod
    def missing(cls, side: Side) -> DistanceError:
        return cls(ErrorKind.MISSING_COORDINATE, MISSING_MESSAGE, side=side)

    @classmethod
    def out_of_range(cls, side: Side, axis: Axis, value: float) -> DistanceError:
        return cls(
            ErrorKind.COORDINATE_OUT_OF_RANGE,
            OUT_OF_RANGE_MESSAGE,
            side=side,
            axis=axis,
            value=value,
        )

    @classmethod
    def internal(cls, cause: str) -> DistanceError:
        return cls(ErrorKind.INTERNAL_COMPUTATION_ERROR, INTERNAL_MESSAGE, cause=cause)


# ── Result ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    error: DistanceError

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]
