"""Domain enumerations and coordinate range rules."""

import enum


class ErrorKind(str, enum.Enum):
    MISSING_COORDINATE = "MISSING_COORDINATE"
    COORDINATE_OUT_OF_RANGE = "COORDINATE_OUT_OF_RANGE"
    INTERNAL_COMPUTATION_ERROR = "INTERNAL_COMPUTATION_ERROR"


class Side(str, enum.Enum):
    FROM = "from"
    TO = "to"


class Axis(str, enum.Enum):
    LATITUDE = "latitude"
    LONGITUDE = "longitude"


# Inclusive legal range per axis, in degrees
AXIS_RANGES: dict[Axis, tuple[float, float]] = {
    Axis.LATITUDE: (-90.0, 90.0),
    Axis.LONGITUDE: (-180.0, 180.0),
}
