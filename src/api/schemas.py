"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, StrictFloat

from src.domain.entities import Coordinate, DistanceResult


# ── Requests ──────────────────────────────────────────────────────────


class CoordinateSchema(BaseModel):
    # No ge/le bounds here: range checks belong to the domain validator so
    # the error can name the failing side and axis.  Strict floats reject
    # booleans and numeric strings; JSON integers still pass.
    latitude: StrictFloat = Field(..., description="Latitude in degrees, [-90, 90].")
    longitude: StrictFloat = Field(..., description="Longitude in degrees, [-180, 180].")

    def to_domain(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)

    @classmethod
    def from_domain(cls, coordinate: Coordinate) -> CoordinateSchema:
        return cls(latitude=coordinate.latitude, longitude=coordinate.longitude)


class DistanceRequest(BaseModel):
    from_: Optional[CoordinateSchema] = Field(None, alias="from")
    to: Optional[CoordinateSchema] = None

    model_config = {"populate_by_name": True}


# ── Responses ─────────────────────────────────────────────────────────


class DistanceResponse(BaseModel):
    distance_km: float = Field(..., alias="distanceKm")
    from_: CoordinateSchema = Field(..., alias="from")
    to: CoordinateSchema

    model_config = {"populate_by_name": True}

    @classmethod
    def from_result(cls, result: DistanceResult) -> DistanceResponse:
        return cls(
            distance_km=result.distance_km,
            from_=CoordinateSchema.from_domain(result.from_),
            to=CoordinateSchema.from_domain(result.to),
        )


class ErrorResponse(BaseModel):
    message: str
    details: Optional[str] = None
