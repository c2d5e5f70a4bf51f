"""Pydantic API schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class GeographicCoordinates(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    latitude: float
    longitude: float


class SunriseSunset(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    sunrise: str
    sunset: str


class LocationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    address: str


class LocationResponse(BaseModel):
    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)

    geographic_coordinates: GeographicCoordinates
    sunrise_sunset: SunriseSunset


class ErrorResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    error: str


class HealthResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: Literal["ok"] = "ok"
