"""Composes geolocation and sunrise/sunset lookups into one location response."""

from __future__ import annotations

import logging

from sunrise_service.src.errors import InvalidParametersError
from sunrise_service.src.geolocation import GeoLocationService
from sunrise_service.src.schemas import LocationResponse
from sunrise_service.src.sunrise_sunset import SunriseSunsetService


logger = logging.getLogger(__name__)


class ApiHandler:
    """Runs the two lookups in sequence; failures propagate untouched."""

    def __init__(
        self,
        geo_location_service: GeoLocationService,
        sunrise_sunset_service: SunriseSunsetService,
    ) -> None:
        self.geo_location_service = geo_location_service
        self.sunrise_sunset_service = sunrise_sunset_service

    async def get_location(self, address: str) -> LocationResponse:
        normalized_address = address.strip()
        if not normalized_address:
            raise InvalidParametersError("address must not be empty")

        coordinates = await self.geo_location_service.from_address(normalized_address)
        sunrise_sunset = await self.sunrise_sunset_service.from_geographic_coordinates(coordinates)
        logger.debug("Resolved location", extra={"address": normalized_address})
        return LocationResponse(geographic_coordinates=coordinates, sunrise_sunset=sunrise_sunset)
