"""Address to coordinates resolution backed by the Google Geocoding API."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from sunrise_service.src.errors import ADDRESS_NOT_FOUND, GeoLocationNotFoundError, GetGeoLocationError
from sunrise_service.src.schemas import GeographicCoordinates


DEFAULT_GEOCODER_ENDPOINT = "https://maps.googleapis.com/maps/api/geocode/json"

logger = logging.getLogger(__name__)


class GeoLocationService(Protocol):
    """Geolocation contract shared by real and test implementations."""

    async def from_address(self, address: str) -> GeographicCoordinates:
        raise NotImplementedError


def _parse_coordinates(result: Any) -> GeographicCoordinates | None:
    if not isinstance(result, dict):
        return None
    geometry = result.get("geometry")
    location = geometry.get("location") if isinstance(geometry, dict) else None
    if not isinstance(location, dict):
        return None
    try:
        latitude = float(location.get("lat"))
        longitude = float(location.get("lng"))
    except (TypeError, ValueError):
        return None
    return GeographicCoordinates(latitude=latitude, longitude=longitude)


class GoogleGeoLocationService:
    """Resolves the first Google geocoding match for an address."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        endpoint: str = DEFAULT_GEOCODER_ENDPOINT,
        api_key: str = "",
    ) -> None:
        self.client = client
        self.endpoint = endpoint.strip() or DEFAULT_GEOCODER_ENDPOINT
        self.api_key = api_key.strip()

    async def from_address(self, address: str) -> GeographicCoordinates:
        payload = await self._request_json(address)
        provider_status = payload.get("status")
        results = payload.get("results")

        if provider_status == "ZERO_RESULTS" or (provider_status == "OK" and not results):
            raise GeoLocationNotFoundError(ADDRESS_NOT_FOUND)

        if provider_status != "OK":
            error_message = payload.get("error_message")
            logger.warning(
                "Geocoding failed with status '%s' and message '%s'",
                provider_status,
                error_message,
                extra={"address": address},
            )
            detail = f"error getting geolocation: {provider_status or 'unknown status'}"
            if error_message:
                detail = f"{detail} - {error_message}"
            raise GetGeoLocationError(detail)

        if not isinstance(results, list):
            raise GetGeoLocationError("error getting geolocation: unexpected response format")
        coordinates = _parse_coordinates(results[0])
        if coordinates is None:
            raise GetGeoLocationError("error getting geolocation: unexpected response format")
        return coordinates

    async def _request_json(self, address: str) -> dict[str, Any]:
        params = {"address": address}
        if self.api_key:
            params["key"] = self.api_key

        try:
            response = await self.client.get(self.endpoint, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.TimeoutException as exc:
            logger.error("Geocoding request timed out", extra={"address": address})
            raise GetGeoLocationError("error getting geolocation: request timed out") from exc
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            logger.error(
                "Geocoding upstream HTTP error %s: %s",
                status_code,
                exc.response.text,
                extra={"address": address},
            )
            raise GetGeoLocationError(f"error getting geolocation: provider returned HTTP {status_code}") from exc
        except httpx.RequestError as exc:
            logger.error("Geocoding service is unavailable: %s", exc, extra={"address": address})
            raise GetGeoLocationError("error getting geolocation: service unavailable") from exc
        except ValueError as exc:
            raise GetGeoLocationError("error getting geolocation: invalid JSON response") from exc

        if not isinstance(payload, dict):
            raise GetGeoLocationError("error getting geolocation: unexpected response format")
        return payload
