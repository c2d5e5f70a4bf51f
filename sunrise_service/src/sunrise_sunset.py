"""Sunrise and sunset lookups against the sunrise-sunset.org API."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx

from sunrise_service.src.errors import GetSunriseSunsetError
from sunrise_service.src.schemas import GeographicCoordinates, SunriseSunset


DEFAULT_SUNRISE_SUNSET_ENDPOINT = "https://api.sunrise-sunset.org/json"
SUNRISE_SUNSET_ERROR = "can not get sunrise sunset"

logger = logging.getLogger(__name__)


class SunriseSunsetService(Protocol):
    """Sunrise/sunset contract shared by real and test implementations."""

    async def from_geographic_coordinates(self, coordinates: GeographicCoordinates) -> SunriseSunset:
        raise NotImplementedError


class SunriseSunsetApiService:
    """Fetches today's sunrise and sunset for a coordinate pair."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        endpoint: str = DEFAULT_SUNRISE_SUNSET_ENDPOINT,
    ) -> None:
        self.client = client
        self.endpoint = endpoint.strip() or DEFAULT_SUNRISE_SUNSET_ENDPOINT

    async def from_geographic_coordinates(self, coordinates: GeographicCoordinates) -> SunriseSunset:
        payload = await self._request_json(coordinates)
        if payload.get("status") != "OK":
            logger.warning("Sunrise/sunset lookup failed with status '%s'", payload.get("status"))
            raise GetSunriseSunsetError(SUNRISE_SUNSET_ERROR)

        results = payload.get("results")
        if not isinstance(results, dict):
            raise GetSunriseSunsetError(SUNRISE_SUNSET_ERROR)
        sunrise = results.get("sunrise")
        sunset = results.get("sunset")
        if not isinstance(sunrise, str) or not isinstance(sunset, str):
            raise GetSunriseSunsetError(SUNRISE_SUNSET_ERROR)
        return SunriseSunset(sunrise=sunrise, sunset=sunset)

    async def _request_json(self, coordinates: GeographicCoordinates) -> dict[str, Any]:
        params = {
            "lat": coordinates.latitude,
            "lng": coordinates.longitude,
            "date": "today",
        }
        try:
            response = await self.client.get(self.endpoint, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.TimeoutException as exc:
            logger.error("Sunrise/sunset request timed out")
            raise GetSunriseSunsetError(f"{SUNRISE_SUNSET_ERROR}: request timed out") from exc
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            logger.error("Sunrise/sunset upstream HTTP error %s", status_code)
            raise GetSunriseSunsetError(f"{SUNRISE_SUNSET_ERROR}: provider returned HTTP {status_code}") from exc
        except httpx.RequestError as exc:
            logger.error("Sunrise/sunset service is unavailable: %s", exc)
            raise GetSunriseSunsetError(f"{SUNRISE_SUNSET_ERROR}: service unavailable") from exc
        except ValueError as exc:
            raise GetSunriseSunsetError(f"{SUNRISE_SUNSET_ERROR}: invalid JSON response") from exc

        if not isinstance(payload, dict):
            raise GetSunriseSunsetError(SUNRISE_SUNSET_ERROR)
        return payload
