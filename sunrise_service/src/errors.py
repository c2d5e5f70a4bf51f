"""Location pipeline failures and their translation into HTTP error payloads."""

from __future__ import annotations

from typing import Any

from fastapi.exceptions import RequestValidationError
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from sunrise_service.src.schemas import ErrorResponse


ADDRESS_NOT_FOUND = "address not found"

_FALLBACK_MESSAGES = {
    status.HTTP_400_BAD_REQUEST: "invalid request",
    status.HTTP_404_NOT_FOUND: "not found",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "internal server error",
}


class LocationServiceError(Exception):
    """Base class for failures raised while resolving a location."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class GeoLocationNotFoundError(LocationServiceError):
    """The geocoding provider has no match for the address."""


class GetGeoLocationError(LocationServiceError):
    """The geocoding provider could not be queried or answered with an error."""


class GetSunriseSunsetError(LocationServiceError):
    """The sunrise/sunset provider could not be queried or answered with an error."""


class InvalidParametersError(LocationServiceError):
    """The request does not carry a usable address."""


class PathNotFoundError(LocationServiceError):
    """No route matches the requested path."""


def _format_validation_errors(errors: list[dict[str, Any]]) -> str:
    parts: list[str] = []
    for item in errors:
        location = ".".join(str(part) for part in item.get("loc", ()))
        message = str(item.get("msg", "")).strip()
        if location and message:
            parts.append(f"{location}: {message}")
        elif message:
            parts.append(message)
    return "; ".join(parts)


def resolve_error(exc: Exception) -> tuple[int, ErrorResponse]:
    """Map any pipeline failure to the status code and body sent to the client."""
    if isinstance(exc, (GeoLocationNotFoundError, PathNotFoundError)):
        status_code = status.HTTP_404_NOT_FOUND
        message = exc.message
    elif isinstance(exc, InvalidParametersError):
        status_code = status.HTTP_400_BAD_REQUEST
        message = exc.message
    elif isinstance(exc, RequestValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
        message = _format_validation_errors(list(exc.errors()))
    elif isinstance(exc, StarletteHTTPException):
        status_code = exc.status_code
        message = exc.detail if isinstance(exc.detail, str) else ""
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        message = exc.message if isinstance(exc, LocationServiceError) else str(exc)

    message = message.strip()
    if not message:
        message = _FALLBACK_MESSAGES.get(status_code, "request failed")
    return status_code, ErrorResponse(error=message)
