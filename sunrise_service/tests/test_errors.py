"""Error translation tests."""

from __future__ import annotations

from fastapi.exceptions import RequestValidationError
import pytest
from starlette.exceptions import HTTPException as StarletteHTTPException

from sunrise_service.src.errors import (
    GeoLocationNotFoundError,
    GetGeoLocationError,
    GetSunriseSunsetError,
    InvalidParametersError,
    PathNotFoundError,
    resolve_error,
)


@pytest.mark.errors
@pytest.mark.parametrize(
    ("exc", "expected_status"),
    [
        (GeoLocationNotFoundError("not found"), 404),
        (PathNotFoundError("path not found: /api/wrong"), 404),
        (InvalidParametersError("address must not be empty"), 400),
        (GetGeoLocationError("big error"), 500),
        (GetSunriseSunsetError("big error"), 500),
        (RuntimeError("big error"), 500),
    ],
)
def test_resolve_error_maps_status_and_keeps_message(exc: Exception, expected_status: int) -> None:
    status_code, payload = resolve_error(exc)
    assert status_code == expected_status
    assert payload.error == str(exc)


@pytest.mark.errors
def test_resolve_error_formats_request_validation_errors() -> None:
    exc = RequestValidationError(
        [{"type": "missing", "loc": ("body", "address"), "msg": "Field required", "input": {"wrong": "x"}}]
    )
    status_code, payload = resolve_error(exc)
    assert status_code == 400
    assert payload.error == "body.address: Field required"


@pytest.mark.errors
def test_resolve_error_keeps_framework_http_status() -> None:
    status_code, payload = resolve_error(StarletteHTTPException(status_code=405, detail="Method Not Allowed"))
    assert status_code == 405
    assert payload.error == "Method Not Allowed"


@pytest.mark.errors
def test_resolve_error_never_returns_empty_message() -> None:
    status_code, payload = resolve_error(RuntimeError())
    assert status_code == 500
    assert payload.error == "internal server error"

    status_code, payload = resolve_error(RequestValidationError([]))
    assert status_code == 400
    assert payload.error == "invalid request"
