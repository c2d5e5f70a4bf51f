"""Shared pytest fixtures."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from sunrise_service.main import app
from sunrise_service.src.schemas import GeographicCoordinates, SunriseSunset
from sunrise_service.tests.sample_data import GOOGLE_LAT, GOOGLE_LNG, SUNRISE_TIME, SUNSET_TIME


@pytest.fixture()
def google_coordinates() -> GeographicCoordinates:
    return GeographicCoordinates(latitude=GOOGLE_LAT, longitude=GOOGLE_LNG)


@pytest.fixture()
def google_sunrise_sunset() -> SunriseSunset:
    return SunriseSunset(sunrise=SUNRISE_TIME, sunset=SUNSET_TIME)


@pytest.fixture()
def test_client() -> TestClient:
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client
