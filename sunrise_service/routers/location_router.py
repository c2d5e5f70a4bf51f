"""Location endpoints: address in, coordinates plus sunrise/sunset out."""

from __future__ import annotations

from fastapi import APIRouter, Request

from sunrise_service.src.handler import ApiHandler
from sunrise_service.src.schemas import ErrorResponse, LocationRequest, LocationResponse


router = APIRouter(
    prefix="/api/location",
    tags=["location"],
    redirect_slashes=False,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


def _api_handler(request: Request) -> ApiHandler:
    return ApiHandler(
        geo_location_service=request.app.state.geo_location_service,
        sunrise_sunset_service=request.app.state.sunrise_sunset_service,
    )


@router.get("/{address}", response_model=LocationResponse)
async def get_location(address: str, request: Request) -> LocationResponse:
    return await _api_handler(request).get_location(address)


@router.post("", response_model=LocationResponse)
async def post_location(payload: LocationRequest, request: Request) -> LocationResponse:
    return await _api_handler(request).get_location(payload.address)
