"""FastAPI entrypoint for the sunrise/sunset location service."""

from __future__ import annotations

from contextlib import asynccontextmanager
import logging
import os

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import httpx
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from sunrise_service.routers.location_router import router as location_router
from sunrise_service.src.errors import LocationServiceError, PathNotFoundError, resolve_error
from sunrise_service.src.geolocation import DEFAULT_GEOCODER_ENDPOINT, GoogleGeoLocationService
from sunrise_service.src.observability import setup_logging
from sunrise_service.src.schemas import HealthResponse
from sunrise_service.src.sunrise_sunset import DEFAULT_SUNRISE_SUNSET_ENDPOINT, SunriseSunsetApiService


logger = logging.getLogger(__name__)


def _load_timeout_seconds() -> float:
    timeout_seconds = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))
    if timeout_seconds <= 0:
        raise ValueError("HTTP_TIMEOUT_SECONDS must be greater than 0")
    return timeout_seconds


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(os.getenv("LOG_LEVEL", "INFO"), os.getenv("LOG_FORMAT", "json"))
    async with httpx.AsyncClient(timeout=_load_timeout_seconds()) as client:
        app.state.geo_location_service = GoogleGeoLocationService(
            client,
            endpoint=os.getenv("GEOCODER_ENDPOINT", DEFAULT_GEOCODER_ENDPOINT),
            api_key=os.getenv("GEOCODER_API_KEY", ""),
        )
        app.state.sunrise_sunset_service = SunriseSunsetApiService(
            client,
            endpoint=os.getenv("SUNRISE_SUNSET_ENDPOINT", DEFAULT_SUNRISE_SUNSET_ENDPOINT),
        )
        logger.info("Sunrise/sunset location service started")
        yield
    logger.info("Sunrise/sunset location service shutting down")


app = FastAPI(title="Sunrise/Sunset Location API", lifespan=lifespan, redirect_slashes=False)


def _error_json(request: Request, exc: Exception, headers: dict[str, str] | None = None) -> JSONResponse:
    status_code, payload = resolve_error(exc)
    extra = {"path": request.url.path, "method": request.method, "status_code": status_code}
    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Request failed: %s", payload.error, extra=extra, exc_info=exc)
    else:
        logger.warning("Request rejected: %s", payload.error, extra=extra)
    return JSONResponse(status_code=status_code, content=payload.model_dump(), headers=headers)


# Registered before CORS so unexpected failures still get CORS headers.
@app.middleware("http")
async def unexpected_error_middleware(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as exc:
        return _error_json(request, exc)


cors_origins = os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:5173")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[item.strip() for item in cors_origins.split(",") if item.strip()],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(location_router)


@app.get("/api/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse()


@app.exception_handler(LocationServiceError)
async def location_error_handler(request: Request, exc: LocationServiceError) -> JSONResponse:
    return _error_json(request, exc)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error_json(request, exc)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Only GET /{address} and POST are routed; any other method or path is unmatched.
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return _error_json(request, PathNotFoundError(f"path not found: {request.method} {request.url.path}"))
    return _error_json(request, exc, headers=exc.headers)
