"""Weather proxy: FastAPI service."""

from __future__ import annotations

import math

import structlog
import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from nws_proxy.client import NWSClient
from nws_proxy.errors import WeatherLookupError
from nws_proxy.models import NoActiveAlerts
from nws_proxy.normalizer import WeatherNormalizer
from shared.config import Settings, get_settings
from shared.schemas.common import ErrorResponse, HealthResponse, MessageResponse

structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer(),
    ],
)

logger = structlog.get_logger()

MISSING_COORDINATES = "Please provide latitude and longitude query parameters"
INVALID_COORDINATES = "latitude and longitude must be numeric"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def _parse_coordinate(raw: str) -> float | None:
    """Coerce a query value to a finite float, or None."""
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def get_normalizer(request: Request) -> WeatherNormalizer:
    return request.app.state.normalizer


def create_app(
    settings: Settings | None = None,
    normalizer: WeatherNormalizer | None = None,
) -> FastAPI:
    """Build the HTTP app.

    A ``normalizer`` can be passed in to substitute the upstream (tests);
    otherwise one is built against ``settings.nws_api_base``.
    """
    settings = settings or get_settings()
    if normalizer is None:
        normalizer = WeatherNormalizer(
            NWSClient(settings.nws_api_base, settings.nws_user_agent)
        )

    app = FastAPI(title="Weather API", version="1.0.0")
    app.state.normalizer = normalizer

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", response_model=MessageResponse)
    async def root():
        return MessageResponse(message="Weather API is running")

    @app.get("/health", response_model=HealthResponse)
    async def health():
        return HealthResponse(status="ok")

    @app.get("/alerts/{region}")
    async def alerts(region: str, weather: WeatherNormalizer = Depends(get_normalizer)):
        """Active alerts for a state or region code."""
        try:
            result = await weather.get_alerts(region)
        except WeatherLookupError as e:
            return _error(e.status_code, e.message)

        if isinstance(result, NoActiveAlerts):
            return {"message": result.message}
        return result.model_dump(exclude_none=True)

    @app.get("/forecast")
    async def forecast(
        latitude: str | None = None,
        longitude: str | None = None,
        weather: WeatherNormalizer = Depends(get_normalizer),
    ):
        """Forecast periods for a coordinate pair (US only)."""
        if not latitude or not longitude:
            return _error(400, MISSING_COORDINATES)

        lat = _parse_coordinate(latitude)
        lon = _parse_coordinate(longitude)
        if lat is None or lon is None:
            return _error(400, INVALID_COORDINATES)

        try:
            report = await weather.get_forecast(lat, lon)
        except WeatherLookupError as e:
            return _error(e.status_code, e.message)

        return report.model_dump(exclude_none=True)

    return app


def main() -> None:
    settings = get_settings()
    logger.info("weather_api_starting", host=settings.host, port=settings.port)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
