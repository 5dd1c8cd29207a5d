"""Forecast and alert lookups: chain upstream calls and flatten the results."""

from __future__ import annotations

from typing import Any, TypeVar

import structlog
from pydantic import ValidationError

from nws_proxy.client import NWSClient, UpstreamFailure, UpstreamResult
from nws_proxy.errors import DataRetrievalError, LocationNotSupportedError
from nws_proxy.models import (
    Alert,
    AlertFeature,
    AlertList,
    AlertsResponse,
    ForecastPeriod,
    ForecastReport,
    ForecastResponse,
    Location,
    NoActiveAlerts,
    PointsResponse,
    UpstreamDocument,
    UpstreamPeriod,
)

logger = structlog.get_logger()

DocumentT = TypeVar("DocumentT", bound=UpstreamDocument)

FORECAST_FAILED = "Failed to retrieve forecast data"
ALERTS_FAILED = "Failed to retrieve alerts data"


def _decode(model: type[DocumentT], result: UpstreamResult) -> DocumentT | None:
    """Decode an upstream result into ``model``, or None if there is nothing usable."""
    if isinstance(result, UpstreamFailure):
        return None
    try:
        return model.model_validate(result.payload)
    except ValidationError as e:
        logger.warning(
            "nws_document_invalid", document=model.__name__, errors=e.error_count()
        )
        return None


def _decode_entry(model: type[DocumentT], raw: Any) -> DocumentT:
    """Decode one list entry; an entry that is not an object becomes an empty record."""
    try:
        return model.model_validate(raw)
    except ValidationError:
        logger.warning("nws_entry_invalid", document=model.__name__)
        return model()


def _format_number(value: int | float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _format_period(period: UpstreamPeriod) -> ForecastPeriod:
    temperature = None
    if period.temperature is not None and period.temperature_unit is not None:
        temperature = f"{_format_number(period.temperature)}°{period.temperature_unit}"

    wind = None
    if period.wind_speed is not None and period.wind_direction is not None:
        wind = f"{period.wind_speed} {period.wind_direction}"

    return ForecastPeriod(
        name=period.name,
        temperature=temperature,
        wind=wind,
        forecast=period.short_forecast,
    )


def _format_alert(feature: AlertFeature) -> Alert:
    props = feature.properties
    if props is None:
        return Alert()
    return Alert(
        event=props.event,
        area=props.area_desc,
        severity=props.severity,
        headline=props.headline,
    )


class WeatherNormalizer:
    """Maps NWS documents onto the proxy's flat forecast and alert records."""

    def __init__(self, client: NWSClient):
        self.client = client

    async def get_forecast(
        self, latitude: float, longitude: float, limit: int | None = None
    ) -> ForecastReport:
        """Resolve a forecast for the coordinates via the points lookup.

        Args:
            limit: Keep only the first ``limit`` periods. ``None`` keeps all.

        Raises:
            LocationNotSupportedError: The points lookup yielded no forecast URL.
            DataRetrievalError: The forecast document had no periods.
        """
        points = _decode(
            PointsResponse,
            await self.client.fetch(self.client.points_url(latitude, longitude)),
        )
        if points is None or points.properties is None or not points.properties.forecast:
            logger.info(
                "forecast_location_unsupported", latitude=latitude, longitude=longitude
            )
            raise LocationNotSupportedError()

        forecast = _decode(
            ForecastResponse, await self.client.fetch(points.properties.forecast)
        )
        if forecast is None or forecast.properties is None or forecast.properties.periods is None:
            logger.warning("forecast_periods_missing", url=points.properties.forecast)
            raise DataRetrievalError(FORECAST_FAILED)

        periods = [
            _format_period(_decode_entry(UpstreamPeriod, p))
            for p in forecast.properties.periods
        ]
        if limit is not None:
            periods = periods[:limit]

        return ForecastReport(
            location=Location(latitude=latitude, longitude=longitude),
            forecast=periods,
        )

    async def get_alerts(self, region: str) -> AlertList | NoActiveAlerts:
        """Fetch alerts for a region (state or marine zone code), case-insensitive.

        Raises:
            DataRetrievalError: The alerts query failed.
        """
        state = region.upper()
        alerts = _decode(AlertsResponse, await self.client.fetch(self.client.alerts_url(state)))
        if alerts is None:
            logger.warning("alerts_fetch_failed", state=state)
            raise DataRetrievalError(ALERTS_FAILED)

        if not alerts.features:
            return NoActiveAlerts(state=state, message=f"No active alerts for {state}")

        return AlertList(
            state=state,
            alerts=[_format_alert(_decode_entry(AlertFeature, f)) for f in alerts.features],
        )
