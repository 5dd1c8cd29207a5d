"""Pydantic models for NWS upstream documents and the proxy's response schema.

Upstream documents are untrusted: every field is optional, unknown keys are
ignored, and a field whose value has the wrong type decodes as ``None``. List
entries are kept raw (``list[Any]``) and decoded one by one by the normalizer,
so one bad record does not discard its siblings.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core.core_schema import ValidatorFunctionWrapHandler


# ---------------------------------------------------------------------------
# Upstream (api.weather.gov) documents
# ---------------------------------------------------------------------------


class UpstreamDocument(BaseModel):
    model_config = ConfigDict(
        extra="ignore", populate_by_name=True, coerce_numbers_to_str=True
    )

    @field_validator("*", mode="wrap")
    @classmethod
    def absent_when_invalid(cls, value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
        try:
            return handler(value)
        except ValidationError:
            return None


class PointProperties(UpstreamDocument):
    forecast: str | None = None


class PointsResponse(UpstreamDocument):
    """``GET /points/{lat},{lon}``."""

    properties: PointProperties | None = None


class UpstreamPeriod(UpstreamDocument):
    name: str | None = None
    temperature: int | float | None = None
    temperature_unit: str | None = Field(default=None, alias="temperatureUnit")
    wind_speed: str | None = Field(default=None, alias="windSpeed")
    wind_direction: str | None = Field(default=None, alias="windDirection")
    short_forecast: str | None = Field(default=None, alias="shortForecast")


class ForecastProperties(UpstreamDocument):
    periods: list[Any] | None = None  # raw UpstreamPeriod entries


class ForecastResponse(UpstreamDocument):
    """Forecast document at the URL returned by the points lookup."""

    properties: ForecastProperties | None = None


class AlertProperties(UpstreamDocument):
    event: str | None = None
    area_desc: str | None = Field(default=None, alias="areaDesc")
    severity: str | None = None
    headline: str | None = None


class AlertFeature(UpstreamDocument):
    properties: AlertProperties | None = None


class AlertsResponse(UpstreamDocument):
    """``GET /alerts?area={region}``."""

    features: list[Any] | None = None  # raw AlertFeature entries


# ---------------------------------------------------------------------------
# Proxy response schema
# ---------------------------------------------------------------------------


class ForecastPeriod(BaseModel):
    name: str | None = None
    temperature: str | None = None  # e.g. "72°F"
    wind: str | None = None  # e.g. "10 mph NW"
    forecast: str | None = None


class Alert(BaseModel):
    event: str | None = None
    area: str | None = None
    severity: str | None = None
    headline: str | None = None


class Location(BaseModel):
    latitude: float
    longitude: float


class ForecastReport(BaseModel):
    location: Location
    forecast: list[ForecastPeriod]


class AlertList(BaseModel):
    state: str
    alerts: list[Alert]


class NoActiveAlerts(BaseModel):
    state: str
    message: str
