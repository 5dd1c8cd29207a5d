"""Test fixtures and canned NWS documents for weather proxy tests."""

from __future__ import annotations

import httpx

API_BASE = "https://api.weather.gov"

SEATTLE_POINTS_PATH = "/points/47.6,-122.3"
SEATTLE_FORECAST_PATH = "/gridpoints/SEW/125,68/forecast"
SEATTLE_FORECAST_URL = f"{API_BASE}{SEATTLE_FORECAST_PATH}"

POINTS_RESPONSE = {
    "id": f"{API_BASE}/points/47.6,-122.3",
    "type": "Feature",
    "properties": {
        "gridId": "SEW",
        "gridX": 125,
        "gridY": 68,
        "forecast": SEATTLE_FORECAST_URL,
        "forecastHourly": f"{SEATTLE_FORECAST_URL}/hourly",
        "relativeLocation": {
            "properties": {"city": "Seattle", "state": "WA"},
        },
    },
}

# Outside NWS coverage: points resolves but carries no forecast link.
POINTS_RESPONSE_NO_FORECAST = {
    "type": "Feature",
    "properties": {"gridId": None},
}


def _period(number: int, name: str, temperature: int, wind: str, direction: str, short: str) -> dict:
    return {
        "number": number,
        "name": name,
        "startTime": "2026-10-18T06:00:00-07:00",
        "isDaytime": number % 2 == 1,
        "temperature": temperature,
        "temperatureUnit": "F",
        "windSpeed": wind,
        "windDirection": direction,
        "icon": f"{API_BASE}/icons/land/day/rain",
        "shortForecast": short,
        "detailedForecast": f"{short}. High near {temperature}.",
    }


FORECAST_RESPONSE = {
    "type": "Feature",
    "properties": {
        "updated": "2026-10-18T10:00:00+00:00",
        "periods": [
            _period(1, "Today", 58, "5 to 10 mph", "SW", "Light Rain"),
            _period(2, "Tonight", 49, "5 mph", "S", "Rain Likely"),
            _period(3, "Monday", 57, "10 mph", "SW", "Chance Light Rain"),
            _period(4, "Monday Night", 47, "5 mph", "SSW", "Mostly Cloudy"),
            _period(5, "Tuesday", 60, "5 mph", "N", "Partly Sunny"),
            _period(6, "Tuesday Night", 46, "3 mph", "NE", "Partly Cloudy"),
            _period(7, "Wednesday", 62, "3 mph", "NW", "Sunny"),
        ],
    },
}

FORECAST_RESPONSE_NO_PERIODS = {
    "type": "Feature",
    "properties": {"updated": "2026-10-18T10:00:00+00:00"},
}

ALERTS_RESPONSE = {
    "type": "FeatureCollection",
    "features": [
        {
            "id": "urn:oid:2.49.0.1.840.0.1",
            "properties": {
                "event": "Flood Warning",
                "areaDesc": "Coastal Counties",
                "severity": "Severe",
                "status": "Actual",
                "headline": "Flood warning issued",
            },
        },
        {
            "id": "urn:oid:2.49.0.1.840.0.2",
            "properties": {
                "event": "Wind Advisory",
                "areaDesc": "San Francisco Bay Shoreline",
                "severity": "Moderate",
                "status": "Actual",
                "headline": "Wind Advisory issued October 18 at 3:00AM PDT",
            },
        },
    ],
}

ALERTS_RESPONSE_SINGLE = {
    "type": "FeatureCollection",
    "features": [ALERTS_RESPONSE["features"][0]],
}

ALERTS_RESPONSE_EMPTY = {
    "type": "FeatureCollection",
    "features": [],
}


class UpstreamStub:
    """Serves canned NWS responses keyed by URL path and records every request.

    ``routes`` maps a path to ``(status_code, json_body)``. Unknown paths 404.
    """

    def __init__(self, routes: dict[str, tuple[int, object]] | None = None):
        self.routes = routes or {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"status": 404, "title": "Not Found"})
        status, body = route
        return httpx.Response(status, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]
