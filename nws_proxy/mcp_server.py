"""Weather proxy: MCP server exposing the forecast lookup as a tool.

Served over the streamable HTTP transport (default path ``/mcp``). The SDK's
session manager issues a random session id per client session.
"""

from __future__ import annotations

import json

import structlog
from mcp.server.fastmcp import FastMCP

from nws_proxy.client import NWSClient
from nws_proxy.errors import LocationNotSupportedError, WeatherLookupError
from nws_proxy.normalizer import WeatherNormalizer
from shared.config import Settings, get_settings

structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer(),
    ],
)

logger = structlog.get_logger()

TOOL_NAME = "get-forecast"
TOOL_DESCRIPTION = (
    "Get the weather forecast for a US location from the National Weather Service. "
    "Returns the next few forecast periods with temperature, wind, and a short description."
)
LOCATION_NOT_SUPPORTED = "Location not supported"


async def forecast_text(
    normalizer: WeatherNormalizer, latitude: float, longitude: float, max_periods: int
) -> str:
    """Run the forecast lookup and render it as the tool's text output."""
    try:
        report = await normalizer.get_forecast(latitude, longitude, limit=max_periods)
    except LocationNotSupportedError:
        return LOCATION_NOT_SUPPORTED
    except WeatherLookupError as e:
        return e.message

    periods = [p.model_dump(exclude_none=True) for p in report.forecast]
    return json.dumps(periods, indent=2, ensure_ascii=False)


def create_mcp_server(
    settings: Settings | None = None,
    normalizer: WeatherNormalizer | None = None,
) -> FastMCP:
    settings = settings or get_settings()
    if normalizer is None:
        normalizer = WeatherNormalizer(
            NWSClient(settings.nws_api_base, settings.nws_user_agent)
        )

    server = FastMCP(
        "weather",
        host=settings.host,
        port=settings.port,
        streamable_http_path=settings.mcp_path,
        log_level=settings.log_level.upper(),
    )

    @server.tool(name=TOOL_NAME, description=TOOL_DESCRIPTION)
    async def get_forecast(latitude: float, longitude: float) -> str:
        return await forecast_text(
            normalizer, latitude, longitude, settings.forecast_tool_max_periods
        )

    return server


def main() -> None:
    settings = get_settings()
    logger.info(
        "weather_mcp_starting",
        host=settings.host,
        port=settings.port,
        path=settings.mcp_path,
    )
    create_mcp_server(settings).run(transport="streamable-http")


if __name__ == "__main__":
    main()
