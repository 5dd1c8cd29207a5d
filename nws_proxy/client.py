"""National Weather Service (api.weather.gov) HTTP client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from urllib.parse import urlencode

import httpx
import structlog

logger = structlog.get_logger()

DEFAULT_API_BASE = "https://api.weather.gov"
DEFAULT_USER_AGENT = "weather-app/1.0"
GEO_JSON = "application/geo+json"


@dataclass(frozen=True)
class UpstreamSuccess:
    """A 2xx response whose body parsed as JSON. The payload is unchecked."""

    payload: Any


@dataclass(frozen=True)
class UpstreamFailure:
    """Any non-2xx status, transport error, or undecodable body."""

    reason: str


UpstreamResult = UpstreamSuccess | UpstreamFailure


def _format_coordinate(value: float) -> str:
    # forwarded as given; NWS redirects long forms to its rounded point
    if value.is_integer():
        return str(int(value))
    return repr(value)


class NWSClient:
    """Async client for the NWS API.

    Every ``fetch`` is a single GET with no retries. Failures are logged and
    collapsed into ``UpstreamFailure`` so callers only see "no data".
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self._transport = transport

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent, "Accept": GEO_JSON}

    def points_url(self, latitude: float, longitude: float) -> str:
        return (
            f"{self.base_url}/points/"
            f"{_format_coordinate(latitude)},{_format_coordinate(longitude)}"
        )

    def alerts_url(self, region: str) -> str:
        return f"{self.base_url}/alerts?{urlencode({'area': region})}"

    async def fetch(self, url: str) -> UpstreamResult:
        """GET ``url`` and return its JSON body, or a failure."""
        try:
            async with httpx.AsyncClient(
                headers=self.headers,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                resp = await client.get(url)
                resp.raise_for_status()
                return UpstreamSuccess(resp.json())
        except httpx.HTTPStatusError as e:
            logger.error("nws_http_error", url=url, status=e.response.status_code)
            return UpstreamFailure(f"HTTP error: {e.response.status_code}")
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.error("nws_request_error", url=url, error=str(e))
            return UpstreamFailure(f"Request failed: {e}")
        except ValueError as e:
            logger.error("nws_invalid_json", url=url, error=str(e))
            return UpstreamFailure("Response body is not valid JSON")
