"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "info"

    # National Weather Service upstream
    nws_api_base: str = "https://api.weather.gov"
    # NWS rejects requests without an identifying User-Agent
    nws_user_agent: str = "weather-app/1.0"

    # MCP tool variant
    mcp_path: str = "/mcp"
    forecast_tool_max_periods: int = 5

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
