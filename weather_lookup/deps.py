# ABOUTME: Settings and dependency container for the weather lookup components.
# ABOUTME: Reads configuration from the environment (.env aware) and wires client, storage, and favorites.

import logging
import os
from pathlib import Path

import httpx
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from weather_lookup.favorites import FavoritesStore
from weather_lookup.storage import InMemoryStorage, JsonFileStorage
from weather_lookup.weather_service import DEFAULT_TIMEOUT_MS, OPENWEATHER_URL, WeatherClient

DEFAULT_FAVORITES_PATH = "~/.weather_lookup/favorites.json"


class Settings(BaseModel):
    """Runtime configuration, normally populated from environment variables."""

    api_key: str = ""
    base_url: str = OPENWEATHER_URL
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0)
    favorites_path: Path | None = Path(DEFAULT_FAVORITES_PATH)
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level {value!r}")
        return value


def load_settings() -> Settings:
    """Build Settings from the environment, loading a .env file first if present.

    An empty WEATHER_LOOKUP_FAVORITES_PATH keeps favorites in memory only.
    """
    load_dotenv()
    favorites_path = os.environ.get("WEATHER_LOOKUP_FAVORITES_PATH", DEFAULT_FAVORITES_PATH)
    return Settings(
        api_key=os.environ.get("OPENWEATHER_API_KEY", ""),
        base_url=os.environ.get("OPENWEATHER_URL", OPENWEATHER_URL),
        timeout_ms=os.environ.get("WEATHER_LOOKUP_TIMEOUT_MS", DEFAULT_TIMEOUT_MS),
        favorites_path=Path(favorites_path).expanduser() if favorites_path else None,
        log_level=os.environ.get("WEATHER_LOOKUP_LOG_LEVEL", "WARNING").upper(),
    )


class WeatherLookupDeps(BaseModel):
    """Components handed to whatever drives the lookups (the CLI, or tests)."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    weather: WeatherClient
    favorites: FavoritesStore
    timeout_ms: int = DEFAULT_TIMEOUT_MS


def create_http_client() -> httpx.AsyncClient:
    """Create the shared httpx client.

    No retry transport: each fetch is exactly one request.
    """
    return httpx.AsyncClient(headers={"Accept": "application/json"})


def create_deps(settings: Settings, http_client: httpx.AsyncClient | None = None) -> WeatherLookupDeps:
    """Wire a WeatherClient and FavoritesStore from settings."""
    http_client = http_client or create_http_client()
    storage = JsonFileStorage(settings.favorites_path) if settings.favorites_path else InMemoryStorage()
    return WeatherLookupDeps(
        http_client=http_client,
        weather=WeatherClient(http_client, settings.api_key, settings.base_url),
        favorites=FavoritesStore(storage),
        timeout_ms=settings.timeout_ms,
    )
