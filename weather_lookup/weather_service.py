# ABOUTME: Service layer for OpenWeather current weather calls and response parsing.
# ABOUTME: Maps a PlaceQuery to one HTTP GET and normalizes the body into a WeatherReading.

import asyncio
import logging

import httpx
from pydantic import ValidationError

from weather_lookup.errors import NetworkError, ParseError, ProviderError
from weather_lookup.models import ByCoordinates, ByName, ProviderPayload, WeatherReading

logger = logging.getLogger(__name__)

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"

DEFAULT_TIMEOUT_MS = 5000

UNITS = "metric"


class WeatherClient:
    """Fetches current weather from the provider, one request per call.

    No retries, caching or backoff: a call either returns a reading or raises
    NetworkError, ProviderError or ParseError.
    """

    def __init__(self, http_client: httpx.AsyncClient, api_key: str, base_url: str = OPENWEATHER_URL):
        self.http_client = http_client
        self.api_key = api_key
        self.base_url = base_url

    async def fetch_weather(self, query: ByName | ByCoordinates, timeout_ms: int = DEFAULT_TIMEOUT_MS) -> WeatherReading:
        """Fetch the current weather for a city name or coordinates."""
        params = {**query.to_params(), "units": UNITS, "appid": self.api_key}
        timeout = timeout_ms / 1000
        logger.debug("Requesting weather for %s (timeout %.1fs)", query.to_params(), timeout)

        try:
            resp = await asyncio.wait_for(
                self.http_client.get(self.base_url, params=params, timeout=timeout),
                timeout=timeout,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.warning("Weather request timed out after %d ms", timeout_ms)
            raise NetworkError(f"Weather request timed out after {timeout_ms} ms") from e
        except httpx.TransportError as e:
            logger.warning("Weather request failed: %s", e)
            raise NetworkError(f"Could not reach weather provider: {e}") from e

        if not resp.is_success:
            message = _error_message(resp)
            logger.warning("Weather provider returned %s: %s", resp.status_code, message)
            raise ProviderError(resp.status_code, message)

        try:
            data = resp.json()
        except ValueError as e:
            raise ParseError("Weather provider returned a non-JSON body") from e
        return parse_weather_reading(data)


async def fetch_weather(
    client: httpx.AsyncClient,
    api_key: str,
    query: ByName | ByCoordinates,
    timeout_ms: int = DEFAULT_TIMEOUT_MS,
) -> WeatherReading:
    """Fetch the current weather with a one-off WeatherClient."""
    return await WeatherClient(client, api_key).fetch_weather(query, timeout_ms)


def parse_weather_reading(data) -> WeatherReading:
    """Parse an OpenWeather current weather body into a WeatherReading.

    Raises ParseError when any required field is missing or has the wrong type.
    """
    try:
        return ProviderPayload.model_validate(data).to_reading()
    except ValidationError as e:
        raise ParseError(f"Unexpected weather payload: {e.error_count()} invalid field(s)") from e


def _error_message(resp: httpx.Response) -> str | None:
    """Pull the provider's `message` out of an error body, if it has one."""
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return None
