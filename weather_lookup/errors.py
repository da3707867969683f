# ABOUTME: Exception hierarchy for weather lookups and favorites persistence.
# ABOUTME: Each failure kind is a distinct type so callers can map them to user-facing messages.


class WeatherLookupError(Exception):
    """Base class for every error raised by this package."""


class WeatherClientError(WeatherLookupError):
    """A weather fetch failed."""


class NetworkError(WeatherClientError):
    """The provider could not be reached (timeout, DNS, refused connection)."""


class ProviderError(WeatherClientError):
    """The provider answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str | None = None):
        self.status_code = status_code
        self.message = message
        detail = f"Weather provider returned HTTP {status_code}"
        if message:
            detail = f"{detail}: {message}"
        super().__init__(detail)


class ParseError(WeatherClientError):
    """The provider's response body did not have the expected shape."""


class StorageError(WeatherLookupError):
    """Favorites could not be read from or written to durable storage."""
