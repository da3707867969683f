# ABOUTME: Shared test fixtures for the weather lookup test suite.
# ABOUTME: Provides a sample provider payload and isolates tests from real configuration.

import pytest


@pytest.fixture
def openweather_payload() -> dict:
    """A trimmed OpenWeather current weather body for Paris."""
    return {
        "coord": {"lon": 2.3488, "lat": 48.8534},
        "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
        "main": {"temp": 21.4, "feels_like": 20.9, "temp_min": 19.0, "temp_max": 23.1, "pressure": 1018, "humidity": 56},
        "wind": {"speed": 3.6, "deg": 240},
        "name": "Paris",
        "cod": 200,
    }


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    """Keep real API keys and favorites files out of tests."""
    monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
    monkeypatch.delenv("OPENWEATHER_URL", raising=False)
    monkeypatch.delenv("WEATHER_LOOKUP_TIMEOUT_MS", raising=False)
    monkeypatch.delenv("WEATHER_LOOKUP_LOG_LEVEL", raising=False)
    monkeypatch.setenv("WEATHER_LOOKUP_FAVORITES_PATH", str(tmp_path / "favorites.json"))
