# ABOUTME: Text rendering helpers for weather readings.
# ABOUTME: Outfit suggestions by temperature, condition icons, and the CLI's reading summary.

from weather_lookup.models import WeatherReading

CONDITION_ICONS = {
    "clear": "☀️",
    "clouds": "☁️",
    "rain": "\U0001f327️",
    "thunderstorm": "⛈️",
    "snow": "❄️",
    "mist": "\U0001f32b️",
    "haze": "\U0001f32b️",
    "fog": "\U0001f32b️",
}

DEFAULT_ICON = "\U0001f308"


def outfit_suggestion(temperature_celsius: float) -> str:
    """Suggest clothing for the given air temperature."""
    if temperature_celsius < 0:
        return "Heavy coat, thermals, gloves, beanie"
    if temperature_celsius < 10:
        return "Warm jacket, sweater, long pants"
    if temperature_celsius < 20:
        return "Light jacket, t-shirt, jeans"
    return "Shorts, t-shirt, sunglasses"


def condition_icon(condition_main: str) -> str:
    return CONDITION_ICONS.get(condition_main.lower(), DEFAULT_ICON)


def format_reading(reading: WeatherReading) -> str:
    """Render a reading as a short multi-line summary."""
    return "\n".join(
        [
            f"{condition_icon(reading.condition_main)} {reading.place_name}",
            f"Temperature: {reading.temperature_celsius:.1f}°C (feels like {reading.feels_like_celsius:.1f}°C)",
            f"Humidity: {reading.humidity_percent}%",
            f"Conditions: {reading.condition_main} ({reading.condition_description})",
            f"Outfit: {outfit_suggestion(reading.temperature_celsius)}",
        ]
    )
