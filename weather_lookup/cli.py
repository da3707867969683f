# ABOUTME: Command-line entry point for weather lookups and favorites management.
# ABOUTME: Translates error kinds into user-facing messages and exit codes.

import argparse
import asyncio
import logging
import sys

from pydantic import ValidationError

from weather_lookup.deps import Settings, WeatherLookupDeps, create_deps, load_settings
from weather_lookup.errors import NetworkError, ParseError, ProviderError, StorageError, WeatherLookupError
from weather_lookup.models import ByCoordinates, ByName
from weather_lookup.presentation import format_reading

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="weather-lookup", description="Current weather and favorite cities.")
    commands = parser.add_subparsers(dest="command", required=True)

    weather = commands.add_parser("weather", help="show current weather for a city or coordinates")
    place = weather.add_mutually_exclusive_group(required=True)
    place.add_argument("--city", help="city name, e.g. 'Paris'")
    place.add_argument("--lat", type=float, help="latitude, requires --lon")
    weather.add_argument("--lon", type=float, help="longitude, requires --lat")
    weather.add_argument("--timeout-ms", type=_positive_int, default=None, help="request timeout in milliseconds")
    weather.add_argument("--save", action="store_true", help="add the resolved place to favorites")

    favorites = commands.add_parser("favorites", help="manage favorite cities")
    actions = favorites.add_subparsers(dest="action", required=True)
    actions.add_parser("list", help="list favorites")
    actions.add_parser("add", help="add a favorite").add_argument("city")
    actions.add_parser("remove", help="remove a favorite").add_argument("city")
    actions.add_parser("clear", help="remove all favorites")
    actions.add_parser("show", help="show current weather for every favorite")
    return parser


def describe_error(error: WeatherLookupError) -> str:
    """Turn an error into the message shown to the user."""
    if isinstance(error, NetworkError):
        return "Could not reach the weather service. Check your connection and try again."
    if isinstance(error, ProviderError):
        if error.status_code == 404:
            return "Location not found."
        if error.status_code == 401:
            return "The weather service rejected the API key (set OPENWEATHER_API_KEY)."
        return f"The weather service failed ({error})."
    if isinstance(error, ParseError):
        return "The weather service sent an unexpected response."
    if isinstance(error, StorageError):
        return f"Could not access saved favorites: {error}"
    return str(error)


def place_query(args: argparse.Namespace) -> ByName | ByCoordinates:
    if args.city is not None:
        return ByName(city_name=args.city)
    return ByCoordinates(latitude=args.lat, longitude=args.lon)


async def run(args: argparse.Namespace, deps: WeatherLookupDeps) -> int:
    """Execute a parsed command and return the process exit code."""
    try:
        if args.command == "weather":
            await _weather(args, deps)
        else:
            await _favorites(args, deps)
    except WeatherLookupError as e:
        logger.info("Command %s failed: %r", args.command, e)
        print(describe_error(e), file=sys.stderr)
        return 1
    return 0


async def _weather(args: argparse.Namespace, deps: WeatherLookupDeps) -> None:
    timeout_ms = deps.timeout_ms if args.timeout_ms is None else args.timeout_ms
    reading = await deps.weather.fetch_weather(place_query(args), timeout_ms)
    print(format_reading(reading))
    if args.save:
        await deps.favorites.add(reading.place_name)
        print(f"Saved {reading.place_name} to favorites.")


async def _favorites(args: argparse.Namespace, deps: WeatherLookupDeps) -> None:
    if args.action == "list":
        favorites = await deps.favorites.load()
        if not favorites:
            print("No favorites yet.")
        for city in favorites:
            print(city)
    elif args.action == "add":
        favorites = await deps.favorites.add(args.city)
        print(f"{len(favorites)} favorite(s).")
    elif args.action == "remove":
        favorites = await deps.favorites.remove(args.city)
        print(f"{len(favorites)} favorite(s).")
    elif args.action == "clear":
        await deps.favorites.clear()
        print("Favorites cleared.")
    elif args.action == "show":
        await _show_favorites(deps)


async def _show_favorites(deps: WeatherLookupDeps) -> None:
    """Fetch every favorite in turn, reporting failures per city."""
    favorites = await deps.favorites.load()
    if not favorites:
        print("No favorites yet.")
        return
    for city in favorites:
        try:
            reading = await deps.weather.fetch_weather(ByName(city_name=city), deps.timeout_ms)
        except WeatherLookupError as e:
            print(f"{city}: {describe_error(e)}")
            continue
        print(format_reading(reading))
        print()


async def _main(args: argparse.Namespace, settings: Settings) -> int:
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    deps = create_deps(settings)
    async with deps.http_client:
        return await run(args, deps)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "weather":
        if (args.lat is None) != (args.lon is None):
            parser.error("--lat and --lon must be given together")
        try:
            place_query(args)
        except ValidationError as e:
            parser.error(f"invalid location: {e.errors()[0]['msg']}")
    try:
        settings = load_settings()
    except ValidationError as e:
        error = e.errors()[0]
        parser.error(f"invalid configuration for {error['loc'][0]}: {error['msg']}")
    return asyncio.run(_main(args, settings))


if __name__ == "__main__":
    sys.exit(main())
