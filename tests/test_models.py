# ABOUTME: Contract tests for Pydantic models used in weather lookups.
# ABOUTME: Validates place query construction, discriminated parsing, and reading immutability.

import math

import pytest
from pydantic import ValidationError

from weather_lookup.models import ByCoordinates, ByName, WeatherReading, parse_place_query


class TestByName:
    def test_valid_name_maps_to_q(self):
        """ByName stores the city and maps it to the q parameter.

        Implementation: Constructs ByName and calls to_params.
        Passing implies: Name queries produce exactly one provider parameter.
        """
        query = ByName(city_name="Paris")
        assert query.kind == "name"
        assert query.to_params() == {"q": "Paris"}

    def test_name_is_not_trimmed(self):
        """ByName keeps surrounding whitespace; trimming is the caller's job."""
        assert ByName(city_name=" Rome ").to_params() == {"q": " Rome "}

    def test_empty_name_rejected(self):
        """ByName rejects an empty city name.

        Implementation: Constructs ByName with "".
        Passing implies: Invalid queries fail at construction, before any request.
        """
        with pytest.raises(ValidationError):
            ByName(city_name="")

    def test_is_immutable(self):
        """ByName instances cannot be mutated after construction."""
        query = ByName(city_name="Paris")
        with pytest.raises(ValidationError):
            query.city_name = "Rome"


class TestByCoordinates:
    def test_valid_coordinates_map_to_lat_lon(self):
        """ByCoordinates maps to lat and lon parameters."""
        query = ByCoordinates(latitude=-33.87, longitude=151.21)
        assert query.to_params() == {"lat": -33.87, "lon": 151.21}

    def test_boundaries_accepted(self):
        """The range limits themselves are valid coordinates."""
        ByCoordinates(latitude=90, longitude=-180)
        ByCoordinates(latitude=-90, longitude=180)

    @pytest.mark.parametrize(
        ("latitude", "longitude"),
        [(90.1, 0), (-91, 0), (0, 180.5), (0, -181), (math.nan, 0), (0, math.inf)],
    )
    def test_out_of_range_or_non_finite_rejected(self, latitude, longitude):
        """ByCoordinates rejects latitudes outside [-90, 90], longitudes outside [-180, 180], and NaN/inf.

        Implementation: Parametrized invalid pairs.
        Passing implies: Only finite in-range coordinates reach the provider.
        """
        with pytest.raises(ValidationError):
            ByCoordinates(latitude=latitude, longitude=longitude)


class TestParsePlaceQuery:
    def test_dispatches_on_kind(self):
        """parse_place_query picks the variant from the kind field.

        Implementation: Parses one dict of each kind.
        Passing implies: The union is discriminated, not guessed from the fields present.
        """
        assert isinstance(parse_place_query({"kind": "name", "city_name": "Oslo"}), ByName)
        assert isinstance(parse_place_query({"kind": "coordinates", "latitude": 1, "longitude": 2}), ByCoordinates)

    def test_ambiguous_input_rejected(self):
        """A dict without kind is rejected even if it carries both name and coordinates."""
        with pytest.raises(ValidationError):
            parse_place_query({"city_name": "Oslo", "latitude": 1, "longitude": 2})

    def test_mismatched_fields_rejected(self):
        """A name-kind dict without a city name is rejected."""
        with pytest.raises(ValidationError):
            parse_place_query({"kind": "name", "latitude": 1, "longitude": 2})


class TestWeatherReading:
    def test_humidity_bounds(self):
        """WeatherReading enforces humidity between 0 and 100."""
        fields = dict(
            place_name="Paris",
            temperature_celsius=1.0,
            feels_like_celsius=0.0,
            condition_main="Snow",
            condition_description="light snow",
        )
        assert WeatherReading(humidity_percent=100, **fields).humidity_percent == 100
        with pytest.raises(ValidationError):
            WeatherReading(humidity_percent=101, **fields)
