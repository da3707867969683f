# ABOUTME: Pydantic BaseModels for place queries, weather readings, and provider payloads.
# ABOUTME: Defines the structured types exchanged between the weather client, favorites, and CLI.

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class ByName(BaseModel):
    """Look up weather by free-text city name."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["name"] = "name"
    city_name: str = Field(min_length=1)

    def to_params(self) -> dict:
        return {"q": self.city_name}


class ByCoordinates(BaseModel):
    """Look up weather by latitude/longitude."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["coordinates"] = "coordinates"
    latitude: float = Field(ge=-90, le=90, allow_inf_nan=False)
    longitude: float = Field(ge=-180, le=180, allow_inf_nan=False)

    def to_params(self) -> dict:
        return {"lat": self.latitude, "lon": self.longitude}


PlaceQuery = Annotated[ByName | ByCoordinates, Field(discriminator="kind")]

_place_query_adapter = TypeAdapter(PlaceQuery)


def parse_place_query(data: dict) -> ByName | ByCoordinates:
    """Validate a raw dict (e.g. {"kind": "name", "city_name": "Oslo"}) into a PlaceQuery variant."""
    return _place_query_adapter.validate_python(data)


class WeatherReading(BaseModel):
    """Normalized current weather for one place."""

    model_config = ConfigDict(frozen=True)

    place_name: str
    temperature_celsius: float
    feels_like_celsius: float
    humidity_percent: int = Field(ge=0, le=100)
    condition_main: str
    condition_description: str


class ProviderMain(BaseModel):
    """The `main` block of an OpenWeather current weather response."""

    model_config = ConfigDict(strict=True)

    temp: float
    feels_like: float
    humidity: int


class ProviderCondition(BaseModel):
    """One entry of the `weather` array of an OpenWeather response."""

    model_config = ConfigDict(strict=True)

    main: str
    description: str


class ProviderPayload(BaseModel):
    """Subset of the OpenWeather current weather body that gets read."""

    model_config = ConfigDict(strict=True)

    name: str
    main: ProviderMain
    weather: list[ProviderCondition] = Field(min_length=1)

    def to_reading(self) -> WeatherReading:
        condition = self.weather[0]
        return WeatherReading(
            place_name=self.name,
            temperature_celsius=self.main.temp,
            feels_like_celsius=self.main.feels_like,
            humidity_percent=self.main.humidity,
            condition_main=condition.main,
            condition_description=condition.description,
        )


favorites_adapter = TypeAdapter(list[str])
