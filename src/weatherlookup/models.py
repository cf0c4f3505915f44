# value objects for one submission: provider results in, render-ready record out

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoResult:
    # first geocoding match only
    name: str
    country: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class CurrentWeather:
    temperature: float  # °C
    wind_speed: float
    weather_code: int


@dataclass(frozen=True)
class DisplayRecord:
    # output value object consumed by presenters, never persisted
    location_label: str
    temperature: float
    wind_speed: float
    condition_label: str
    latitude: float
    longitude: float
