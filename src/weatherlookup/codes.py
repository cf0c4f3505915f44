# static lookup tables for provider weather codes (WMO codes as served by open-meteo)
# both lookups are total: unknown codes get a generated phrase or the default symbol

from __future__ import annotations
from types import MappingProxyType
from typing import Mapping

_BASE_PHRASES = {
    0: "clear",
    1: "mainly clear",
    2: "partly cloudy",
    3: "overcast",
    45: "fog",
    48: "depositing rime fog",
    51: "light drizzle",
    53: "moderate drizzle",
    55: "dense drizzle",
    61: "slight rain",
    63: "moderate rain",
    65: "heavy rain",
    71: "slight snow",
    73: "moderate snow",
    75: "heavy snow",
    95: "thunderstorm",
}

_SHOWER_PHRASES = {
    80: "rain showers",
    81: "moderate rain showers",
    82: "violent rain showers",
    85: "slight snow showers",
    86: "heavy snow showers",
}

# read-only views, built once at import
WEATHER_PHRASES: Mapping[int, str] = MappingProxyType({**_BASE_PHRASES, **_SHOWER_PHRASES})

WEATHER_SYMBOLS: Mapping[int, str] = MappingProxyType({
    0: "☀️", 1: "🌤️", 2: "⛅", 3: "☁️",
    45: "🌫️", 48: "🌫️", 51: "🌦️", 53: "🌦️", 55: "🌧️",
    61: "🌦️", 63: "🌧️", 65: "🌧️", 71: "🌨️", 73: "🌨️", 75: "🌨️",
    95: "⛈️",
})

DEFAULT_SYMBOL = "🌤️"


def describe_code(code: int) -> str:
    return WEATHER_PHRASES.get(code, f"code {code}")


def symbol_for_code(code: int) -> str:
    return WEATHER_SYMBOLS.get(code, DEFAULT_SYMBOL)


def condition_label(code: int) -> str:
    # "<symbol> <phrase>", the text shown in the condition field
    return f"{symbol_for_code(code)} {describe_code(code)}"
