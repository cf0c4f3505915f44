# weather lookup pipeline for one city query.
# pure functions turn provider payloads into value objects, and lookup_city runs the
# two dependent calls (geocode -> forecast) returning a tagged result instead of raising


from __future__ import annotations
import enum
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Union
from .client import (
    MalformedResponseError,
    NotFoundError,
    OpenMeteoClient,
    ServiceError,
    WeatherLookupError,
)
from .codes import condition_label
from .models import CurrentWeather, DisplayRecord, GeoResult

logger = logging.getLogger(__name__)

STATUS_GEOCODING = "looking up city…"
STATUS_FORECASTING = "fetching weather…"
GENERIC_ERROR = "something went wrong"


class FailureKind(enum.Enum):
    SERVICE = "service"
    NOT_FOUND = "not_found"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class LookupSuccess:
    record: DisplayRecord


@dataclass(frozen=True)
class LookupFailure:
    kind: FailureKind
    message: str
    status: Optional[int] = None


LookupResult = Union[LookupSuccess, LookupFailure]


# geocoding shape: data["results"][0] -> {latitude, longitude, name, country}
def parse_geo_result(data: Dict[str, Any]) -> Optional[GeoResult]:
    results = data.get("results") or []
    if not isinstance(results, list):
        raise MalformedResponseError("unexpected geocoding payload: results is not a list")
    if not results:
        return None
    try:
        first = results[0]
        return GeoResult(
            name=str(first["name"]),
            # some matches (oceans, disputed areas) come back without a country
            country=str(first.get("country", "")),
            latitude=float(first["latitude"]),
            longitude=float(first["longitude"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise MalformedResponseError(f"unexpected geocoding result: missing {exc}") from exc


# forecast shape: data["current"] -> {temperature_2m, wind_speed_10m, weather_code}
def parse_current_weather(data: Dict[str, Any]) -> CurrentWeather:
    try:
        current = data["current"]
        return CurrentWeather(
            temperature=float(current["temperature_2m"]),
            wind_speed=float(current["wind_speed_10m"]),
            weather_code=int(current["weather_code"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise MalformedResponseError(f"unexpected forecast payload: missing {exc}") from exc


def build_display_record(geo: GeoResult, weather: CurrentWeather) -> DisplayRecord:
    return DisplayRecord(
        location_label=f"{geo.name}, {geo.country}",
        temperature=weather.temperature,
        wind_speed=weather.wind_speed,
        condition_label=condition_label(weather.weather_code),
        latitude=geo.latitude,
        longitude=geo.longitude,
    )


def _failure_from(exc: WeatherLookupError) -> LookupFailure:
    message = str(exc) or GENERIC_ERROR
    if isinstance(exc, ServiceError):
        return LookupFailure(FailureKind.SERVICE, message, status=exc.status)
    if isinstance(exc, NotFoundError):
        return LookupFailure(FailureKind.NOT_FOUND, message)
    return LookupFailure(FailureKind.UNEXPECTED, message)


# single city path: geocode -> forecast -> display record
def lookup_city(
    client: OpenMeteoClient,
    query: str,
    on_status: Optional[Callable[[str], None]] = None,
) -> LookupResult:
    notify = on_status or (lambda _msg: None)
    try:
        notify(STATUS_GEOCODING)
        geo = parse_geo_result(client.geocode(query))
        if geo is None:
            raise NotFoundError()

        notify(STATUS_FORECASTING)
        weather = parse_current_weather(client.current_weather(geo.latitude, geo.longitude))
    except WeatherLookupError as exc:
        logger.info("lookup for %r failed: %s", query, exc)
        return _failure_from(exc)
    except Exception as exc:
        # any other failure still ends as a single-line message
        logger.debug("lookup for %r failed unexpectedly", query, exc_info=True)
        return LookupFailure(FailureKind.UNEXPECTED, str(exc) or GENERIC_ERROR)

    record = build_display_record(geo, weather)
    logger.debug("lookup for %r resolved to %s", query, record)
    return LookupSuccess(record)
