# the only module that talks to open-meteo over http
# endpoints, query params, headers and timeout are all decided here

from __future__ import annotations
import logging
from typing import Dict, Any, Optional
import requests

from .config import Settings

logger = logging.getLogger(__name__)


class WeatherLookupError(RuntimeError):
    # base error type used to propagate clear, single-line messages from this layer
    pass


class ServiceError(WeatherLookupError):
    # the provider answered with a non-success http status
    def __init__(self, status: int, reason: str = ""):
        self.status = status
        self.reason = reason
        super().__init__(f"{status} {reason}".strip())


class NotFoundError(WeatherLookupError):
    def __init__(self, message: str = "city not found"):
        super().__init__(message)


class MalformedResponseError(WeatherLookupError):
    pass


class OpenMeteoClient:
    # encapsulates provider details: endpoints, query params, headers and timeout
    CURRENT_FIELDS = ("temperature_2m", "wind_speed_10m", "weather_code")

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or Settings()
        self.session = session or self._build_session()

    def _build_session(self) -> requests.Session:
        s = requests.Session()
        s.headers.update({"User-Agent": self.settings.user_agent})
        return s

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "OpenMeteoClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get_json(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        logger.debug("GET %s params=%s", url, params)
        try:
            resp = self.session.get(url, params=params, timeout=self.settings.timeout)
        except requests.RequestException as exc:
            # wrap requests exceptions so callers only deal with one error family
            raise WeatherLookupError(f"request failed: {exc}") from exc

        if not resp.ok:
            logger.info("GET %s returned %s %s", url, resp.status_code, resp.reason)
            raise ServiceError(resp.status_code, resp.reason or "")

        try:
            data = resp.json()
        except ValueError as exc:
            raise MalformedResponseError(f"invalid JSON from {url}") from exc

        if not isinstance(data, dict):
            raise MalformedResponseError(f"unexpected payload from {url}")
        return data

    def geocode(self, query: str) -> Dict[str, Any]:
        # at most one match is requested; disambiguation is not supported
        return self._get_json(self.settings.geocoding_url, {"name": query, "count": 1})

    def current_weather(self, latitude: float, longitude: float) -> Dict[str, Any]:
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": ",".join(self.CURRENT_FIELDS),
        }
        return self._get_json(self.settings.forecast_url, params)
