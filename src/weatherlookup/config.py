# runtime settings, read from the environment after a local .env is loaded

from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "weather-lookup/0.1"


def _timeout_from_env() -> Optional[float]:
    # unset or unparsable falls back to the default, 0 or below means no timeout at all
    raw = os.getenv("WEATHERLOOKUP_TIMEOUT")
    try:
        value = float(raw) if raw else DEFAULT_TIMEOUT
    except ValueError:
        value = DEFAULT_TIMEOUT
    return value if value > 0 else None


@dataclass
class Settings:
    geocoding_url: str = field(
        default_factory=lambda: os.getenv("WEATHERLOOKUP_GEOCODING_URL", GEOCODING_URL)
    )
    forecast_url: str = field(
        default_factory=lambda: os.getenv("WEATHERLOOKUP_FORECAST_URL", FORECAST_URL)
    )
    timeout: Optional[float] = field(default_factory=_timeout_from_env)
    user_agent: str = field(
        default_factory=lambda: os.getenv("WEATHERLOOKUP_USER_AGENT", DEFAULT_USER_AGENT)
    )
    log_level: str = field(default_factory=lambda: os.getenv("WEATHERLOOKUP_LOG_LEVEL", "WARNING"))
    log_format: str = "%(asctime)s [%(name)s] %(levelname)s %(message)s"

    def configure_logging(self) -> None:
        # called once by the cli; unknown level names keep the quiet default
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
        logging.basicConfig(level=level, format=self.log_format)
