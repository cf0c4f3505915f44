# shared fakes and fixtures so no test ever hits the network

import json
from pathlib import Path

import pytest

from weatherlookup.client import ServiceError

DATA_DIR = Path(__file__).parent / "data"


def load_payload(name):
    return json.loads((DATA_DIR / name).read_text(encoding="utf-8"))


class FakeClient:
    # stands in for OpenMeteoClient; values may be payload dicts or exceptions to raise
    def __init__(self, geocoding=None, forecast=None):
        self.geocoding = geocoding
        self.forecast = forecast
        self.calls = []

    @staticmethod
    def _answer(value):
        if isinstance(value, Exception):
            raise value
        return value

    def geocode(self, query):
        self.calls.append(("geocode", query))
        return self._answer(self.geocoding)

    def current_weather(self, latitude, longitude):
        self.calls.append(("current_weather", latitude, longitude))
        return self._answer(self.forecast)


class FakeResponse:
    def __init__(self, status_code=200, payload=None, reason="OK", bad_json=False):
        self.status_code = status_code
        self.reason = reason
        self._payload = payload
        self._bad_json = bad_json

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._bad_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeSession:
    # replaces requests.Session inside a real OpenMeteoClient
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.requests = []
        self.closed = False

    def get(self, url, params=None, timeout=None):
        self.requests.append((url, params, timeout))
        if self.exc is not None:
            raise self.exc
        return self.response

    def close(self):
        self.closed = True


class RecordingPresenter:
    # remembers every call in order, for asserting on state transitions
    def __init__(self):
        self.events = []

    def show_status(self, message):
        self.events.append(("status", message))

    def show_error(self, message):
        self.events.append(("error", message))

    def render_result(self, record):
        self.events.append(("render", record))

    def reset(self):
        self.events.append(("reset",))


@pytest.fixture
def london_client():
    return FakeClient(
        geocoding=load_payload("london_geocoding.json"),
        forecast=load_payload("london_forecast.json"),
    )


@pytest.fixture
def server_error():
    return ServiceError(500, "Internal Server Error")
