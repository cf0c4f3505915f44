import logging

import pytest

from conftest import FakeClient, FakeResponse, FakeSession, load_payload
from weatherlookup import cli
from weatherlookup.client import OpenMeteoClient
from weatherlookup.presenter import BANNER


@pytest.fixture
def fake_client(monkeypatch):
    client = FakeClient(
        geocoding=load_payload("london_geocoding.json"),
        forecast=load_payload("london_forecast.json"),
    )
    # the cli uses the client as a context manager
    monkeypatch.setattr(cli, "OpenMeteoClient", lambda settings: _Managed(client))
    return client


class _Managed:
    def __init__(self, client):
        self.client = client

    def __enter__(self):
        return self.client

    def __exit__(self, *exc_info):
        return None


def test_cities_from_arguments(fake_client, capsys):
    assert cli.main(["London"]) == 0

    out = capsys.readouterr().out
    assert out.startswith(BANNER)
    assert "Location: London, United Kingdom" in out
    assert "Condition: 🌦️ slight rain" in out


def test_failed_city_sets_exit_code(fake_client, capsys):
    fake_client.geocoding = {"results": []}
    assert cli.main(["Atlantis"]) == 1
    assert "error: city not found" in capsys.readouterr().err


def test_interactive_prompt_until_eof(fake_client, monkeypatch, capsys):
    lines = iter(["", "London"])

    def fake_input(prompt):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    assert cli.main([]) == 0
    # the blank line never reached the client
    assert fake_client.calls[0] == ("geocode", "London")
    assert capsys.readouterr().out.count(BANNER) == 1


def test_interactive_quit(fake_client, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt: "quit")
    assert cli.main([]) == 0
    assert fake_client.calls == []


def test_server_error_prints_a_single_error_line(monkeypatch, capsys, caplog):
    session = FakeSession(FakeResponse(500, reason="Internal Server Error"))
    monkeypatch.setattr(cli, "OpenMeteoClient", lambda settings: OpenMeteoClient(settings, session=session))

    assert cli.main(["London"]) == 1

    assert capsys.readouterr().err == "error: 500 Internal Server Error\n"
    # nothing reaches the default WARNING log level on an ordinary http failure
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
