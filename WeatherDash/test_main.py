"""Tests for CLI configuration and commands."""
import io

import pytest
from unittest.mock import patch
import main
from weather_reading import WeatherReading


@pytest.fixture(autouse=True)
def no_dotenv():
    with patch("main.load_dotenv"):
        yield


def test_missing_api_key_fails_fast(monkeypatch):
    monkeypatch.delenv("OPENWEATHER_API_KEY", raising=False)
    args = main.parse_args(["serve"])

    with pytest.raises(SystemExit) as exc_info:
        main.build_provider(args)

    assert "OPENWEATHER_API_KEY" in str(exc_info.value)


def test_placeholder_api_key_fails_fast(monkeypatch):
    monkeypatch.setenv("OPENWEATHER_API_KEY", "demo_key")
    args = main.parse_args(["serve"])

    with pytest.raises(SystemExit) as exc_info:
        main.build_provider(args)

    assert "placeholder" in str(exc_info.value)


def test_build_provider(monkeypatch):
    monkeypatch.setenv("OPENWEATHER_API_KEY", "abc123")
    monkeypatch.setenv("WEATHER_LANG", "de")
    args = main.parse_args(["--timeout", "4", "serve", "--max-age", "60"])

    provider = main.build_provider(args)

    assert provider.api_key == "abc123"
    assert provider.lang == "de"
    assert provider.timeout == 4.0
    assert provider.max_age_seconds == 60


def test_default_city(monkeypatch):
    monkeypatch.delenv("WEATHER_DEFAULT_CITY", raising=False)
    assert main.default_city() == "London"
    monkeypatch.setenv("WEATHER_DEFAULT_CITY", "Oslo")
    assert main.default_city() == "Oslo"


def test_run_show_prints_reading(monkeypatch, capsys, sample_payload):
    monkeypatch.delenv("WEATHER_DEFAULT_CITY", raising=False)
    reading = WeatherReading.from_payload(sample_payload)
    with patch("main.ProxyClient") as client_cls:
        client_cls.return_value.fetch.return_value = reading
        status = main.run_show(main.parse_args(["show", "--proxy-url", "http://proxy.test"]))

    client_cls.assert_called_once_with(base_url="http://proxy.test", timeout=10.0)
    client_cls.return_value.fetch.assert_called_once_with("London")
    assert status == 0
    assert "London, GB" in capsys.readouterr().out


def test_run_dashboard_ignores_blank_lines(monkeypatch, capsys, sample_payload):
    monkeypatch.delenv("WEATHER_DEFAULT_CITY", raising=False)
    reading = WeatherReading.from_payload(sample_payload)
    with patch("main.ProxyClient") as client_cls:
        client_cls.return_value.fetch.return_value = reading
        main.run_dashboard(main.parse_args(["dashboard"]), stdin=io.StringIO("\n  \nLondon\n"))

    assert client_cls.return_value.fetch.call_count == 2
