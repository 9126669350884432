"""Integration tests - can optionally hit real API (disabled by default)."""
import os
import pytest
from openweather_provider import OpenWeatherProvider
from weather_proxy import create_app
from weather_reading import WeatherReading


@pytest.mark.skipif(
    not os.environ.get("OPENWEATHER_API_KEY"),
    reason="OPENWEATHER_API_KEY not set - skipping integration test"
)
def test_openweather_integration():
    """
    Integration test that hits the real OpenWeather API.

    Set OPENWEATHER_API_KEY environment variable to run this test.
    """
    provider = OpenWeatherProvider(api_key=os.environ["OPENWEATHER_API_KEY"])

    reading = WeatherReading.from_payload(provider.fetch("London"))

    assert reading.location.name == "London"
    assert reading.temperature.current > 200
    assert reading.observed_at > 0


@pytest.mark.skipif(
    not os.environ.get("OPENWEATHER_API_KEY"),
    reason="OPENWEATHER_API_KEY not set - skipping integration test"
)
def test_proxy_unknown_city_integration():
    """Integration test for the proxy against a city the provider does not know."""
    provider = OpenWeatherProvider(api_key=os.environ["OPENWEATHER_API_KEY"])
    client = create_app(provider).test_client()

    response = client.get("/api/weather?city=Zzzzznotacity")

    assert response.status_code == 500
    assert response.get_json() == {"error": "Failed to fetch weather data"}
