"""Flask app exposing the weather proxy routes."""
import logging

from flask import Flask, jsonify, request

from openweather_provider import DEFAULT_MAX_AGE_SECONDS
from weather_provider import WeatherProviderBase, WeatherProviderError
from weather_reading import WeatherReading

DEFAULT_CITY = "London"
FETCH_FAILED_MESSAGE = "Failed to fetch weather data"


def create_app(
    provider: WeatherProviderBase,
    default_city: str = DEFAULT_CITY,
    max_age_seconds: int = DEFAULT_MAX_AGE_SECONDS,
) -> Flask:
    """
    Build the proxy app around a provider.

    Every route answers with JSON: the payload on success, or
    ``{"error": FETCH_FAILED_MESSAGE}`` with status 500 on any provider failure.
    """
    app = Flask(__name__)
    app.json.sort_keys = False

    def requested_city() -> str:
        city = request.args.get("city", "").strip()
        return city or default_city

    def fresh(response):
        response.headers["Cache-Control"] = f"public, max-age={max_age_seconds}"
        return response

    def failure():
        return jsonify({"error": FETCH_FAILED_MESSAGE}), 500

    @app.get("/api/weather")
    def get_weather():
        city = requested_city()
        try:
            data = provider.fetch(city)
        except WeatherProviderError as e:
            logging.error("%s for city %r: %s", FETCH_FAILED_MESSAGE, city, e)
            return failure()
        return fresh(jsonify(data))

    @app.get("/api/reading")
    def get_reading():
        city = requested_city()
        try:
            reading = WeatherReading.from_payload(provider.fetch(city))
        except WeatherProviderError as e:
            logging.error("%s for city %r: %s", FETCH_FAILED_MESSAGE, city, e)
            return failure()
        return fresh(jsonify(reading.to_dict()))

    return app
