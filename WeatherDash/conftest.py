"""Shared fixtures."""
import copy

import pytest

LONDON_PAYLOAD = {
    "coord": {"lon": -0.1257, "lat": 51.5085},
    "weather": [
        {
            "id": 500,
            "main": "Rain",
            "description": "light rain",
            "icon": "10d"
        },
        {
            "id": 701,
            "main": "Mist",
            "description": "mist",
            "icon": "50d"
        }
    ],
    "base": "stations",
    "main": {
        "temp": 285.65,
        "feels_like": 285.01,
        "temp_min": 284.15,
        "temp_max": 286.95,
        "pressure": 1012,
        "humidity": 82
    },
    "visibility": 10000,
    "wind": {"speed": 4.63, "deg": 240},
    "rain": {"1h": 0.42},
    "clouds": {"all": 75},
    "dt": 1697535000,
    "sys": {
        "type": 2,
        "id": 2075535,
        "country": "GB",
        "sunrise": 1697524167,
        "sunset": 1697561873
    },
    "timezone": 3600,
    "id": 2643743,
    "name": "London",
    "cod": 200
}


@pytest.fixture
def sample_payload():
    """OpenWeather Current Weather payload for London (Kelvin)."""
    return copy.deepcopy(LONDON_PAYLOAD)


@pytest.fixture
def dry_payload(sample_payload):
    """Same payload without the optional rain block."""
    del sample_payload["rain"]
    return sample_payload
