"""Weather domain model - immutable readings independent of the HTTP layer."""
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from weather_provider import ReadingParseError


@dataclass(frozen=True)
class Location:
    name: str
    country_code: str
    longitude: float
    latitude: float


@dataclass(frozen=True)
class Condition:
    id: int
    category: str  # e.g., "Clouds", "Rain", "Clear"
    description: str  # e.g., "broken clouds"
    icon_code: str  # e.g., "04d"


@dataclass(frozen=True)
class Temperature:
    """Temperatures are kept in Kelvin; conversion happens at display time."""
    current: float
    feels_like: float
    minimum: float
    maximum: float
    pressure_hpa: int
    humidity_percent: int


@dataclass(frozen=True)
class Wind:
    speed: float  # m/s
    direction_degrees: int


@dataclass(frozen=True)
class Clouds:
    coverage_percent: int


@dataclass(frozen=True)
class Precipitation:
    last_hour_mm: float


@dataclass(frozen=True)
class Sun:
    sunrise: int  # UNIX timestamp (UTC)
    sunset: int


@dataclass(frozen=True)
class WeatherReading:
    """One normalized snapshot of the weather at a location."""
    location: Location
    observed_at: int  # UNIX timestamp (UTC)
    utc_offset: int  # Offset from UTC in seconds
    condition: Condition
    temperature: Temperature
    wind: Wind
    clouds: Clouds
    sun: Sun
    precipitation: Optional[Precipitation] = None

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "WeatherReading":
        """
        Build a reading from an OpenWeather Current Weather payload.

        Only the first entry of the ``weather`` list is used.

        Raises:
            ReadingParseError: If the payload lacks the ``weather`` list or ``main`` block
        """
        if not isinstance(data, dict):
            raise ReadingParseError("Payload is not a JSON object")

        weather_array = data.get("weather")
        if not isinstance(weather_array, list) or not weather_array:
            raise ReadingParseError("Response missing 'weather' array")
        weather = weather_array[0]
        if not isinstance(weather, dict):
            raise ReadingParseError("Response 'weather' entry is not an object")

        main_data = _block(data, "main")
        if not main_data:
            raise ReadingParseError("Response missing 'main' block")

        coord = _block(data, "coord")
        sys_data = _block(data, "sys")
        wind_data = _block(data, "wind")
        clouds_data = _block(data, "clouds")
        rain = _block(data, "rain")

        try:
            # Only rain counts; a rain block without "1h" is the same as no rain
            precipitation = None
            if rain.get("1h") is not None:
                precipitation = Precipitation(last_hour_mm=float(rain["1h"]))

            return cls(
                location=Location(
                    name=data.get("name", ""),
                    country_code=sys_data.get("country", ""),
                    longitude=float(coord.get("lon", 0.0)),
                    latitude=float(coord.get("lat", 0.0)),
                ),
                observed_at=int(data.get("dt", 0)),
                utc_offset=int(data.get("timezone", 0)),
                condition=Condition(
                    id=int(weather.get("id", 0)),
                    category=weather.get("main", "Unknown"),
                    description=weather.get("description", ""),
                    icon_code=weather.get("icon", ""),
                ),
                temperature=Temperature(
                    current=float(main_data["temp"]),
                    feels_like=float(main_data.get("feels_like", main_data["temp"])),
                    minimum=float(main_data.get("temp_min", main_data["temp"])),
                    maximum=float(main_data.get("temp_max", main_data["temp"])),
                    pressure_hpa=int(main_data.get("pressure", 0)),
                    humidity_percent=int(main_data.get("humidity", 0)),
                ),
                wind=Wind(
                    speed=float(wind_data.get("speed", 0.0)),
                    direction_degrees=int(wind_data.get("deg", 0)),
                ),
                clouds=Clouds(coverage_percent=int(clouds_data.get("all", 0))),
                sun=Sun(
                    sunrise=int(sys_data.get("sunrise", 0)),
                    sunset=int(sys_data.get("sunset", 0)),
                ),
                precipitation=precipitation,
            )
        except (KeyError, IndexError, ValueError, TypeError, AttributeError) as e:
            raise ReadingParseError(f"Failed to parse response: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        """Normalized JSON-friendly shape of this reading."""
        return asdict(self)


def _block(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Nested object under ``key``, or an empty dict when absent or not an object."""
    value = data.get(key)
    return value if isinstance(value, dict) else {}
