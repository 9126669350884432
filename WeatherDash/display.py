"""Display derivations - pure functions from a WeatherReading to what gets shown."""
import math
from datetime import datetime, timezone
from typing import List, NamedTuple, Optional, Tuple

from weather_reading import WeatherReading

KELVIN_OFFSET = 273.15
COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")

Color = Tuple[int, int, int]


class Icon(NamedTuple):
    glyph: str
    color: Color


NEUTRAL_GRAY = (156, 163, 175)
DEFAULT_ICON = Icon("cloud", NEUTRAL_GRAY)

# OpenWeather icon codes -> glyph and RGB color. Day and night share a glyph
# except for clear sky, where the night sun is dimmer.
ICON_TABLE = {
    "01d": Icon("sun", (251, 191, 36)),
    "01n": Icon("sun", (252, 211, 77)),
    "02d": DEFAULT_ICON,
    "02n": DEFAULT_ICON,
    "03d": DEFAULT_ICON,
    "03n": DEFAULT_ICON,
    "04d": DEFAULT_ICON,
    "04n": DEFAULT_ICON,
    "09d": Icon("cloud-drizzle", (96, 165, 250)),
    "09n": Icon("cloud-drizzle", (96, 165, 250)),
    "10d": Icon("cloud-rain", (59, 130, 246)),
    "10n": Icon("cloud-rain", (59, 130, 246)),
    "11d": Icon("cloud-lightning", (245, 158, 11)),
    "11n": Icon("cloud-lightning", (245, 158, 11)),
    "13d": Icon("cloud-snow", (191, 219, 254)),
    "13n": Icon("cloud-snow", (191, 219, 254)),
    "50d": Icon("cloud-fog", (209, 213, 219)),
    "50n": Icon("cloud-fog", (209, 213, 219)),
}


class DisplayField(NamedTuple):
    """One labelled value on the dashboard, with an optional 0-100 progress bar."""
    label: str
    value: str
    progress: Optional[float] = None


def kelvin_to_celsius(kelvin: float) -> float:
    """Convert Kelvin to Celsius, rounded to one decimal place."""
    return round(kelvin - KELVIN_OFFSET, 1)


def format_celsius(kelvin: float) -> str:
    return f"{kelvin_to_celsius(kelvin):.1f}°C"


def format_local_time(timestamp: int, utc_offset: int) -> str:
    """
    Wall-clock time at a location as zero-padded 24-hour ``HH:MM``.

    Args:
        timestamp: UNIX timestamp (UTC)
        utc_offset: Location's offset from UTC in seconds
    """
    local = datetime.fromtimestamp(timestamp + utc_offset, tz=timezone.utc)
    return local.strftime("%H:%M")


def format_local_date(timestamp: int, utc_offset: int) -> str:
    local = datetime.fromtimestamp(timestamp + utc_offset, tz=timezone.utc)
    return f"{local:%A}, {local.day} {local:%B %Y}"


def wind_direction(degrees: float) -> str:
    """
    Nearest of the 8 compass points for a bearing in degrees.

    Sectors are 45° wide and centred on each point; 360° wraps to N.
    """
    # floor(x + 0.5) rounds halves up, unlike round()
    return COMPASS_POINTS[int(math.floor(degrees / 45 + 0.5)) % 8]


def precipitation(reading: WeatherReading) -> Tuple[float, float]:
    """
    Last-hour rain and its progress value.

    Returns:
        Tuple of (mm, progress) where progress is min(mm * 10, 100); (0.0, 0.0) without rain
    """
    if reading.precipitation is None or not reading.precipitation.last_hour_mm:
        return 0.0, 0.0
    mm = reading.precipitation.last_hour_mm
    return mm, min(mm * 10, 100.0)


def icon_for(icon_code: str) -> Icon:
    """Glyph and color for an OpenWeather icon code; unknown codes get a gray cloud."""
    return ICON_TABLE.get(icon_code, DEFAULT_ICON)


def capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


def build_display(reading: WeatherReading) -> List[DisplayField]:
    """
    Calculate every field the dashboard shows for a reading.

    This is a pure function; nothing is stored on the reading, so rendering
    the same reading twice gives the same result.
    """
    temp = reading.temperature
    rain_mm, rain_progress = precipitation(reading)
    location = reading.location.name
    if reading.location.country_code:
        location = f"{location}, {reading.location.country_code}"

    return [
        DisplayField("Location", location),
        DisplayField("Date", format_local_date(reading.observed_at, reading.utc_offset)),
        DisplayField("Conditions", capitalize(reading.condition.description)),
        DisplayField("Temperature", format_celsius(temp.current)),
        DisplayField("Feels like", format_celsius(temp.feels_like)),
        DisplayField("Min / Max", f"↓ {format_celsius(temp.minimum)}  ↑ {format_celsius(temp.maximum)}"),
        DisplayField(
            "Wind",
            f"{reading.wind.speed:.1f} m/s {wind_direction(reading.wind.direction_degrees)} "
            f"({reading.wind.direction_degrees}°)",
        ),
        DisplayField("Humidity", f"{temp.humidity_percent}%", float(temp.humidity_percent)),
        DisplayField("Clouds", f"{reading.clouds.coverage_percent}%", float(reading.clouds.coverage_percent)),
        DisplayField("Precipitation", f"{rain_mm:.1f} mm" if rain_mm else "0 mm", rain_progress),
        DisplayField("Sunrise", format_local_time(reading.sun.sunrise, reading.utc_offset)),
        DisplayField("Sunset", format_local_time(reading.sun.sunset, reading.utc_offset)),
        DisplayField("Pressure", f"{temp.pressure_hpa} hPa"),
    ]


def progress_bar(value: float, width: int = 20) -> str:
    filled = int(round(max(0.0, min(value, 100.0)) / 100 * width))
    return "[" + "#" * filled + "-" * (width - filled) + "]"


def render_text(presenter) -> str:
    """
    Render the presenter's current state as plain text.

    With an error and no reading only the error panel is shown. With an error
    and an earlier reading the error line sits above the stale reading.
    """
    if presenter.loading and presenter.reading is None:
        return f"Loading weather for {presenter.city}..."
    if presenter.error_only:
        return f"Error: {presenter.error}\nSearch for another city to try again."

    lines = []
    if presenter.error:
        lines.append(f"Error: {presenter.error}")
    if presenter.loading:
        lines.append("Updating...")

    reading = presenter.reading
    if reading is None:
        return "\n".join(lines)

    icon = icon_for(reading.condition.icon_code)
    lines.append(f"[{icon.glyph}]")
    for field in build_display(reading):
        line = f"{field.label:<14} {field.value}"
        if field.progress is not None:
            line = f"{line:<40} {progress_bar(field.progress)}"
        lines.append(line)
    return "\n".join(lines)
