"""Layout and rendering logic for the weather display - pure functions for testability."""
import math
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Union

from weather_data import CurrentConditions, ForecastEntry, Units

ICON_URL = "https://openweathermap.org/img/wn/{icon}@2x.png"

Number = Union[int, float]


def _local_datetime(timestamp: int, offset_seconds: int = 0) -> datetime:
    """Convert a UNIX timestamp to the location's local time."""
    return datetime.fromtimestamp(timestamp, tz=timezone(timedelta(seconds=offset_seconds)))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    whole = math.floor(value)
    return int(whole) + (1 if value - whole >= 0.5 else 0)


def format_number(value: Number) -> str:
    """Print a provider number as sent: 5.0 -> "5", 3.13 -> "3.13"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_temperature(value: float, units: Units) -> str:
    return f"{round_half_up(value)}{Units(units).temp_symbol}"


def format_wind(speed: Number, units: Units) -> str:
    return f"{format_number(speed)} {Units(units).speed_unit}"


def format_visibility(metres: Number) -> str:
    return f"{metres / 1000:.1f} km"


def format_date(timestamp: int, offset_seconds: int = 0) -> str:
    """Long date, e.g. "Monday, May 24"."""
    dt = _local_datetime(timestamp, offset_seconds)
    return f"{dt:%A, %B} {dt.day}"


def format_time(timestamp: int, offset_seconds: int = 0) -> str:
    """Clock time, e.g. "08:30 AM"."""
    return f"{_local_datetime(timestamp, offset_seconds):%I:%M %p}"


def format_weekday(timestamp: int, offset_seconds: int = 0) -> str:
    """Short weekday, e.g. "Mon"."""
    return f"{_local_datetime(timestamp, offset_seconds):%a}"


def icon_url(icon: str) -> str:
    return ICON_URL.format(icon=icon)


def render_current(current: CurrentConditions, units: Units) -> List[str]:
    """
    Render the current conditions block.

    Args:
        current: Current conditions to display
        units: Unit system the values were fetched in

    Returns:
        List of display lines
    """
    offset = current.timezone_offset
    details = [
        ("Humidity", f"{format_number(current.humidity)}%"),
        ("Wind", format_wind(current.wind_speed, units)),
        ("Pressure", f"{format_number(current.pressure)} hPa"),
        ("Sunrise", format_time(current.sunrise, offset)),
        ("Sunset", format_time(current.sunset, offset)),
        ("Visibility", format_visibility(current.visibility)),
    ]

    lines = [
        f"{current.name}, {current.country}",
        format_date(current.timestamp, offset),
        f"Icon: {icon_url(current.icon)}",
        "",
        f"{format_temperature(current.temp, units)}  {current.description}",
        f"Feels like {format_temperature(current.feels_like, units)}",
        "",
    ]
    label_width = max(len(label) for label, _ in details)
    lines.extend(f"{label:<{label_width}}  {value}" for label, value in details)
    return lines


def render_forecast(forecast: List[ForecastEntry], units: Units, offset_seconds: int = 0) -> List[str]:
    """Render the daily forecast; empty when there is nothing to show."""
    if not forecast:
        return []
    lines = ["5-Day Forecast"]
    for day in forecast:
        lines.append(
            f"  {format_weekday(day.timestamp, offset_seconds)}  "
            f"{format_temperature(day.temp, units):>6}  {day.description}"
        )
    return lines


def render_view(
    current: Optional[CurrentConditions],
    forecast: List[ForecastEntry],
    units: Units,
    error: Optional[str] = None,
    loading: bool = False,
) -> str:
    """Render the whole display as text."""
    lines = ["Weather Forecast", f"Units: {Units(units).temp_symbol}"]
    if loading:
        lines.append("Searching...")
    if error:
        lines.append(f"Error: {error}")
    if current is not None:
        lines.append("")
        lines.extend(render_current(current, units))
        forecast_lines = render_forecast(forecast, units, current.timezone_offset)
        if forecast_lines:
            lines.append("")
            lines.extend(forecast_lines)
    return "\n".join(lines)


def render_app(app) -> str:
    """Render a WeatherApp's current view state."""
    return render_view(app.current, app.forecast, app.units, app.error, app.loading)
