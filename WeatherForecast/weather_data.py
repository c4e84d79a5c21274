"""Weather domain model - pure data structures independent of any API."""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Units(str, Enum):
    """Unit system shown to the user; the value is the provider's `units` flag."""
    METRIC = "metric"
    IMPERIAL = "imperial"

    @property
    def temp_symbol(self) -> str:
        return "°C" if self is Units.METRIC else "°F"

    @property
    def speed_unit(self) -> str:
        return "m/s" if self is Units.METRIC else "mph"


@dataclass(frozen=True)
class Location:
    """Either a free-text city name or a latitude/longitude pair."""
    city: Optional[str] = None
    lat: Optional[float] = None
    lon: Optional[float] = None

    @classmethod
    def from_city(cls, city: str) -> "Location":
        return cls(city=city)

    @classmethod
    def from_coords(cls, lat: float, lon: float) -> "Location":
        return cls(lat=lat, lon=lon)

    @property
    def has_coords(self) -> bool:
        return self.lat is not None and self.lon is not None

    def describe(self) -> str:
        if self.has_coords:
            return f"lat={self.lat}, lon={self.lon}"
        return f"city={self.city!r}"


@dataclass
class CurrentConditions:
    """Point-in-time weather snapshot for a location."""
    name: str
    country: str
    timestamp: int  # UNIX timestamp (UTC)
    temp: float
    feels_like: float
    humidity: float  # percentage
    wind_speed: float
    pressure: float  # hPa
    sunrise: int
    sunset: int
    visibility: int  # metres
    description: str  # e.g., "broken clouds"
    icon: str  # e.g., "04d"

    condition_main: str = ""  # e.g., "Clouds", "Rain", "Clear"
    timezone_offset: int = 0  # Offset from UTC in seconds
    lat: Optional[float] = None
    lon: Optional[float] = None

    @property
    def has_coords(self) -> bool:
        return self.lat is not None and self.lon is not None


@dataclass
class ForecastEntry:
    """A single 3-hour forecast sample."""
    timestamp: int
    dt_txt: str  # "YYYY-MM-DD HH:MM:SS" as sent by the provider
    temp: float
    description: str
    icon: str

    @property
    def date_text(self) -> str:
        return self.dt_txt.split(" ", 1)[0]


@dataclass
class WeatherReport:
    """Result of one lookup: current conditions plus the daily forecast."""
    current: CurrentConditions
    forecast: List[ForecastEntry] = field(default_factory=list)
