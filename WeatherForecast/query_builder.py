"""Builds OpenWeather endpoint URLs for a location and unit preference."""
from dataclasses import dataclass
from typing import Dict, Union

import requests

from weather_data import Location, Units

BASE_URL = "https://api.openweathermap.org/data/2.5"
CURRENT_URL = f"{BASE_URL}/weather"
FORECAST_URL = f"{BASE_URL}/forecast"


@dataclass(frozen=True)
class WeatherQuery:
    """The pair of URLs needed for one lookup."""
    current_url: str
    forecast_url: str


def build_params(location: Location, units: Units, api_key: str, lang: str = "en") -> Dict[str, Union[str, float]]:
    """
    Build the query parameters shared by both endpoints.

    Raises:
        ValueError: If the location has neither coordinates nor a city name
    """
    params: Dict[str, Union[str, float]] = {}
    if location.has_coords:
        params["lat"] = location.lat
        params["lon"] = location.lon
    else:
        if not location.city or not location.city.strip():
            raise ValueError("City name must not be empty")
        # Unknown names are left for the provider to reject
        params["q"] = location.city
    params["appid"] = api_key
    params["units"] = Units(units).value
    params["lang"] = lang
    return params


def _encode(url: str, params: Dict[str, Union[str, float]]) -> str:
    return requests.Request("GET", url, params=params).prepare().url


def build_query(location: Location, units: Units, api_key: str, lang: str = "en") -> WeatherQuery:
    """Construct the current-conditions and forecast URLs for a location."""
    params = build_params(location, units, api_key, lang)
    return WeatherQuery(
        current_url=_encode(CURRENT_URL, params),
        forecast_url=_encode(FORECAST_URL, params),
    )
