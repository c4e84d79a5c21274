"""OpenWeather Current Weather and 5-day Forecast API provider implementation."""
import logging
from typing import Any, Dict, List, Optional

import requests

from query_builder import build_query
from weather_data import CurrentConditions, ForecastEntry, Location, Units
from weather_provider import WeatherProviderBase, WeatherProviderError


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


class OpenWeatherProvider(WeatherProviderBase):
    """
    Weather provider using the free OpenWeather 2.5 APIs.

    Current conditions: https://openweathermap.org/current
    5 day / 3 hour forecast: https://openweathermap.org/forecast5
    """

    def __init__(self, api_key: str, lang: str = "en", timeout: int = 10):
        """
        Initialize OpenWeather provider.

        Args:
            api_key: OpenWeather API key
            lang: Language code for descriptions (e.g., "en", "de")
            timeout: HTTP request timeout in seconds
        """
        self.api_key = api_key
        self.lang = lang
        self.timeout = timeout

    def get_current(self, location: Location, units: Units) -> CurrentConditions:
        """
        Fetch current conditions from the Current Weather API.

        Raises:
            WeatherProviderError: If the API request fails
        """
        query = build_query(location, units, self.api_key, self.lang)
        logging.debug(f"Current conditions request for {location.describe()}, units={Units(units).value}")
        data = self._get_json(query.current_url)

        try:
            weather_array = data.get("weather", [])
            if not weather_array:
                logging.error("Response missing 'weather' array")
                raise WeatherProviderError("Response missing 'weather' array")
            weather = weather_array[0]

            main_data = data.get("main", {})
            if not main_data:
                raise WeatherProviderError("Response missing 'main' block")

            sys_data = data.get("sys", {}) or {}
            wind_data = data.get("wind", {}) or {}
            coord = data.get("coord") or {}

            conditions = CurrentConditions(
                name=data.get("name", ""),
                country=sys_data.get("country", ""),
                timestamp=int(data.get("dt", 0)),
                temp=float(main_data["temp"]),
                feels_like=float(main_data.get("feels_like", main_data["temp"])),
                humidity=float(main_data.get("humidity", 0)),
                wind_speed=float(wind_data.get("speed", 0.0)),
                pressure=float(main_data.get("pressure", 0)),
                sunrise=int(sys_data.get("sunrise", 0)),
                sunset=int(sys_data.get("sunset", 0)),
                visibility=int(data.get("visibility", 0)),
                description=weather.get("description", ""),
                icon=weather.get("icon", ""),
                condition_main=weather.get("main", "Unknown"),
                timezone_offset=int(data.get("timezone", 0)),
                lat=_optional_float(coord.get("lat")),
                lon=_optional_float(coord.get("lon")),
            )
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            logging.error(f"Failed to parse API response: {e}", exc_info=True)
            raise WeatherProviderError(f"Failed to parse response: {str(e)}")

        logging.info(f"Parsed current conditions: {conditions.name}, {conditions.country} {conditions.temp}, {conditions.description}")
        return conditions

    def get_forecast(self, location: Location, units: Units) -> List[ForecastEntry]:
        """
        Fetch the 5 day / 3 hour forecast list, in provider order.

        Raises:
            WeatherProviderError: If the API request fails
        """
        query = build_query(location, units, self.api_key, self.lang)
        logging.debug(f"Forecast request for {location.describe()}, units={Units(units).value}")
        data = self._get_json(query.forecast_url)

        try:
            entries = []
            for reading in data["list"]:
                weather = (reading.get("weather") or [{}])[0]
                entries.append(ForecastEntry(
                    timestamp=int(reading["dt"]),
                    dt_txt=str(reading["dt_txt"]),
                    temp=float(reading["main"]["temp"]),
                    description=weather.get("description", ""),
                    icon=weather.get("icon", ""),
                ))
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            logging.error(f"Failed to parse forecast response: {e}", exc_info=True)
            raise WeatherProviderError(f"Failed to parse response: {str(e)}")

        logging.info(f"Parsed {len(entries)} forecast readings")
        return entries

    def _get_json(self, url: str) -> Dict[str, Any]:
        """GET a URL and return its decoded JSON body."""
        try:
            # The URL carries the API key, so only the endpoint path is logged
            logging.info(f"Making OpenWeather API request: {url.split('?', 1)[0]}")
            response = requests.get(url, timeout=self.timeout)
            logging.info(f"API response status: {response.status_code}")

            if not response.ok:
                logging.error(f"API request failed with status {response.status_code}")
                self._handle_error_response(response)
        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during API request: {e}")
            raise WeatherProviderError(f"Network error: {str(e)}")

        try:
            data = response.json()
            logging.debug(f"API response (truncated): {str(data)[:500]}...")
        except ValueError as e:
            logging.error(f"Response body is not valid JSON: {e}")
            raise WeatherProviderError(f"Failed to parse response: {str(e)}")

        if not isinstance(data, dict):
            raise WeatherProviderError("Failed to parse response: expected a JSON object")
        return data

    def _handle_error_response(self, response: requests.Response) -> None:
        """Parse and raise error from OpenWeather error response."""
        try:
            error_data = response.json()
        except ValueError:
            # Not JSON, use HTTP status
            logging.error(f"Non-JSON error response: HTTP {response.status_code}, body: {response.text[:500]}")
            raise WeatherProviderError(f"HTTP {response.status_code}: {response.text[:200]}")

        logging.error(f"OpenWeather API error response: {error_data}")
        if not isinstance(error_data, dict):
            error_data = {}
        cod = error_data.get("cod", response.status_code)
        message = error_data.get("message", "Unknown error")
        raise WeatherProviderError(f"OpenWeather API error {cod}: {message}")
