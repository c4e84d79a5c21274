"""Weather provider abstraction - allows swapping different weather APIs."""
from abc import ABC, abstractmethod
from typing import List

from weather_data import CurrentConditions, ForecastEntry, Location, Units


class WeatherProviderBase(ABC):
    """Abstract base class for weather data providers."""

    @abstractmethod
    def get_current(self, location: Location, units: Units) -> CurrentConditions:
        """
        Fetch current conditions for a location.

        Args:
            location: City name or coordinates to look up
            units: Unit system the provider should report in

        Returns:
            CurrentConditions: Current weather information

        Raises:
            WeatherProviderError: If the provider fails to fetch data
        """
        pass

    @abstractmethod
    def get_forecast(self, location: Location, units: Units) -> List[ForecastEntry]:
        """
        Fetch the full 3-hour interval forecast for a location.

        Raises:
            WeatherProviderError: If the provider fails to fetch data
        """
        pass


class WeatherProviderError(Exception):
    """Exception raised when a weather provider fails."""
    pass
