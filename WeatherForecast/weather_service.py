"""Weather service that sequences the current-conditions and forecast requests."""
import logging

from forecast import reduce_to_daily
from weather_data import Location, Units, WeatherReport
from weather_provider import WeatherProviderBase, WeatherProviderError


class WeatherService:
    """
    Fetches current conditions, then the forecast, for the same location and units.

    A failed current-conditions request aborts the lookup. A failed forecast
    request only leaves the forecast empty. Nothing is cached or retried.
    """

    def __init__(self, provider: WeatherProviderBase):
        self.provider = provider

    def fetch(self, location: Location, units: Units) -> WeatherReport:
        """
        Look up the weather for a location.

        Returns:
            WeatherReport: Current conditions and the noon-per-day forecast

        Raises:
            WeatherProviderError: If the current conditions cannot be fetched
        """
        units = Units(units)
        logging.info(f"Fetching weather for {location.describe()} ({units.value})")

        current = self.provider.get_current(location, units)

        try:
            readings = self.provider.get_forecast(location, units)
        except WeatherProviderError as e:
            logging.warning(f"Forecast fetch failed, showing current conditions only: {e}")
            return WeatherReport(current=current)

        daily = reduce_to_daily(readings)
        logging.info(f"Forecast reduced from {len(readings)} readings to {len(daily)} days")
        return WeatherReport(current=current, forecast=daily)
