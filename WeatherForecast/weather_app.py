"""In-memory view state and the user actions that refresh it."""
import logging
from typing import List, Optional

from geolocation import GeolocationError, GeolocatorBase
from weather_data import CurrentConditions, ForecastEntry, Location, Units
from weather_provider import WeatherProviderError
from weather_service import WeatherService

CITY_NOT_FOUND = "City not found"
LOCATION_UNAVAILABLE = "Unable to retrieve your location"
GEOLOCATION_UNSUPPORTED = "Geolocation not supported"


class WeatherApp:
    """
    View state for the weather display.

    Every successful lookup replaces `current` and `forecast` wholesale.
    `loading` is set for the duration of a lookup and blocks new submits.
    """

    def __init__(
        self,
        service: WeatherService,
        geolocator: Optional[GeolocatorBase] = None,
        units: Units = Units.METRIC,
    ):
        self.service = service
        self.geolocator = geolocator
        self.units = Units(units)

        self.city: str = ""
        self.current: Optional[CurrentConditions] = None
        self.forecast: List[ForecastEntry] = []
        self.loading: bool = False
        self.error: Optional[str] = None
        self.last_location: Optional[Location] = None

    def submit(self, city: Optional[str] = None) -> None:
        """Search for the city text, optionally replacing it first."""
        if city is not None:
            self.city = city
        if self.loading:
            logging.debug("Lookup already in progress, ignoring submit")
            return
        if not self.city.strip():
            logging.debug("Empty city, nothing to search")
            return
        self.fetch(Location.from_city(self.city))

    def fetch(self, location: Location) -> None:
        self.last_location = location
        self.loading = True
        self.error = None
        self.current = None
        self.forecast = []
        try:
            report = self.service.fetch(location, self.units)
        except WeatherProviderError as e:
            logging.error(f"Lookup failed for {location.describe()}: {e}")
            self.error = CITY_NOT_FOUND
            return
        finally:
            self.loading = False

        self.current = report.current
        self.forecast = report.forecast

    def use_my_location(self) -> None:
        """Look up the weather at the current position."""
        if self.geolocator is None:
            self.error = GEOLOCATION_UNSUPPORTED
            return

        self.loading = True
        try:
            lat, lon = self.geolocator.locate()
        except GeolocationError as e:
            logging.error(f"Geolocation failed: {e}")
            self.loading = False
            self.error = LOCATION_UNAVAILABLE
            return

        self.fetch(Location.from_coords(lat, lon))

    def toggle_units(self, units: Units) -> None:
        """Switch units and refetch the last result with the new ones."""
        units = Units(units)
        if units is self.units:
            return
        self.units = units
        logging.info(f"Units changed to {units.value}")

        if self.current is None or self.last_location is None:
            return
        if self.current.has_coords:
            self.fetch(Location.from_coords(self.current.lat, self.current.lon))
        else:
            self.fetch(self.last_location)
