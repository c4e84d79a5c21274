"""Geolocation backends used by "use my location"."""
import logging
from abc import ABC, abstractmethod
from typing import Tuple

import requests

DEFAULT_GEO_URL = "http://ip-api.com/json/"


class GeolocationError(Exception):
    """Exception raised when the current position cannot be determined."""
    pass


class GeolocatorBase(ABC):
    """Abstract base class for position lookups."""

    @abstractmethod
    def locate(self) -> Tuple[float, float]:
        """
        Request the current position once.

        Returns:
            (lat, lon) tuple

        Raises:
            GeolocationError: If the position is unavailable
        """
        pass


class StaticGeolocator(GeolocatorBase):
    """Returns a fixed, configured position."""

    def __init__(self, lat: float, lon: float):
        self.lat = lat
        self.lon = lon

    def locate(self) -> Tuple[float, float]:
        logging.debug(f"Using configured position: lat={self.lat}, lon={self.lon}")
        return self.lat, self.lon


class IpGeolocator(GeolocatorBase):
    """
    Approximates the position from the machine's public IP address.

    Expects an ip-api.com style JSON body: {"status": "success", "lat": .., "lon": ..}.
    """

    def __init__(self, url: str = DEFAULT_GEO_URL, timeout: int = 10):
        self.url = url
        self.timeout = timeout

    def locate(self) -> Tuple[float, float]:
        try:
            logging.info(f"Requesting IP geolocation: {self.url}")
            response = requests.get(self.url, timeout=self.timeout)
            logging.info(f"Geolocation response status: {response.status_code}")
            if not response.ok:
                raise GeolocationError(f"HTTP {response.status_code}")
            data = response.json()
        except requests.exceptions.RequestException as e:
            logging.error(f"Network error during geolocation: {e}")
            raise GeolocationError(f"Network error: {str(e)}")
        except ValueError as e:
            raise GeolocationError(f"Failed to parse response: {str(e)}")

        if not isinstance(data, dict) or data.get("status", "success") != "success":
            message = data.get("message", "unknown failure") if isinstance(data, dict) else "unexpected body"
            logging.error(f"Geolocation lookup failed: {message}")
            raise GeolocationError(f"Lookup failed: {message}")

        try:
            lat, lon = float(data["lat"]), float(data["lon"])
        except (KeyError, TypeError, ValueError) as e:
            raise GeolocationError(f"Response missing coordinates: {e}")

        logging.info(f"Located at lat={lat}, lon={lon}")
        return lat, lon
