"""Tests for weather service."""
import pytest
from weather_service import WeatherService
from weather_provider import WeatherProviderBase, WeatherProviderError
from weather_data import ForecastEntry, Location, Units


class MockProvider(WeatherProviderBase):
    """Mock weather provider for testing."""

    def __init__(self, current=None, forecast=None, current_error=None, forecast_error=None):
        self.current = current
        self.forecast = forecast or []
        self.current_error = current_error
        self.forecast_error = forecast_error
        self.calls = []

    def get_current(self, location, units):
        self.calls.append(("current", location, units))
        if self.current_error:
            raise self.current_error
        return self.current

    def get_forecast(self, location, units):
        self.calls.append(("forecast", location, units))
        if self.forecast_error:
            raise self.forecast_error
        return self.forecast


@pytest.fixture
def sample_readings():
    return [
        ForecastEntry(1684918800, "2023-05-24 09:00:00", 18.0, "clear sky", "01d"),
        ForecastEntry(1684929600, "2023-05-24 12:00:00", 22.0, "clear sky", "01d"),
        ForecastEntry(1685016000, "2023-05-25 12:00:00", 19.0, "light rain", "10d"),
    ]


def test_fetch_sequences_current_then_forecast(sample_current, sample_readings):
    provider = MockProvider(current=sample_current, forecast=sample_readings)
    service = WeatherService(provider)
    location = Location.from_city("Testville")

    report = service.fetch(location, Units.IMPERIAL)

    assert [c[0] for c in provider.calls] == ["current", "forecast"]
    assert all(c[1] == location and c[2] is Units.IMPERIAL for c in provider.calls)
    assert report.current is sample_current
    assert [e.dt_txt for e in report.forecast] == ["2023-05-24 12:00:00", "2023-05-25 12:00:00"]


def test_fetch_current_failure_skips_forecast():
    provider = MockProvider(current_error=WeatherProviderError("OpenWeather API error 404: city not found"))
    service = WeatherService(provider)

    with pytest.raises(WeatherProviderError):
        service.fetch(Location.from_city("Nowhere"), Units.METRIC)

    assert [c[0] for c in provider.calls] == ["current"]


def test_fetch_forecast_failure_is_ignored(sample_current):
    provider = MockProvider(current=sample_current, forecast_error=WeatherProviderError("Network error"))
    service = WeatherService(provider)

    report = service.fetch(Location.from_city("Testville"), Units.METRIC)

    assert report.current is sample_current
    assert report.forecast == []


def test_fetch_does_not_cache(sample_current):
    provider = MockProvider(current=sample_current)
    service = WeatherService(provider)

    service.fetch(Location.from_city("Testville"), Units.METRIC)
    service.fetch(Location.from_city("Testville"), Units.METRIC)

    assert len(provider.calls) == 4
