"""Shared OpenWeather payloads for the test suite."""
import pytest

from weather_data import CurrentConditions

# 2023-05-24 00:00:00 UTC
DAY_START = 1684886400


@pytest.fixture
def sample_current_response():
    """Sample OpenWeather Current Weather API response."""
    return {
        "coord": {"lon": -94.04, "lat": 33.44},
        "weather": [
            {
                "id": 803,
                "main": "Clouds",
                "description": "broken clouds",
                "icon": "04d"
            }
        ],
        "base": "stations",
        "main": {
            "temp": 21.5,
            "feels_like": 21.46,
            "pressure": 1014,
            "humidity": 89
        },
        "visibility": 10000,
        "wind": {"speed": 3.13, "deg": 93},
        "clouds": {"all": 53},
        "dt": DAY_START + 43090,
        "sys": {
            "country": "US",
            "sunrise": DAY_START + 11 * 3600 + 30 * 60,
            "sunset": DAY_START + 25 * 3600 + 15 * 60
        },
        "timezone": -18000,
        "name": "Testville",
        "id": 123,
        "cod": 200
    }


def _reading(day, hour, temp, description="clear sky", icon="01d"):
    dt = DAY_START + day * 86400 + hour * 3600
    return {
        "dt": dt,
        "main": {"temp": temp, "feels_like": temp, "humidity": 50},
        "weather": [{"main": "Clear", "description": description, "icon": icon}],
        "dt_txt": f"2023-05-{24 + day:02d} {hour:02d}:00:00",
    }


@pytest.fixture
def sample_forecast_response():
    """Sample 5 day / 3 hour forecast response (abridged)."""
    return {
        "cod": "200",
        "cnt": 7,
        "list": [
            _reading(0, 9, 18.2),
            _reading(0, 12, 22.6, "few clouds", "02d"),
            _reading(0, 15, 24.1),
            _reading(1, 0, 14.0),
            _reading(1, 12, 19.5, "light rain", "10d"),
            _reading(2, 6, 15.3),
            _reading(2, 12, 25.0),
        ],
        "city": {"name": "Testville", "country": "US", "timezone": -18000},
    }


@pytest.fixture
def sample_current():
    """Sample current conditions."""
    return CurrentConditions(
        name="Testville",
        country="US",
        timestamp=DAY_START + 43090,
        temp=20.0,
        feels_like=19.0,
        humidity=60,
        wind_speed=5.0,
        pressure=1012,
        sunrise=DAY_START + 11 * 3600 + 30 * 60,
        sunset=DAY_START + 25 * 3600 + 15 * 60,
        visibility=10000,
        description="clear sky",
        icon="01d",
    )
