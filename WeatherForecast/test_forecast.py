"""Tests for the daily forecast reducer."""
from forecast import reduce_to_daily
from weather_data import ForecastEntry


def _entry(dt_txt, timestamp=0, temp=20.0):
    return ForecastEntry(timestamp=timestamp, dt_txt=dt_txt, temp=temp, description="clear sky", icon="01d")


def test_keeps_only_noon_readings():
    entries = [
        _entry("2023-05-24 09:00:00", 1),
        _entry("2023-05-24 12:00:00", 2),
        _entry("2023-05-24 15:00:00", 3),
        _entry("2023-05-25 12:00:00", 4),
        _entry("2023-05-26 00:00:00", 5),
    ]

    daily = reduce_to_daily(entries)

    assert [e.timestamp for e in daily] == [2, 4]


def test_one_reading_per_day_in_order():
    entries = [
        _entry("2023-05-24 12:00:00", 1),
        _entry("2023-05-24 12:00:00", 2),
        _entry("2023-05-25 12:00:00", 3),
        _entry("2023-05-26 12:00:00", 4),
    ]

    daily = reduce_to_daily(entries)

    assert [e.timestamp for e in daily] == [1, 3, 4]
    assert [e.date_text for e in daily] == ["2023-05-24", "2023-05-25", "2023-05-26"]


def test_empty_and_no_noon():
    assert reduce_to_daily([]) == []
    assert reduce_to_daily([_entry("2023-05-24 03:00:00")]) == []


def test_custom_marker():
    entries = [_entry("2023-05-24 09:00:00", 1), _entry("2023-05-24 12:00:00", 2)]
    assert [e.timestamp for e in reduce_to_daily(entries, marker="09:00:00")] == [1]


def test_sample_forecast(sample_forecast_response):
    """A full provider-style list reduces to one reading for each of its days."""
    entries = [
        _entry(r["dt_txt"], r["dt"], r["main"]["temp"])
        for r in sample_forecast_response["list"]
    ]

    daily = reduce_to_daily(entries)

    assert [e.temp for e in daily] == [22.6, 19.5, 25.0]
    assert daily == sorted(daily, key=lambda e: e.timestamp)
