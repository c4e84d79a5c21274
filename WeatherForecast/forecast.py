"""Reduces the 3-hour forecast list to one reading per day."""
from typing import Iterable, List

from weather_data import ForecastEntry

NOON_MARKER = "12:00:00"


def reduce_to_daily(entries: Iterable[ForecastEntry], marker: str = NOON_MARKER) -> List[ForecastEntry]:
    """
    Keep the noon reading of each day.

    Entries whose timestamp text contains `marker` are kept, at most one per
    calendar date (the first seen). Provider order is preserved, which is
    chronological.
    """
    daily = []
    seen_dates = set()
    for entry in entries:
        if marker not in entry.dt_txt:
            continue
        if entry.date_text in seen_dates:
            continue
        seen_dates.add(entry.date_text)
        daily.append(entry)
    return daily
