"""Lookback windows offered by the dashboard range selector."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, TypeVar

LOOKBACK_YEARS = {"1y": 1, "2y": 2, "3y": 3, "5y": 5, "10y": 10}

T = TypeVar("T")


def parse_lookback(value: str) -> str:
    key = str(value).strip().lower()
    if key not in LOOKBACK_YEARS:
        options = ", ".join(LOOKBACK_YEARS)
        raise ValueError(f"Invalid lookback: {value} (expected one of {options})")
    return key


def years_before(moment: datetime, years: int) -> datetime:
    try:
        return moment.replace(year=moment.year - years)
    except ValueError:
        # Feb 29 in a non-leap target year.
        return moment.replace(year=moment.year - years, day=28)


def lookback_start(end: datetime, lookback: str) -> datetime:
    return years_before(end, LOOKBACK_YEARS[parse_lookback(lookback)])


def trim_to_lookback(items: Iterable[T], lookback: str, end: datetime | None = None) -> list[T]:
    """Keep items (anything with a ``date``) on or after ``end - lookback``.

    ``end`` defaults to the latest date present.
    """
    items = list(items)
    if not items:
        return []
    if end is None:
        end = max(item.date for item in items)
    start = lookback_start(end, lookback)
    return [item for item in items if item.date >= start]
