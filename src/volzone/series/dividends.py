"""Dividend lookups used by the simulator and the quote summary."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from volzone.series.aligner import date_key
from volzone.series.lookback import years_before
from volzone.series.models import DividendEvent


def dividends_by_day(events: Iterable[DividendEvent]) -> dict[str, float]:
    # Later events on the same calendar day replace earlier ones.
    return {date_key(event.date): event.amount for event in events}


def trailing_dividend_yield(
    events: Iterable[DividendEvent],
    price: float,
    as_of: datetime,
) -> Optional[float]:
    """Percent yield from dividends paid in the year before ``as_of``."""
    if price is None or price <= 0:
        return None
    start = years_before(as_of, 1)
    total = sum(event.amount for event in events if start <= event.date <= as_of)
    if total <= 0:
        return None
    return total / price * 100.0
