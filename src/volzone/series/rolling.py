"""Trailing-window volatility and Bollinger bands per trading day."""

from __future__ import annotations

from typing import Iterable

from volzone.series.aligner import align_series
from volzone.series.models import DerivedDay, PriceSample
from volzone.series.stats import daily_changes, pct_change, population_mean_sd

DEFAULT_WINDOW = 20
DEFAULT_BAND_STDDEVS = 2.0


def compute_derived_days(
    samples: Iterable[PriceSample],
    window: int = DEFAULT_WINDOW,
    band_stddevs: float = DEFAULT_BAND_STDDEVS,
) -> list[DerivedDay]:
    if window < 2:
        raise ValueError(f"Rolling window must be at least 2, got {window}")

    history = align_series(samples)
    closes = [sample.close for sample in history]
    days: list[DerivedDay] = []

    for index, sample in enumerate(history):
        # Day 0 carries a 0.0 placeholder for charting only.
        change = pct_change(closes[index - 1], sample.close) if index > 0 else 0.0

        if index < window - 1:
            days.append(DerivedDay(date=sample.date, close=sample.close, change_percent=change))
            continue

        slice_ = closes[index - window + 1 : index + 1]
        # The first close of the window has no predecessor inside it.
        _, rolling_sd = population_mean_sd(daily_changes(slice_))
        mean_price, sd_price = population_mean_sd(slice_)

        days.append(
            DerivedDay(
                date=sample.date,
                close=sample.close,
                change_percent=change,
                rolling_sd=rolling_sd,
                sma20=mean_price,
                upper_band=mean_price + band_stddevs * sd_price,
                lower_band=mean_price - band_stddevs * sd_price,
            )
        )

    return days
