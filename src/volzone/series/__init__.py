"""Daily series alignment, rolling statistics and display sampling."""

from volzone.series.aligner import (
    align_series,
    date_key,
    parse_dividends,
    parse_price_history,
    parse_timestamp,
)
from volzone.series.dividends import dividends_by_day, trailing_dividend_yield
from volzone.series.downsample import downsample
from volzone.series.lookback import LOOKBACK_YEARS, lookback_start, parse_lookback, trim_to_lookback
from volzone.series.models import DerivedDay, DividendEvent, PriceSample
from volzone.series.rolling import DEFAULT_BAND_STDDEVS, DEFAULT_WINDOW, compute_derived_days
from volzone.series.stats import daily_changes, pct_change, population_mean_sd

__all__ = [
    "DEFAULT_BAND_STDDEVS",
    "DEFAULT_WINDOW",
    "DerivedDay",
    "DividendEvent",
    "LOOKBACK_YEARS",
    "PriceSample",
    "align_series",
    "compute_derived_days",
    "daily_changes",
    "date_key",
    "dividends_by_day",
    "downsample",
    "lookback_start",
    "parse_dividends",
    "parse_lookback",
    "parse_price_history",
    "parse_timestamp",
    "pct_change",
    "population_mean_sd",
    "trailing_dividend_yield",
    "trim_to_lookback",
]
