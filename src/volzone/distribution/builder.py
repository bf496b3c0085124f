"""Histogram of daily returns with sigma markers.

Bins are 0.1 percentage points wide and keyed by an integer number of tenths
(``floor(change / 0.1)``), so ``-0.25`` lands in bin ``-3`` (value ``-0.3``)
and ``0.15`` in bin ``1`` (value ``0.1``). The binned axis is pre-built to
cover both the observed changes and the mean/±1σ/±2σ markers, so every
change hits an existing bin and every marker can be drawn on the axis.
"""

from __future__ import annotations

import math
from typing import Iterable

from volzone.distribution.models import DistributionBin, DistributionResult, SigmaMarker
from volzone.series.aligner import align_series
from volzone.series.models import PriceSample
from volzone.series.stats import daily_changes, population_mean_sd

BIN_WIDTH = 0.1


def bin_key(value: float) -> int:
    return math.floor(value / BIN_WIDTH)


def _snap_key(value: float) -> int:
    # Half-up rounding onto the bin grid.
    return math.floor(value / BIN_WIDTH + 0.5)


def _marker_values(mean: float, sd: float) -> list[tuple[str, float]]:
    return [
        ("Mean", mean),
        ("+1σ", mean + sd),
        ("-1σ", mean - sd),
        ("+2σ", mean + 2 * sd),
        ("-2σ", mean - 2 * sd),
    ]


def return_changes(samples: Iterable[PriceSample]) -> list[float]:
    """Daily percentage changes for days 1..N-1.

    Day 0 is excluded from the population rather than counted as a zero
    change; the rolling pass's 0.0 for day 0 is a chart placeholder only.
    """
    closes = [sample.close for sample in align_series(samples)]
    return daily_changes(closes)


def build_distribution(samples: Iterable[PriceSample]) -> DistributionResult:
    changes = return_changes(samples)
    if not changes:
        return DistributionResult()

    mean, sd = population_mean_sd(changes)
    count_1sigma = sum(1 for change in changes if abs(change - mean) <= sd)
    count_2sigma = sum(1 for change in changes if abs(change - mean) <= 2 * sd)

    markers = [value for _, value in _marker_values(mean, sd)]
    low = min(min(changes), min(markers))
    high = max(max(changes), max(markers))
    lower_key = math.floor(low / BIN_WIDTH)
    upper_key = math.ceil(high / BIN_WIDTH)

    counts = {key: 0 for key in range(lower_key, upper_key + 1)}
    for change in changes:
        key = bin_key(change)
        if key not in counts:
            # Unreachable while the range above brackets every change.
            counts[key] = 0
        counts[key] += 1

    bins = [DistributionBin(tenths=key, count=counts[key]) for key in sorted(counts)]
    return DistributionResult(
        bins=bins,
        mean=mean,
        sd=sd,
        count_1sigma=count_1sigma,
        count_2sigma=count_2sigma,
        total_days=len(changes),
    )


def sigma_markers(result: DistributionResult) -> list[SigmaMarker]:
    if not result.is_available:
        return []
    return [
        SigmaMarker(label=label, value=value, tenths=_snap_key(value))
        for label, value in _marker_values(result.mean, result.sd)
    ]
