"""Population statistics shared by the rolling and distribution passes."""

from __future__ import annotations

from typing import Sequence


def pct_change(previous: float, current: float) -> float:
    return (current - previous) / previous * 100.0


def daily_changes(closes: Sequence[float]) -> list[float]:
    return [pct_change(closes[index - 1], closes[index]) for index in range(1, len(closes))]


def population_mean_sd(values: Sequence[float]) -> tuple[float, float]:
    """Mean and standard deviation dividing by N (not N-1).

    An empty sequence yields ``(0.0, 0.0)``.
    """
    count = len(values)
    if count == 0:
        return 0.0, 0.0
    mean = sum(values) / count
    variance = sum((value - mean) ** 2 for value in values) / count
    return mean, variance**0.5
