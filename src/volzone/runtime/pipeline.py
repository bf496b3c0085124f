"""Pure composition of the alignment, statistics and simulation passes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from volzone.config.models import AnalysisConfig
from volzone.distribution.builder import build_distribution
from volzone.distribution.models import DistributionResult
from volzone.series.aligner import align_series
from volzone.series.models import DerivedDay, DividendEvent, PriceSample
from volzone.series.rolling import DEFAULT_BAND_STDDEVS, DEFAULT_WINDOW, compute_derived_days
from volzone.simulator.engine import DEFAULT_BUY_AMOUNT, VolatilityTradingSimulator
from volzone.simulator.models import SimulationResult, Zone


@dataclass(frozen=True)
class AnalysisSettings:
    window: int = DEFAULT_WINDOW
    band_stddevs: float = DEFAULT_BAND_STDDEVS
    buy_amount: float = DEFAULT_BUY_AMOUNT

    @staticmethod
    def from_config(config: AnalysisConfig) -> "AnalysisSettings":
        return AnalysisSettings(
            window=config.rolling.window,
            band_stddevs=config.rolling.band_stddevs,
            buy_amount=config.simulation.buy_amount,
        )


@dataclass(frozen=True)
class AnalysisResult:
    days: list[DerivedDay]
    distribution: DistributionResult
    simulation: SimulationResult


def analyze_series(
    prices: Iterable[PriceSample],
    settings: AnalysisSettings = AnalysisSettings(),
) -> tuple[list[DerivedDay], DistributionResult]:
    history = align_series(prices)
    days = compute_derived_days(history, window=settings.window, band_stddevs=settings.band_stddevs)
    return days, build_distribution(history)


def run_analysis(
    prices: Iterable[PriceSample],
    dividends: Iterable[DividendEvent],
    selected_zones: Iterable[Zone | str],
    current_price: Optional[float] = None,
    settings: AnalysisSettings = AnalysisSettings(),
) -> AnalysisResult:
    days, distribution = analyze_series(prices, settings)
    simulation = VolatilityTradingSimulator(settings.buy_amount).run_for_distribution(
        days,
        dividends,
        distribution,
        selected_zones=selected_zones,
        current_price=current_price,
    )
    return AnalysisResult(days=days, distribution=distribution, simulation=simulation)
