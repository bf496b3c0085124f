"""Recompute analysis results only when inputs or zone selection change."""

from __future__ import annotations

from typing import Any, Iterable, Optional

from volzone.distribution.models import DistributionResult
from volzone.monitoring.audit import AuditLog
from volzone.monitoring.monitor import Monitor
from volzone.runtime.pipeline import AnalysisResult, AnalysisSettings, analyze_series
from volzone.series.models import DerivedDay, DividendEvent, PriceSample
from volzone.simulator.engine import VolatilityTradingSimulator
from volzone.simulator.models import SimulationResult, Zone
from volzone.simulator.zones import parse_zones


class AnalysisController:
    """Memoizes the last series pass and the last simulation.

    The series pass is keyed on prices and rolling settings, the simulation
    on that key plus dividends, zones, current price and buy amount, so a
    zone toggle only replays the simulator. Results are published by
    generation; a result from a superseded generation is dropped.
    """

    def __init__(
        self,
        settings: AnalysisSettings = AnalysisSettings(),
        symbol: str = "",
        audit_log: Optional[AuditLog] = None,
        monitor: Optional[Monitor] = None,
    ) -> None:
        self.settings = settings
        self.symbol = symbol
        self.audit_log = audit_log
        self.monitor = monitor
        self.simulator = VolatilityTradingSimulator(settings.buy_amount)
        self.series_computations = 0
        self.simulation_computations = 0
        self.latest: Optional[AnalysisResult] = None
        self.latest_generation = 0
        self._generation = 0
        self._series_key: Optional[tuple] = None
        self._series_value: Optional[tuple[list[DerivedDay], DistributionResult]] = None
        self._simulation_key: Optional[tuple] = None
        self._simulation_value: Optional[SimulationResult] = None

    def begin(self) -> int:
        self._generation += 1
        return self._generation

    def publish(self, generation: int, result: AnalysisResult) -> bool:
        if generation != self._generation:
            self._log("stale_result_dropped", {"generation": generation, "latest": self._generation})
            if self.monitor:
                self.monitor.stale_result(generation, self._generation)
            return False
        self.latest = result
        self.latest_generation = generation
        return True

    def compute(
        self,
        prices: Iterable[PriceSample],
        dividends: Iterable[DividendEvent],
        selected_zones: Iterable[Zone | str],
        current_price: Optional[float] = None,
    ) -> AnalysisResult:
        prices = tuple(prices)
        dividends = tuple(dividends)
        zones = parse_zones(selected_zones)

        series_key = (prices, self.settings.window, self.settings.band_stddevs)
        if series_key == self._series_key and self._series_value is not None:
            self._log("cache_hit", {"symbol": self.symbol, "stage": "series"})
        else:
            self._series_value = analyze_series(prices, self.settings)
            self._series_key = series_key
            self.series_computations += 1
            self._on_series_computed(len(prices), self._series_value[1])
        days, distribution = self._series_value

        simulation_key = (series_key, dividends, zones, current_price, self.settings.buy_amount)
        if simulation_key == self._simulation_key and self._simulation_value is not None:
            self._log("cache_hit", {"symbol": self.symbol, "stage": "simulation"})
        else:
            self._simulation_value = self.simulator.run_for_distribution(
                days,
                dividends,
                distribution,
                selected_zones=zones,
                current_price=current_price,
            )
            self._simulation_key = simulation_key
            self.simulation_computations += 1
            self._log(
                "simulation_computed",
                {
                    "symbol": self.symbol,
                    "zones": sorted(zone.value for zone in zones),
                    "total_buys": self._simulation_value.total_buys,
                    "total_invested": self._simulation_value.total_invested,
                },
            )

        return AnalysisResult(days=days, distribution=distribution, simulation=self._simulation_value)

    def refresh(
        self,
        prices: Iterable[PriceSample],
        dividends: Iterable[DividendEvent],
        selected_zones: Iterable[Zone | str],
        current_price: Optional[float] = None,
    ) -> AnalysisResult:
        generation = self.begin()
        result = self.compute(prices, dividends, selected_zones, current_price)
        self.publish(generation, result)
        return result

    def _on_series_computed(self, samples: int, distribution: DistributionResult) -> None:
        self._log(
            "analysis_computed",
            {
                "symbol": self.symbol,
                "samples": samples,
                "total_days": distribution.total_days,
                "mean": distribution.mean,
                "sd": distribution.sd,
            },
        )
        if self.monitor is None:
            return
        if not distribution.is_available:
            self.monitor.insufficient_data(self.symbol, samples)
        elif distribution.sd == 0:
            self.monitor.flat_distribution(self.symbol)

    def _log(self, event: str, payload: dict[str, Any]) -> None:
        if self.audit_log:
            self.audit_log.log(event, payload)
