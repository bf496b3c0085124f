"""Configuration models for reproducible analysis runs."""

from __future__ import annotations

from dataclasses import dataclass, field

from volzone.series.rolling import DEFAULT_BAND_STDDEVS, DEFAULT_WINDOW
from volzone.simulator.engine import DEFAULT_BUY_AMOUNT


@dataclass(frozen=True)
class RollingConfig:
    window: int = DEFAULT_WINDOW
    band_stddevs: float = DEFAULT_BAND_STDDEVS


@dataclass(frozen=True)
class SimulationConfig:
    buy_amount: float = DEFAULT_BUY_AMOUNT
    selected_zones: list[str] = field(default_factory=lambda: ["-2", "-1"])


@dataclass(frozen=True)
class ChartConfig:
    downsample_limit: int = 500


@dataclass(frozen=True)
class MonitoringConfig:
    audit_log_path: str = "runtime/audit.log"
    notifier_prefix: str = "[VOLZONE]"


@dataclass(frozen=True)
class AnalysisConfig:
    name: str
    version: str
    run_id_prefix: str
    lookback: str = "1y"
    rolling: RollingConfig = RollingConfig()
    simulation: SimulationConfig = SimulationConfig()
    chart: ChartConfig = ChartConfig()
    monitoring: MonitoringConfig = MonitoringConfig()
