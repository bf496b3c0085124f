"""Config loading and freezing."""

from volzone.config.loader import (
    compute_config_hash,
    freeze_config,
    load_config,
    serialize_config,
    verify_config_lock,
)
from volzone.config.models import (
    AnalysisConfig,
    ChartConfig,
    MonitoringConfig,
    RollingConfig,
    SimulationConfig,
)

__all__ = [
    "AnalysisConfig",
    "ChartConfig",
    "MonitoringConfig",
    "RollingConfig",
    "SimulationConfig",
    "compute_config_hash",
    "freeze_config",
    "load_config",
    "serialize_config",
    "verify_config_lock",
]
