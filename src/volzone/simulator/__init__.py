"""Simulation helpers."""

from volzone.simulator.engine import DEFAULT_BUY_AMOUNT, VolatilityTradingSimulator
from volzone.simulator.models import SimulationPoint, SimulationResult, SimulationState, Zone
from volzone.simulator.zones import DEFAULT_ZONES, classify_zone, parse_zones

__all__ = [
    "DEFAULT_BUY_AMOUNT",
    "DEFAULT_ZONES",
    "SimulationPoint",
    "SimulationResult",
    "SimulationState",
    "VolatilityTradingSimulator",
    "Zone",
    "classify_zone",
    "parse_zones",
]
