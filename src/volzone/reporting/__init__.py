"""Report building for the dashboard viewer."""

from volzone.reporting.report import (
    build_report,
    distribution_payload,
    equity_chart_points,
    price_chart_points,
    simulation_summary,
    write_report,
)

__all__ = [
    "build_report",
    "distribution_payload",
    "equity_chart_points",
    "price_chart_points",
    "simulation_summary",
    "write_report",
]
