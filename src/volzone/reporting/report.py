"""JSON report and chart series for the presentation layer."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Optional

from volzone.distribution.builder import sigma_markers
from volzone.distribution.models import DistributionResult
from volzone.runtime.context import RunContext
from volzone.runtime.pipeline import AnalysisResult
from volzone.series.downsample import downsample
from volzone.series.models import DerivedDay
from volzone.simulator.models import SimulationResult, Zone


def price_chart_points(
    days: list[DerivedDay],
    simulation: Optional[SimulationResult],
    limit: int,
) -> list[dict[str, Any]]:
    buy_dates = simulation.buy_dates if simulation else frozenset()
    points = []
    for day in downsample(days, limit):
        points.append(
            {
                "date": day.date.isoformat(),
                "close": day.close,
                "change_percent": day.change_percent,
                "rolling_sd": day.rolling_sd,
                "sma20": day.sma20,
                "upper_band": day.upper_band,
                "lower_band": day.lower_band,
                "buy_price": day.close if day.date in buy_dates else None,
            }
        )
    return points


def equity_chart_points(simulation: SimulationResult, limit: int) -> list[dict[str, Any]]:
    return [
        {
            "date": point.date.isoformat(),
            "invested": point.invested,
            "value_reinvest": point.value_reinvest,
            "value_no_reinvest": point.value_no_reinvest,
        }
        for point in downsample(simulation.history, limit)
    ]


def distribution_payload(distribution: DistributionResult) -> dict[str, Any]:
    return {
        "mean": distribution.mean,
        "sd": distribution.sd,
        "count_1sigma": distribution.count_1sigma,
        "count_2sigma": distribution.count_2sigma,
        "pct_within_1sigma": distribution.pct_within_1sigma,
        "pct_within_2sigma": distribution.pct_within_2sigma,
        "total_days": distribution.total_days,
        "bins": [{"bin": item.bin, "count": item.count} for item in distribution.bins],
        "markers": [
            {"label": marker.label, "value": marker.value, "bin": marker.bin}
            for marker in sigma_markers(distribution)
        ],
    }


def simulation_summary(simulation: SimulationResult) -> dict[str, Any]:
    return {
        "total_buys": simulation.total_buys,
        "total_invested": simulation.total_invested,
        "total_dividends": simulation.total_dividends,
        "total_dividends_cash": simulation.total_dividends_cash,
        "current_value": simulation.current_value,
        "total_return": simulation.total_return,
        "current_value_no_reinvest": simulation.current_value_no_reinvest,
        "total_return_no_reinvest": simulation.total_return_no_reinvest,
        "buy_dates": sorted(moment.isoformat() for moment in simulation.buy_dates),
    }


def build_report(
    symbol: str,
    result: AnalysisResult,
    selected_zones: Iterable[Zone],
    limit: int,
    current_price: Optional[float] = None,
    dividend_yield: Optional[float] = None,
    context: Optional[RunContext] = None,
    lookback: Optional[str] = None,
) -> dict[str, Any]:
    return {
        "generated_at_utc": datetime.now(timezone.utc).isoformat(),
        "run": context.as_dict() if context else None,
        "symbol": symbol,
        "lookback": lookback,
        "current_price": current_price,
        "dividend_yield": dividend_yield,
        "selected_zones": sorted(zone.value for zone in selected_zones),
        "samples": len(result.days),
        "distribution": distribution_payload(result.distribution),
        "simulation": simulation_summary(result.simulation),
        "price_chart": price_chart_points(result.days, result.simulation, limit),
        "equity_chart": equity_chart_points(result.simulation, limit),
    }


def write_report(path: str | Path, report: dict[str, Any]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(report, indent=2, default=str), encoding="utf-8")
    return path
