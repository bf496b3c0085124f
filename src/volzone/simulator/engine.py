"""Volatility-triggered dollar-cost-averaging simulator."""

from __future__ import annotations

from typing import Iterable, Optional

from volzone.distribution.models import DistributionResult
from volzone.series.aligner import date_key
from volzone.series.dividends import dividends_by_day
from volzone.series.models import DerivedDay, DividendEvent
from volzone.simulator.models import SimulationPoint, SimulationResult, SimulationState, Zone
from volzone.simulator.zones import classify_zone, parse_zones

DEFAULT_BUY_AMOUNT = 100.0


def _total_return(value: float, invested: float) -> float:
    return 0.0 if invested == 0 else (value - invested) / invested * 100.0


class VolatilityTradingSimulator:
    """Replay a DCA rule over derived days under two dividend policies.

    Each ``run`` starts from an empty ``SimulationState``; nothing carries
    over between zone selections.
    """

    def __init__(self, buy_amount: float = DEFAULT_BUY_AMOUNT) -> None:
        if buy_amount <= 0:
            raise ValueError(f"Buy amount must be positive, got {buy_amount}")
        self.buy_amount = buy_amount

    def run(
        self,
        days: Iterable[DerivedDay],
        dividends: Iterable[DividendEvent],
        mean: float,
        sd: float,
        selected_zones: Iterable[Zone | str],
        current_price: Optional[float] = None,
    ) -> SimulationResult:
        zones = parse_zones(selected_zones)
        payouts = dividends_by_day(dividends)
        state = SimulationState()
        history: list[SimulationPoint] = []
        last_close: Optional[float] = None

        for day in days:
            amount = payouts.get(date_key(day.date))
            if amount is not None:
                state.pay_dividend(amount, day.close)

            if classify_zone(day.change_percent, mean, sd) in zones:
                state.buy(day.date, self.buy_amount, day.close)

            history.append(
                SimulationPoint(
                    date=day.date,
                    invested=state.total_invested,
                    value_reinvest=state.value_reinvest(day.close),
                    value_no_reinvest=state.value_no_reinvest(day.close),
                )
            )
            last_close = day.close

        return self._finalize_result(state, history, current_price if current_price is not None else last_close)

    def run_for_distribution(
        self,
        days: Iterable[DerivedDay],
        dividends: Iterable[DividendEvent],
        distribution: DistributionResult,
        selected_zones: Iterable[Zone | str],
        current_price: Optional[float] = None,
    ) -> SimulationResult:
        return self.run(
            days,
            dividends,
            mean=distribution.mean,
            sd=distribution.sd,
            selected_zones=selected_zones,
            current_price=current_price,
        )

    def _finalize_result(
        self,
        state: SimulationState,
        history: list[SimulationPoint],
        price: Optional[float],
    ) -> SimulationResult:
        mark = price if price is not None else 0.0
        current_value = state.value_reinvest(mark)
        current_value_no_reinvest = state.value_no_reinvest(mark)
        return SimulationResult(
            history=history,
            total_buys=state.buy_count,
            total_invested=state.total_invested,
            total_dividends=state.total_dividends_reinvested,
            current_value=current_value,
            total_return=_total_return(current_value, state.total_invested),
            buy_dates=frozenset(state.buy_dates),
            total_dividends_cash=state.total_dividends_cash,
            current_value_no_reinvest=current_value_no_reinvest,
            total_return_no_reinvest=_total_return(current_value_no_reinvest, state.total_invested),
        )
