"""Simulation data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Zone(str, Enum):
    """Distance of a day's change from the mean, in whole sigmas."""

    MINUS_TWO = "-2"
    MINUS_ONE = "-1"
    NEUTRAL = "0"
    PLUS_ONE = "1"
    PLUS_TWO = "2"


@dataclass
class SimulationState:
    shares_reinvest: float = 0.0
    shares_no_reinvest: float = 0.0
    cash_no_reinvest: float = 0.0
    total_invested: float = 0.0
    buy_count: int = 0
    total_dividends_reinvested: float = 0.0
    total_dividends_cash: float = 0.0
    buy_dates: set[datetime] = field(default_factory=set)

    def pay_dividend(self, amount_per_share: float, price: float) -> None:
        payout_reinvest = self.shares_reinvest * amount_per_share
        if payout_reinvest > 0:
            self.shares_reinvest += payout_reinvest / price
            self.total_dividends_reinvested += payout_reinvest

        payout_cash = self.shares_no_reinvest * amount_per_share
        if payout_cash > 0:
            self.cash_no_reinvest += payout_cash
            self.total_dividends_cash += payout_cash

    def buy(self, when: datetime, amount: float, price: float) -> None:
        shares = amount / price
        self.shares_reinvest += shares
        self.shares_no_reinvest += shares
        self.total_invested += amount
        self.buy_count += 1
        self.buy_dates.add(when)

    def value_reinvest(self, price: float) -> float:
        return self.shares_reinvest * price

    def value_no_reinvest(self, price: float) -> float:
        return self.shares_no_reinvest * price + self.cash_no_reinvest


@dataclass(frozen=True)
class SimulationPoint:
    date: datetime
    invested: float
    value_reinvest: float
    value_no_reinvest: float


@dataclass(frozen=True)
class SimulationResult:
    history: list[SimulationPoint]
    total_buys: int
    total_invested: float
    total_dividends: float
    current_value: float
    total_return: float
    buy_dates: frozenset[datetime]
    total_dividends_cash: float = 0.0
    current_value_no_reinvest: float = 0.0
    total_return_no_reinvest: float = 0.0
