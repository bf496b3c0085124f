"""Daily price and dividend series structures."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class PriceSample:
    date: datetime
    close: float


@dataclass(frozen=True)
class DividendEvent:
    date: datetime
    amount: float  # currency per share


@dataclass(frozen=True)
class DerivedDay:
    """One trading day with its change and rolling window statistics.

    ``rolling_sd`` and the band fields stay ``None`` until the 20-day window
    fills. Charts that expect the older dashboard output plotted a rolling SD
    of 0 for those days; treat ``None`` as 0 when reproducing them.
    """

    date: datetime
    close: float
    change_percent: float
    rolling_sd: Optional[float] = None
    sma20: Optional[float] = None
    upper_band: Optional[float] = None
    lower_band: Optional[float] = None

    @property
    def has_bands(self) -> bool:
        return self.sma20 is not None
