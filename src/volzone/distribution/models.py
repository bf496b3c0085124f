"""Return distribution structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DistributionBin:
    tenths: int  # lower edge in tenths of a percentage point
    count: int

    @property
    def bin(self) -> float:
        return self.tenths / 10.0


@dataclass(frozen=True)
class SigmaMarker:
    label: str
    value: float
    tenths: int

    @property
    def bin(self) -> float:
        return self.tenths / 10.0


@dataclass(frozen=True)
class DistributionResult:
    bins: list[DistributionBin] = field(default_factory=list)
    mean: float = 0.0
    sd: float = 0.0
    count_1sigma: int = 0
    count_2sigma: int = 0
    total_days: int = 0

    @property
    def is_available(self) -> bool:
        return self.total_days > 0

    @property
    def pct_within_1sigma(self) -> float:
        return 0.0 if self.total_days == 0 else self.count_1sigma / self.total_days * 100.0

    @property
    def pct_within_2sigma(self) -> float:
        return 0.0 if self.total_days == 0 else self.count_2sigma / self.total_days * 100.0
