"""Monitoring and alert routing."""

from __future__ import annotations

from dataclasses import dataclass

from volzone.monitoring.notifier import Notifier


@dataclass
class Monitor:
    notifier: Notifier

    def insufficient_data(self, symbol: str, samples: int) -> None:
        self.notifier.notify("INSUFFICIENT_DATA", f"{symbol}: {samples} samples, no distribution available")

    def flat_distribution(self, symbol: str) -> None:
        self.notifier.notify("FLAT_DISTRIBUTION", f"{symbol}: daily changes have zero deviation")

    def stale_result(self, generation: int, latest: int) -> None:
        self.notifier.notify("STALE_RESULT", f"dropped generation {generation}, latest is {latest}")
