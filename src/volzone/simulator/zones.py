"""Volatility zone classification."""

from __future__ import annotations

from typing import Iterable, Union

from volzone.simulator.models import Zone

DEFAULT_ZONES = frozenset({Zone.MINUS_TWO, Zone.MINUS_ONE})


def classify_zone(change_percent: float, mean: float, sd: float) -> Zone:
    """Bucket a daily change by its deviation from the mean.

    Negative zones are tested first and with ``<=``, positive zones after
    with ``>=``; a deviation sitting exactly on a boundary goes to the more
    extreme zone. A zero deviation is always neutral, which keeps a flat
    series (``sd == 0``) out of the ``-2`` zone.
    """
    diff = change_percent - mean
    if diff == 0:
        return Zone.NEUTRAL
    if diff <= -2 * sd:
        return Zone.MINUS_TWO
    if diff <= -1 * sd:
        return Zone.MINUS_ONE
    if diff >= 2 * sd:
        return Zone.PLUS_TWO
    if diff >= 1 * sd:
        return Zone.PLUS_ONE
    return Zone.NEUTRAL


def parse_zones(values: Iterable[Union[str, int, Zone]]) -> frozenset[Zone]:
    zones = set()
    for value in values:
        if isinstance(value, Zone):
            zones.add(value)
            continue
        try:
            zones.add(Zone(str(value).strip()))
        except ValueError as exc:
            options = ", ".join(zone.value for zone in Zone)
            raise ValueError(f"Invalid zone: {value!r} (expected one of {options})") from exc
    return frozenset(zones)
