"""Stride sampling of dense series for display."""

from __future__ import annotations

import math
from typing import Sequence, TypeVar

T = TypeVar("T")


def downsample(points: Sequence[T], limit: int) -> list[T]:
    """Keep every ``ceil(len/limit)``-th point starting at index 0.

    Lossy: extremes between kept points disappear, so the result must only
    be rendered, never fed back into statistics.
    """
    if limit < 1:
        raise ValueError(f"Downsample limit must be positive, got {limit}")
    if len(points) <= limit:
        return list(points)
    step = math.ceil(len(points) / limit)
    return [point for index, point in enumerate(points) if index % step == 0]
