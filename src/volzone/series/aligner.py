"""Parse and chronologically align raw daily history."""

from __future__ import annotations

import math
from datetime import date, datetime, timezone
from typing import Any, Iterable, Mapping

from volzone.series.models import DividendEvent, PriceSample


def parse_timestamp(value: Any) -> datetime:
    """Parse a history date into an aware UTC datetime.

    Naive values are read as UTC and date-only strings as UTC midnight.
    """
    if isinstance(value, datetime):
        return _as_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as exc:
            raise ValueError(f"Invalid timestamp: {value}") from exc
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return _as_utc(datetime.fromisoformat(text))
        except ValueError as exc:
            raise ValueError(f"Invalid date: {value!r}") from exc
    raise ValueError(f"Unsupported date value: {value!r}")


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def date_key(value: datetime) -> str:
    """Calendar day used for exact dividend matching (UTC for aware values)."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.date().isoformat()


def _require(record: Mapping[str, Any], key: str) -> Any:
    if key not in record:
        raise ValueError(f"Missing required field: {key}")
    return record[key]


def parse_price_history(records: Iterable[Mapping[str, Any]]) -> list[PriceSample]:
    samples: list[PriceSample] = []
    for record in records:
        when = parse_timestamp(_require(record, "date"))
        raw = _require(record, "close")
        try:
            close = float(raw)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid close on {when.isoformat()}: {raw!r}") from exc
        if not math.isfinite(close) or close <= 0:
            raise ValueError(f"Close must be positive and finite on {when.isoformat()}: {close}")
        samples.append(PriceSample(date=when, close=close))
    return samples


def parse_dividends(records: Iterable[Mapping[str, Any]]) -> list[DividendEvent]:
    events: list[DividendEvent] = []
    for record in records:
        when = parse_timestamp(_require(record, "date"))
        raw = _require(record, "amount")
        try:
            amount = float(raw)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid dividend on {when.isoformat()}: {raw!r}") from exc
        if not math.isfinite(amount) or amount < 0:
            raise ValueError(f"Dividend must be non-negative on {when.isoformat()}: {amount}")
        events.append(DividendEvent(date=when, amount=amount))
    return events


def align_series(samples: Iterable[PriceSample]) -> list[PriceSample]:
    # sorted() is stable: duplicate dates keep their input order.
    return sorted(samples, key=lambda sample: sample.date)
