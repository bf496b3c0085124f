import random
from datetime import date, datetime, timedelta, timezone

import pytest

from volzone.series import (
    PriceSample,
    align_series,
    date_key,
    parse_dividends,
    parse_price_history,
    parse_timestamp,
    trailing_dividend_yield,
    trim_to_lookback,
)


def _prices(closes, start=datetime(2024, 1, 2)):
    return [PriceSample(date=start + timedelta(days=index), close=close) for index, close in enumerate(closes)]


def test_align_sorted_series_is_unchanged():
    prices = _prices([100.0, 101.0, 99.0, 102.0])
    assert align_series(prices) == prices


def test_align_any_permutation_gives_same_order():
    prices = _prices([float(100 + i) for i in range(30)])
    rng = random.Random(11)
    for _ in range(5):
        shuffled = list(prices)
        rng.shuffle(shuffled)
        assert align_series(shuffled) == prices


def test_align_keeps_duplicate_dates_in_input_order():
    day = datetime(2024, 1, 2)
    first = PriceSample(date=day, close=10.0)
    second = PriceSample(date=day, close=11.0)
    earlier = PriceSample(date=day - timedelta(days=1), close=9.0)

    aligned = align_series([first, second, earlier])

    assert aligned == [earlier, first, second]


def test_parse_timestamp_variants():
    aware = parse_timestamp("2024-03-01T14:30:00.000Z")
    assert aware == datetime(2024, 3, 1, 14, 30, tzinfo=timezone.utc)
    assert parse_timestamp("2024-03-01") == datetime(2024, 3, 1, tzinfo=timezone.utc)
    assert parse_timestamp(datetime(2024, 3, 1, 9)) == datetime(2024, 3, 1, 9, tzinfo=timezone.utc)
    assert parse_timestamp(date(2024, 3, 1)) == datetime(2024, 3, 1, tzinfo=timezone.utc)
    assert parse_timestamp(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize("value", ["not-a-date", "", None, [2024, 1, 1]])
def test_parse_timestamp_rejects_garbage(value):
    with pytest.raises(ValueError):
        parse_timestamp(value)


def test_parse_price_history_validates_records():
    samples = parse_price_history([{"date": "2024-01-03T00:00:00Z", "close": "101.5"}])
    assert samples[0].close == 101.5

    with pytest.raises(ValueError, match="Missing required field: close"):
        parse_price_history([{"date": "2024-01-03"}])
    with pytest.raises(ValueError):
        parse_price_history([{"date": "2024-01-03", "close": -1}])
    with pytest.raises(ValueError):
        parse_price_history([{"date": "2024-01-03", "close": float("nan")}])


def test_parse_dividends_rejects_negative_amount():
    events = parse_dividends([{"date": "2024-02-09", "amount": 0.24}])
    assert events[0].amount == pytest.approx(0.24)
    with pytest.raises(ValueError):
        parse_dividends([{"date": "2024-02-09", "amount": -0.1}])


def test_date_key_uses_utc_calendar_day():
    tokyo = timezone(timedelta(hours=9))
    assert date_key(datetime(2024, 1, 3, 0, 30, tzinfo=tokyo)) == "2024-01-02"
    assert date_key(datetime(2024, 1, 3, 23, 59)) == "2024-01-03"


def test_align_mixes_date_only_and_epoch_dates():
    samples = parse_price_history(
        [
            {"date": "2024-01-03", "close": 101.0},
            {"date": 1704205800, "close": 100.0},  # 2024-01-02T14:30:00Z
            {"date": "2024-01-04T14:30:00-05:00", "close": 102.0},
        ]
    )

    aligned = align_series(samples)

    assert [sample.close for sample in aligned] == [100.0, 101.0, 102.0]
    assert [date_key(sample.date) for sample in aligned] == ["2024-01-02", "2024-01-03", "2024-01-04"]


def test_date_only_dividends_against_utc_stamped_prices():
    prices = parse_price_history(
        [
            {"date": "2023-05-01T14:30:00Z", "close": 90.0},
            {"date": "2024-06-03T14:30:00Z", "close": 100.0},
        ]
    )
    dividends = parse_dividends(
        [
            {"date": "2023-03-08", "amount": 0.4},
            {"date": "2024-03-08", "amount": 0.5},
        ]
    )
    as_of = max(sample.date for sample in prices)

    assert trailing_dividend_yield(dividends, 100.0, as_of) == pytest.approx(0.5)
    assert trim_to_lookback(dividends, "1y", end=as_of) == [dividends[1]]
    assert [sample.close for sample in trim_to_lookback(prices, "2y")] == [90.0, 100.0]
