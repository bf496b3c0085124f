import statistics
from datetime import datetime, timedelta

import pytest

from volzone.series import PriceSample, compute_derived_days


def _prices(closes, start=datetime(2024, 1, 2)):
    return [PriceSample(date=start + timedelta(days=index), close=close) for index, close in enumerate(closes)]


def _changes(closes):
    return [(closes[i] - closes[i - 1]) / closes[i - 1] * 100 for i in range(1, len(closes))]


CLOSES = [100.0 + index * 0.5 + (index % 3) * 1.25 - (index % 4) * 0.75 for index in range(25)]


def test_change_percent_placeholder_and_values():
    days = compute_derived_days(_prices([100.0, 101.0, 99.0, 102.0]))

    assert days[0].change_percent == 0.0
    assert days[1].change_percent == pytest.approx(1.0)
    assert days[2].change_percent == pytest.approx(-1.9801980198)
    assert days[3].change_percent == pytest.approx(3.0303030303)


def test_rolling_fields_unset_before_full_window():
    days = compute_derived_days(_prices(CLOSES))

    for day in days[:19]:
        assert day.rolling_sd is None
        assert day.sma20 is None
        assert day.upper_band is None
        assert day.lower_band is None
        assert not day.has_bands
    for day in days[19:]:
        assert day.rolling_sd is not None
        assert day.sma20 is not None


def test_bands_match_population_stats_of_window():
    days = compute_derived_days(_prices(CLOSES))

    for index in (19, 24):
        window = CLOSES[index - 19 : index + 1]
        mean = statistics.fmean(window)
        sd = statistics.pstdev(window)
        assert days[index].sma20 == pytest.approx(mean)
        assert days[index].upper_band == pytest.approx(mean + 2 * sd)
        assert days[index].lower_band == pytest.approx(mean - 2 * sd)
        # 19 transitions inside the window; the window's first close has no predecessor in it.
        assert days[index].rolling_sd == pytest.approx(statistics.pstdev(_changes(window)))


def test_unsorted_input_is_aligned_first():
    prices = _prices(CLOSES)
    assert compute_derived_days(list(reversed(prices))) == compute_derived_days(prices)


def test_custom_window_and_band_width():
    days = compute_derived_days(_prices(CLOSES), window=5, band_stddevs=1.0)
    window = CLOSES[0:5]

    assert days[3].sma20 is None
    assert days[4].sma20 == pytest.approx(statistics.fmean(window))
    assert days[4].upper_band == pytest.approx(statistics.fmean(window) + statistics.pstdev(window))


def test_empty_and_short_series():
    assert compute_derived_days([]) == []
    single = compute_derived_days(_prices([42.0]))
    assert len(single) == 1
    assert single[0].change_percent == 0.0
    assert single[0].sma20 is None


def test_window_below_two_is_rejected():
    with pytest.raises(ValueError):
        compute_derived_days(_prices(CLOSES), window=1)
