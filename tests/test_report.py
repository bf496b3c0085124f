import json
from datetime import datetime, timedelta

from volzone.reporting import build_report, equity_chart_points, price_chart_points, write_report
from volzone.runtime import run_analysis
from volzone.series import DividendEvent, PriceSample
from volzone.simulator import parse_zones


def _prices(closes, start=datetime(2024, 1, 2)):
    return [PriceSample(date=start + timedelta(days=index), close=close) for index, close in enumerate(closes)]


CLOSES = [100.0 + ((i * 7) % 13) * 0.8 - ((i * 5) % 9) * 0.6 for i in range(40)]


def test_price_chart_marks_buy_days():
    prices = _prices(CLOSES)
    result = run_analysis(prices, [], ["-2", "-1"])

    points = price_chart_points(result.days, result.simulation, limit=500)

    assert len(points) == len(CLOSES)
    assert result.simulation.total_buys > 0
    for point, day in zip(points, result.days):
        if day.date in result.simulation.buy_dates:
            assert point["buy_price"] == day.close
        else:
            assert point["buy_price"] is None


def test_chart_series_are_downsampled():
    result = run_analysis(_prices(CLOSES), [], ["-2", "-1"])

    assert len(price_chart_points(result.days, None, limit=10)) == 10
    assert len(equity_chart_points(result.simulation, limit=7)) <= 7


def test_report_is_json_serialisable(tmp_path):
    prices = _prices(CLOSES)
    dividends = [DividendEvent(date=prices[25].date, amount=0.4)]
    zones = parse_zones(["-2", "-1"])
    result = run_analysis(prices, dividends, zones, current_price=104.0)

    report = build_report("TEST", result, zones, limit=500, current_price=104.0, lookback="1y")
    path = write_report(tmp_path / "reports" / "latest.json", report)
    loaded = json.loads(path.read_text(encoding="utf-8"))

    assert loaded["symbol"] == "TEST"
    assert loaded["selected_zones"] == ["-1", "-2"]
    assert loaded["distribution"]["total_days"] == len(CLOSES) - 1
    assert sum(item["count"] for item in loaded["distribution"]["bins"]) == len(CLOSES) - 1
    assert len(loaded["distribution"]["markers"]) == 5
    assert loaded["simulation"]["total_buys"] == result.simulation.total_buys
    assert loaded["run"] is None
