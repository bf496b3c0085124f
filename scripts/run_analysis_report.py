from __future__ import annotations

import argparse
import json
from pathlib import Path

from volzone.config import load_config
from volzone.monitoring import AuditLog, LogNotifier, Monitor
from volzone.reporting import build_report, write_report
from volzone.runtime import AnalysisController, AnalysisSettings, create_run_context
from volzone.series import parse_dividends, parse_price_history, trailing_dividend_yield, trim_to_lookback
from volzone.simulator import parse_zones


def main() -> None:
    parser = argparse.ArgumentParser(description="Build a volatility/DCA report from a price history snapshot.")
    parser.add_argument("--config", required=True)
    parser.add_argument("--input", required=True, help="JSON with symbol, currentPrice, history, dividends")
    parser.add_argument("--output", required=True)
    parser.add_argument("--zones", help="Comma-separated zones overriding the config, e.g. --zones=-2,-1")
    parser.add_argument("--lookback", help="1y, 2y, 3y, 5y or 10y; overrides the config")
    args = parser.parse_args()

    config_path = Path(args.config)
    config = load_config(config_path)
    context = create_run_context(config_path, config.run_id_prefix)

    snapshot = json.loads(Path(args.input).read_text(encoding="utf-8"))
    symbol = str(snapshot.get("symbol", "UNKNOWN"))
    lookback = args.lookback or config.lookback
    prices = trim_to_lookback(parse_price_history(snapshot.get("history", [])), lookback)
    dividends = parse_dividends(snapshot.get("dividends") or [])
    current_price = snapshot.get("currentPrice")
    if current_price is not None:
        current_price = float(current_price)

    zones = parse_zones(args.zones.split(",") if args.zones else config.simulation.selected_zones)

    audit = AuditLog(config.monitoring.audit_log_path, run_id=context.run_id, config_hash=context.config_hash)
    monitor = Monitor(LogNotifier(prefix=config.monitoring.notifier_prefix))
    controller = AnalysisController(
        AnalysisSettings.from_config(config),
        symbol=symbol,
        audit_log=audit,
        monitor=monitor,
    )

    audit.log("run_start", {"symbol": symbol, "config_path": str(config_path), "lookback": lookback})
    result = controller.refresh(prices, dividends, zones, current_price)

    dividend_yield = None
    if prices and current_price is not None:
        as_of = max(sample.date for sample in prices)
        dividend_yield = trailing_dividend_yield(dividends, current_price, as_of)

    report = build_report(
        symbol,
        result,
        zones,
        limit=config.chart.downsample_limit,
        current_price=current_price,
        dividend_yield=dividend_yield,
        context=context,
        lookback=lookback,
    )
    output_path = write_report(args.output, report)
    audit.log("report_written", {"path": str(output_path)})
    print(f"Wrote {output_path}")


if __name__ == "__main__":
    main()
