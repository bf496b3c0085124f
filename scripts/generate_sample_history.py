from __future__ import annotations

import argparse
import json
import random
from datetime import datetime, timedelta, timezone
from pathlib import Path


def _trading_days(start: datetime, count: int):
    day = start
    produced = 0
    while produced < count:
        if day.weekday() < 5:
            yield day
            produced += 1
        day += timedelta(days=1)


def main() -> None:
    parser = argparse.ArgumentParser(description="Write a seeded synthetic price/dividend snapshot.")
    parser.add_argument("--output", required=True)
    parser.add_argument("--symbol", default="DEMO")
    parser.add_argument("--days", type=int, default=260)
    parser.add_argument("--seed", type=int, default=7)
    parser.add_argument("--start-price", type=float, default=100.0)
    parser.add_argument("--daily-vol", type=float, default=1.5, help="Daily return SD in percent")
    parser.add_argument("--quarterly-dividend", type=float, default=0.5)
    args = parser.parse_args()

    rng = random.Random(args.seed)
    start = datetime(2024, 1, 2, 14, 30, tzinfo=timezone.utc)
    price = args.start_price
    history = []
    dividends = []
    for index, day in enumerate(_trading_days(start, args.days)):
        if index > 0:
            price = max(0.01, price * (1.0 + rng.gauss(0.03, args.daily_vol) / 100.0))
        history.append({"date": day.isoformat().replace("+00:00", "Z"), "close": round(price, 4)})
        if index > 0 and index % 63 == 0 and args.quarterly_dividend > 0:
            dividends.append({"date": history[-1]["date"], "amount": args.quarterly_dividend})

    payload = {
        "symbol": args.symbol,
        "currentPrice": history[-1]["close"] if history else None,
        "history": history,
        "dividends": dividends,
    }
    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    print(f"Wrote {output_path}")


if __name__ == "__main__":
    main()
