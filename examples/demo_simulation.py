from datetime import datetime, timedelta

from volzone.distribution import build_distribution, sigma_markers
from volzone.series import DividendEvent, PriceSample, compute_derived_days
from volzone.simulator import VolatilityTradingSimulator


start = datetime(2024, 6, 3)
closes = [100, 101, 99, 102, 98, 97, 103, 104, 101, 100, 99, 105, 106, 104, 103, 102, 108, 107, 105, 104, 100, 101]
prices = [PriceSample(date=start + timedelta(days=index), close=float(close)) for index, close in enumerate(closes)]
dividends = [DividendEvent(date=start + timedelta(days=12), amount=0.75)]

days = compute_derived_days(prices)
distribution = build_distribution(prices)
print(f"Mean {distribution.mean:.2f}%  SD ±{distribution.sd:.2f}%  over {distribution.total_days} days")
print(f"Within 1σ: {distribution.count_1sigma} days ({distribution.pct_within_1sigma:.1f}%)")
for marker in sigma_markers(distribution):
    print(f"  {marker.label:>4} at {marker.value:+.3f} -> bin {marker.bin:+.1f}")

last = days[-1]
print(f"Last day: close {last.close} SMA20 {last.sma20:.2f} bands [{last.lower_band:.2f}, {last.upper_band:.2f}]")

simulator = VolatilityTradingSimulator(buy_amount=100.0)
for zones in (["-2", "-1"], ["-2", "-1", "0"], []):
    result = simulator.run_for_distribution(days, dividends, distribution, zones, current_price=102.0)
    print(
        f"Zones {zones or 'none'}: buys={result.total_buys} invested={result.total_invested:.0f} "
        f"value={result.current_value:.2f} return={result.total_return:+.2f}%"
    )
