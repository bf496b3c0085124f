from datetime import datetime, timedelta
from pathlib import Path

from volzone.config import freeze_config, load_config, verify_config_lock
from volzone.monitoring import AuditLog, LogNotifier, Monitor
from volzone.runtime import AnalysisController, AnalysisSettings, create_run_context
from volzone.series import PriceSample


config_path = Path("configs") / "volzone_v1.yaml"
config = load_config(config_path)
lock_path = freeze_config(config_path)
assert verify_config_lock(config_path, lock_path)

context = create_run_context(config_path, config.run_id_prefix)

monitor = Monitor(LogNotifier(prefix=config.monitoring.notifier_prefix))
audit = AuditLog(
    Path(config.monitoring.audit_log_path),
    run_id=context.run_id,
    config_hash=context.config_hash,
)
audit.log("run_start", {"config": str(config_path), "lock": str(lock_path)})

controller = AnalysisController(
    AnalysisSettings.from_config(config),
    symbol="DEMO",
    audit_log=audit,
    monitor=monitor,
)

start = datetime(2024, 6, 3)
prices = [PriceSample(start + timedelta(days=i), 100.0 + (i % 7) - (i % 3) * 1.5) for i in range(60)]

result = controller.refresh(prices, [], config.simulation.selected_zones)
print("Run ready:", context.run_id, "buys:", result.simulation.total_buys)

# Toggling a zone replays only the simulator.
result = controller.refresh(prices, [], config.simulation.selected_zones + ["2"])
print("Series passes:", controller.series_computations, "simulations:", controller.simulation_computations)
