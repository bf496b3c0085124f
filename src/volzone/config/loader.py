"""Load and freeze configuration files."""

from __future__ import annotations

import hashlib
import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

import yaml

from volzone.config.models import (
    AnalysisConfig,
    ChartConfig,
    MonitoringConfig,
    RollingConfig,
    SimulationConfig,
)
from volzone.series.lookback import parse_lookback
from volzone.simulator.zones import parse_zones


def load_config(path: str | Path) -> AnalysisConfig:
    path = Path(path)
    data = _load_yaml(path)

    name = _require(data, "name")
    version = str(_require(data, "version"))
    run_id_prefix = data.get("run_id_prefix", name)

    return AnalysisConfig(
        name=name,
        version=version,
        run_id_prefix=run_id_prefix,
        lookback=parse_lookback(data.get("lookback", "1y")),
        rolling=_parse_rolling(data.get("rolling", {})),
        simulation=_parse_simulation(data.get("simulation", {})),
        chart=_parse_chart(data.get("chart", {})),
        monitoring=_parse_monitoring(data.get("monitoring", {})),
    )


def compute_config_hash(path: str | Path) -> str:
    path = Path(path)
    content = path.read_bytes()
    return hashlib.sha256(content).hexdigest()


def freeze_config(path: str | Path, lock_path: Optional[str | Path] = None) -> Path:
    path = Path(path)
    config_hash = compute_config_hash(path)
    if lock_path is None:
        lock_path = path.with_suffix(path.suffix + ".lock.json")
    lock_path = Path(lock_path)

    payload = {
        "config_path": str(path),
        "config_hash": config_hash,
        "frozen_at_utc": datetime.now(timezone.utc).isoformat(),
    }
    lock_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return lock_path


def verify_config_lock(path: str | Path, lock_path: Optional[str | Path] = None) -> bool:
    path = Path(path)
    if lock_path is None:
        lock_path = path.with_suffix(path.suffix + ".lock.json")
    lock_path = Path(lock_path)
    if not lock_path.exists():
        return False
    payload = json.loads(lock_path.read_text(encoding="utf-8"))
    return payload.get("config_hash") == compute_config_hash(path)


def _load_yaml(path: Path) -> dict[str, Any]:
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Config must be a mapping")
    return data


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ValueError(f"Missing required config key: {key}")
    return data[key]


def _parse_rolling(data: dict[str, Any]) -> RollingConfig:
    window = int(data.get("window", 20))
    if window < 2:
        raise ValueError(f"Invalid rolling.window: {window}")
    return RollingConfig(
        window=window,
        band_stddevs=float(data.get("band_stddevs", 2.0)),
    )


def _parse_simulation(data: dict[str, Any]) -> SimulationConfig:
    buy_amount = float(data.get("buy_amount", 100.0))
    if buy_amount <= 0:
        raise ValueError(f"Invalid simulation.buy_amount: {buy_amount}")
    zones = parse_zones(data.get("selected_zones", ["-2", "-1"]))
    return SimulationConfig(
        buy_amount=buy_amount,
        selected_zones=sorted(zone.value for zone in zones),
    )


def _parse_chart(data: dict[str, Any]) -> ChartConfig:
    limit = int(data.get("downsample_limit", 500))
    if limit < 1:
        raise ValueError(f"Invalid chart.downsample_limit: {limit}")
    return ChartConfig(downsample_limit=limit)


def _parse_monitoring(data: dict[str, Any]) -> MonitoringConfig:
    return MonitoringConfig(
        audit_log_path=str(data.get("audit_log_path", "runtime/audit.log")),
        notifier_prefix=str(data.get("notifier_prefix", "[VOLZONE]")),
    )


def serialize_config(config: AnalysisConfig) -> dict[str, Any]:
    return asdict(config)
