from pathlib import Path

import pytest

yaml = pytest.importorskip("yaml")

from volzone.config import freeze_config, load_config, serialize_config, verify_config_lock
from volzone.runtime import AnalysisSettings, create_run_context

CONFIG_PATH = Path(__file__).resolve().parent.parent / "configs" / "volzone_v1.yaml"


def test_load_config_sample():
    config = load_config(CONFIG_PATH)
    assert config.rolling.window == 20
    assert config.simulation.buy_amount == 100.0
    assert sorted(config.simulation.selected_zones) == ["-1", "-2"]
    assert config.chart.downsample_limit == 500
    assert config.lookback == "1y"

    settings = AnalysisSettings.from_config(config)
    assert settings == AnalysisSettings()


def test_freeze_and_verify(tmp_path):
    target = tmp_path / "volzone_v1.yaml"
    target.write_text(CONFIG_PATH.read_text(encoding="utf-8"), encoding="utf-8")

    lock_path = freeze_config(target)
    assert verify_config_lock(target, lock_path)

    target.write_text(target.read_text(encoding="utf-8") + "\n# edited\n", encoding="utf-8")
    assert not verify_config_lock(target, lock_path)


def test_run_context_id_carries_hash(tmp_path):
    target = tmp_path / "volzone_v1.yaml"
    target.write_text(CONFIG_PATH.read_text(encoding="utf-8"), encoding="utf-8")

    context = create_run_context(target, "volzone-v1")

    assert context.run_id.startswith("volzone-v1-")
    assert context.run_id.endswith(context.config_hash[:8])


@pytest.mark.parametrize(
    "body, message",
    [
        ("version: 1\n", "Missing required config key: name"),
        ("name: x\nversion: 1\nsimulation:\n  selected_zones: ['-3']\n", "Invalid zone"),
        ("name: x\nversion: 1\nlookback: 4y\n", "Invalid lookback"),
        ("name: x\nversion: 1\nrolling:\n  window: 1\n", "Invalid rolling.window"),
        ("- just\n- a list\n", "Config must be a mapping"),
    ],
)
def test_invalid_configs_raise(tmp_path, body, message):
    path = tmp_path / "bad.yaml"
    path.write_text(body, encoding="utf-8")
    with pytest.raises(ValueError, match=message):
        load_config(path)


def test_serialize_config_defaults(tmp_path):
    path = tmp_path / "minimal.yaml"
    path.write_text("name: minimal\nversion: 2\n", encoding="utf-8")

    payload = serialize_config(load_config(path))

    assert payload["run_id_prefix"] == "minimal"
    assert payload["version"] == "2"
    assert payload["rolling"] == {"window": 20, "band_stddevs": 2.0}
    assert payload["simulation"]["selected_zones"] == ["-1", "-2"]
