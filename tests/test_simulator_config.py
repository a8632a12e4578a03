# tests/test_simulator_config.py
from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from tetris_queue.apps.simulator.entrypoint import config_from_args, parse_args
from tetris_queue.core.config.io import load_simulator_config, merge_overrides, to_plain_dict
from tetris_queue.core.config.root import SimulatorConfig
from tetris_queue.core.game.factory import make_queue_bundle_from_cfg

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_defaults_match_reference_queue() -> None:
    cfg = SimulatorConfig()
    assert cfg.queue.capacity == 5
    assert cfg.queue.initial_fill == 5
    assert cfg.game.piece_kinds == ("I", "O", "T", "L")
    assert cfg.game.piece_rule == "uniform"
    assert cfg.game.seed is None


def test_shipped_config_loads() -> None:
    cfg = load_simulator_config(REPO_ROOT / "configs" / "simulator.yaml")
    assert cfg == SimulatorConfig()


def test_yaml_and_overrides(tmp_path: Path) -> None:
    path = tmp_path / "sim.yaml"
    path.write_text(
        "pause: false\n"
        "game:\n"
        "  seed: 11\n"
        "  piece_rule: BAG\n"
        "queue:\n"
        "  capacity: 4\n",
        encoding="utf-8",
    )
    cfg = load_simulator_config(path, overrides=["queue.capacity=3", "game.piece_kinds=[S,Z]"])
    assert cfg.pause is False
    assert cfg.game.seed == 11
    assert cfg.game.piece_rule == "bag"
    assert cfg.game.piece_kinds == ("S", "Z")
    assert cfg.queue.capacity == 3


def test_unknown_keys_are_rejected() -> None:
    with pytest.raises(ValidationError):
        SimulatorConfig.model_validate({"queue": {"capacity": 5, "size": 2}})


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(ValidationError):
        SimulatorConfig.model_validate({"queue": {"capacity": 0}})
    with pytest.raises(ValidationError):
        SimulatorConfig.model_validate({"game": {"piece_rule": "bag7"}})
    with pytest.raises(ValidationError):
        SimulatorConfig.model_validate({"game": {"piece_kinds": []}})
    with pytest.raises(ValidationError):
        SimulatorConfig.model_validate({"log_level": "chatty"})


def test_initial_fill_above_capacity_is_accepted() -> None:
    cfg = SimulatorConfig.model_validate({"queue": {"capacity": 5, "initial_fill": 10}})
    bundle = make_queue_bundle_from_cfg(cfg)
    assert bundle.queue.initialize_full(bundle.factory, cfg.queue.initial_fill) == 5
    assert bundle.queue.occupancy() == (5, 5)


def test_merge_overrides_requires_key_value() -> None:
    with pytest.raises(ValueError, match="key=value"):
        merge_overrides({}, ["queue.capacity"])


def test_cli_flags_win_over_dotlist() -> None:
    args = parse_args(["--seed", "9", "--capacity", "2", "--no-pause", "queue.capacity=7", "view=table"])
    cfg = config_from_args(args)
    assert cfg.game.seed == 9
    assert cfg.queue.capacity == 2
    assert cfg.pause is False
    assert cfg.view == "table"


def test_bundle_from_mapping_uses_configured_seed() -> None:
    bundle = make_queue_bundle_from_cfg({"game": {"seed": 5}, "queue": {"capacity": 3}})
    assert bundle.seed == 5
    assert bundle.queue.occupancy() == (0, 3)
    assert bundle.factory.next_id == 0
    assert to_plain_dict(SimulatorConfig())["queue"] == {"capacity": 5, "initial_fill": 5}


@pytest.mark.parametrize(
    "data",
    [
        {"queue": {"capacity": "five"}},
        {"queue": {"initial_fill": [3]}},
        {"game": {"seed": "x"}},
        {"game": {"piece_kinds": [1, 2]}},
        {"game": {"piece_kinds": {"I": 1}}},
    ],
)
def test_malformed_values_raise_validation_error(data: dict) -> None:
    with pytest.raises(ValidationError):
        SimulatorConfig.model_validate(data)


def test_malformed_override_raises_validation_error() -> None:
    with pytest.raises(ValidationError, match="int-like"):
        load_simulator_config(None, overrides=["queue.capacity=abc"])
