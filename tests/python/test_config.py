from __future__ import annotations

from pathlib import Path

import pytest

from nodenet.sim.core.config import SimulationConfig, load_config

ROOT = Path(__file__).resolve().parents[2]


def test_defaults_match_reference_network():
    config = SimulationConfig()
    assert (config.width, config.height) == (1200.0, 800.0)
    assert config.network.max_nodes == 90
    assert config.network.spawn_interval_ms == 500.0
    assert config.network.detached_spawn_chance == 0.1
    assert config.steering.max_speed == 3.0
    assert config.steering.max_force == 0.1
    assert config.steering.stalk_distance == (40.0, 100.0)


def test_load_config_builds_nested_sections():
    config = load_config(
        {
            "seed": 9,
            "width": 640,
            "steering": {"max_speed": 4.5, "stalk_distance": [10, 20]},
            "network": {"max_nodes": 12},
            "render": {"line_color": [1, 2, 3], "show_fps": False},
        }
    )
    assert config.seed == 9
    assert config.width == 640
    assert config.steering.max_speed == 4.5
    assert config.steering.stalk_distance == (10.0, 20.0)
    assert config.steering.reject_distance == 60.0
    assert config.network.max_nodes == 12
    assert config.render.line_color == (1, 2, 3)
    assert config.render.show_fps is False


def test_unknown_keys_are_rejected():
    with pytest.raises(TypeError):
        load_config({"network": {"max_nodez": 3}})


def test_from_yaml_reads_file(tmp_path):
    path = tmp_path / "net.yaml"
    path.write_text("seed: 77\nnetwork:\n  spawn_interval_ms: 250\n")
    config = SimulationConfig.from_yaml(path)
    assert config.seed == 77
    assert config.network.spawn_interval_ms == 250


def test_from_yaml_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert SimulationConfig.from_yaml(path) == SimulationConfig()


def test_from_yaml_requires_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        SimulationConfig.from_yaml(path)


def test_shipped_default_config_loads():
    config = SimulationConfig.from_yaml(ROOT / "config" / "default.yaml")
    config.validate()
    defaults = SimulationConfig()
    assert config.steering == defaults.steering
    assert config.network == defaults.network
    assert config.render == defaults.render
    assert config.time_step == pytest.approx(defaults.time_step)
