from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass
class SteeringConfig:
    max_speed: float = 3.0
    max_force: float = 0.1
    deceleration_rate: float = 0.1
    arrive_distance: float = 100.0
    reject_distance: float = 60.0
    stalk_distance: tuple[float, float] = (40.0, 100.0)


@dataclass
class NetworkConfig:
    max_nodes: int = 90
    spawn_interval_ms: float = 500.0
    detached_spawn_chance: float = 0.1
    # Per-axis jitter applied around the parent when spawning a connected node.
    spawn_jitter: float = 1.0
    # Detached nodes spawn inside [margin, 1 - margin] of the canvas.
    spawn_area_margin: float = 0.1
    fence_inset: float = 40.0


@dataclass
class RenderConfig:
    background_color: tuple[int, int, int] = (0, 0, 0)
    line_color: tuple[int, int, int] = (69, 223, 227)
    line_width: int = 1
    node_fill_color: tuple[int, int, int] = (18, 58, 59)
    node_outline_color: tuple[int, int, int] = (240, 240, 240)
    node_outline_width: int = 1
    node_radius: float = 10.0
    show_fps: bool = True
    fps_color: tuple[int, int, int] = (255, 255, 255)
    target_fps: int = 60


@dataclass
class SimulationConfig:
    width: float = 1200.0
    height: float = 800.0
    time_step: float = 1.0 / 60.0
    seed: int = 42
    config_version: str = "v1"
    steering: SteeringConfig = field(default_factory=SteeringConfig)
    network: NetworkConfig = field(default_factory=NetworkConfig)
    render: RenderConfig = field(default_factory=RenderConfig)

    @staticmethod
    def from_yaml(path: Path) -> "SimulationConfig":
        data = yaml.safe_load(Path(path).read_text())
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
        return load_config(data)

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas size must be positive, got {self.width}x{self.height}")
        if self.time_step <= 0:
            raise ValueError(f"time_step must be positive, got {self.time_step}")
        if self.network.max_nodes < 0:
            raise ValueError(f"max_nodes must not be negative, got {self.network.max_nodes}")
        if self.network.spawn_interval_ms <= 0:
            raise ValueError(f"spawn_interval_ms must be positive, got {self.network.spawn_interval_ms}")
        low, high = self.steering.stalk_distance
        if low > high:
            raise ValueError(f"stalk_distance min {low} exceeds max {high}")


def load_config(raw: dict) -> SimulationConfig:
    def _pair(value: tuple[float, float] | list[float] | None, default: tuple[float, float]) -> tuple[float, float]:
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return (float(value[0]), float(value[1]))
        return default

    def _color(value: object) -> object:
        if isinstance(value, list):
            return tuple(int(channel) for channel in value)
        return value

    steering_raw = dict(raw.get("steering", {}))
    steering = SteeringConfig(
        stalk_distance=_pair(steering_raw.pop("stalk_distance", None), SteeringConfig().stalk_distance),
        **steering_raw,
    )
    network = NetworkConfig(**raw.get("network", {}))
    render = RenderConfig(**{k: _color(v) for k, v in raw.get("render", {}).items()})
    sim_values = {k: v for k, v in raw.items() if k not in {"steering", "network", "render"}}
    return SimulationConfig(steering=steering, network=network, render=render, **sim_values)
