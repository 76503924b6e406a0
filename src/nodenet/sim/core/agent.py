from __future__ import annotations

from dataclasses import dataclass, field

from pygame.math import Vector2

from .config import SteeringConfig


@dataclass(frozen=True, slots=True)
class StalkRange:
    min_distance: float = 40.0
    max_distance: float = 100.0


@dataclass(slots=True, eq=False)
class SteeringAgent:
    position: Vector2
    velocity: Vector2 = field(default_factory=Vector2)
    acceleration: Vector2 = field(default_factory=Vector2)
    max_speed: float = 3.0
    max_force: float = 0.1
    deceleration_rate: float = 0.1
    arrive_distance: float = 100.0
    reject_distance: float = 60.0
    stalk_distance: StalkRange = field(default_factory=StalkRange)

    def apply_steering_config(self, steering: SteeringConfig) -> None:
        self.max_speed = steering.max_speed
        self.max_force = steering.max_force
        self.deceleration_rate = steering.deceleration_rate
        self.arrive_distance = steering.arrive_distance
        self.reject_distance = steering.reject_distance
        self.stalk_distance = StalkRange(*steering.stalk_distance)
