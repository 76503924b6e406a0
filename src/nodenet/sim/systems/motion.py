from __future__ import annotations

from pygame.math import Vector2

from ..core.agent import SteeringAgent
from ..utils.math2d import _clamp_length, _set_magnitude


def apply_force(agent: SteeringAgent, force: Vector2) -> None:
    agent.acceleration += force


def steer(agent: SteeringAgent, desired: Vector2) -> None:
    correction = _clamp_length(desired - agent.velocity, agent.max_force)
    apply_force(agent, correction)


def integrate(agent: SteeringAgent) -> None:
    if agent.acceleration.length_squared() > 0.0:
        agent.velocity += agent.acceleration
        agent.velocity.update(_clamp_length(agent.velocity, agent.max_speed))
        agent.acceleration.update(0.0, 0.0)
    else:
        speed = agent.velocity.length() - agent.deceleration_rate
        agent.velocity.update(_set_magnitude(agent.velocity, speed if speed > 0.0 else 0.0))
    agent.position += agent.velocity
