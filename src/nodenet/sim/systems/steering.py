from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from pygame.math import Vector2

from ..core.agent import SteeringAgent, StalkRange
from ..utils.geometry import point_in_convex_polygon
from ..utils.math2d import _centroid, _clamp_length, _set_magnitude


class Behavior(Protocol):
    def __call__(self, agent: SteeringAgent, target: Vector2, *args) -> Vector2: ...


def seek(agent: SteeringAgent, target: Vector2) -> Vector2:
    return _set_magnitude(target - agent.position, agent.max_speed)


def flee(agent: SteeringAgent, target: Vector2) -> Vector2:
    return _set_magnitude(agent.position - target, agent.max_speed)


def arrive(agent: SteeringAgent, target: Vector2, distance: float | None = None) -> Vector2:
    """Seek that eases off linearly inside ``distance`` of the target."""
    if distance is None:
        distance = agent.arrive_distance
    desired = target - agent.position
    remaining = desired.length()
    if remaining < distance:
        return _set_magnitude(desired, remaining / distance * agent.max_speed)
    return _set_magnitude(desired, agent.max_speed)


def reject(agent: SteeringAgent, target: Vector2, distance: float | None = None) -> Vector2:
    if distance is None:
        distance = agent.reject_distance
    desired = agent.position - target
    if desired.length() >= distance:
        return Vector2()
    return _set_magnitude(desired, agent.max_speed)


def stalk(agent: SteeringAgent, target: Vector2, distance: StalkRange | None = None) -> Vector2:
    """Keep the target within the [min, max] distance band."""
    if distance is None:
        distance = agent.stalk_distance
    desired = target - agent.position
    gap = desired.length()
    if distance.min_distance <= gap <= distance.max_distance:
        return Vector2()
    if gap < distance.min_distance:
        desired = -desired
    return _set_magnitude(desired, agent.max_speed)


def group_behavior(
    agent: SteeringAgent,
    others: Iterable[SteeringAgent],
    behavior: Behavior,
    param: object = None,
) -> Vector2:
    """Average ``behavior`` over every other agent that yields a non-zero vector."""
    sum_x = 0.0
    sum_y = 0.0
    count = 0
    for other in others:
        if other is agent:
            continue
        if param is None:
            vector = behavior(agent, other.position)
        else:
            vector = behavior(agent, other.position, param)
        if vector.length_squared() > 0.0:
            sum_x += vector.x
            sum_y += vector.y
            count += 1
    if count == 0:
        return Vector2()
    inv = 1.0 / count
    return _clamp_length(Vector2(sum_x * inv, sum_y * inv), agent.max_speed)


def contain(agent: SteeringAgent, polygon: Sequence[Vector2]) -> Vector2:
    # Convex polygons only.
    if len(polygon) < 3 or point_in_convex_polygon(agent.position, polygon):
        return Vector2()
    return seek(agent, _centroid(polygon))
