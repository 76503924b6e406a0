from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pygame.math import Vector2

from ..core.node import Node
from .network import connect

if TYPE_CHECKING:
    from ..core.controller import NetworkController

logger = logging.getLogger(__name__)


def spawn_due(controller: NetworkController, now_ms: float) -> bool:
    network = controller._config.network
    if len(controller._nodes) >= network.max_nodes:
        return False
    return now_ms - controller._last_spawn_ms >= network.spawn_interval_ms


def random_position(controller: NetworkController) -> Vector2:
    config = controller._config
    margin = config.network.spawn_area_margin
    rng = controller._rng
    return Vector2(
        rng.next_range(config.width * margin, config.width * (1.0 - margin)),
        rng.next_range(config.height * margin, config.height * (1.0 - margin)),
    )


def jittered_position(controller: NetworkController, origin: Vector2) -> Vector2:
    jitter = controller._config.network.spawn_jitter
    rng = controller._rng
    return Vector2(
        origin.x + rng.next_range(-jitter, jitter),
        origin.y + rng.next_range(-jitter, jitter),
    )


def spawn_node(controller: NetworkController) -> Node:
    nodes = controller._nodes
    config = controller._config
    parent = None
    if not nodes or controller._rng.next_float() < config.network.detached_spawn_chance:
        position = random_position(controller)
    else:
        parent = controller._rng.sample_choice(nodes)
        position = jittered_position(controller, parent.position)
    node = Node.create(controller._ids.next_id(), position, config.steering)
    connect(node, parent)
    nodes.append(node)
    if parent is None:
        logger.debug("Spawned detached node %d at (%.1f, %.1f)", node.id, position.x, position.y)
    else:
        logger.debug("Spawned node %d attached to node %d", node.id, parent.id)
    return node
