from __future__ import annotations

from typing import Sequence

from ..core.node import Node
from ..types.metrics import TickMetrics
from .network import UntanglePair


def average_speed(nodes: Sequence[Node]) -> float:
    if not nodes:
        return 0.0
    return sum(node.velocity.length() for node in nodes) / len(nodes)


def create_metrics(
    tick: int,
    nodes: Sequence[Node],
    connections: int,
    spawned: bool,
    untangle: UntanglePair | None,
    movers: int,
    duration_ms: float,
) -> TickMetrics:
    return TickMetrics(
        tick=tick,
        nodes=len(nodes),
        connections=connections,
        spawned=spawned,
        untangling=untangle is not None,
        mover_id=None if untangle is None else untangle.mover.id,
        target_id=None if untangle is None else untangle.target.id,
        movers=movers,
        average_speed=average_speed(nodes),
        tick_duration_ms=duration_ms,
    )
