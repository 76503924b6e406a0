from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class TickMetrics:
    tick: int
    nodes: int
    connections: int
    spawned: bool
    untangling: bool
    mover_id: int | None
    target_id: int | None
    movers: int
    average_speed: float
    tick_duration_ms: float = 0.0
