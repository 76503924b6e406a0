from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from pygame.math import Vector2

from .agent import SteeringAgent
from .config import SteeringConfig


@dataclass(slots=True, eq=False, kw_only=True)
class Node(SteeringAgent):
    id: int
    # Undirected adjacency; every entry is mirrored on the other node.
    connections: List["Node"] = field(default_factory=list, repr=False)

    @classmethod
    def create(cls, node_id: int, position: Vector2, steering: SteeringConfig | None = None) -> "Node":
        node = cls(position=Vector2(position), id=node_id)
        if steering is not None:
            node.apply_steering_config(steering)
        return node


@dataclass(frozen=True, slots=True)
class ConnectionPair:
    first: Node
    second: Node

    def __iter__(self):
        yield self.first
        yield self.second

    def shares_endpoint(self, other: "ConnectionPair") -> bool:
        return (
            self.first is other.first
            or self.first is other.second
            or self.second is other.first
            or self.second is other.second
        )

    @property
    def ids(self) -> tuple[int, int]:
        return self.first.id, self.second.id

    @property
    def newest_id(self) -> int:
        return max(self.first.id, self.second.id)
