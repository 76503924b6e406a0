from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Set

from pygame.math import Vector2

from ..core.node import ConnectionPair, Node
from ..utils.geometry import segments_intersect
from . import steering


@dataclass(frozen=True, slots=True)
class UntanglePair:
    mover: Node
    target: Node


def connect(node: Node, other: Optional[Node]) -> None:
    # Repeated calls add repeated edges; a node never links to itself.
    if other is None or other is node:
        return
    node.connections.append(other)
    other.connections.append(node)


def remove_connection(node: Node, other: Optional[Node]) -> None:
    if other is None:
        return
    for index, connection in enumerate(node.connections):
        if connection is other:
            del node.connections[index]
            return


def disconnect(node: Node, other: Optional[Node]) -> None:
    if other is None or other is node:
        return
    remove_connection(other, node)
    remove_connection(node, other)


def crowd(node: Node) -> Vector2:
    return steering.group_behavior(node, node.connections, steering.stalk)


def separate(node: Node, nodes: Sequence[Node]) -> Vector2:
    """Blend rejection from strangers and from neighbours by population share.

    Neighbours only push back inside the near edge of the stalk band, so
    strangers dominate the separation.
    """
    connected_ids = {id(connection) for connection in node.connections}
    strangers = [other for other in nodes if id(other) not in connected_ids]
    total = len(strangers) + len(node.connections)
    if total == 0:
        return Vector2()
    stranger_vector = steering.group_behavior(node, strangers, steering.reject)
    neighbour_vector = steering.group_behavior(
        node, node.connections, steering.reject, node.stalk_distance.min_distance
    )
    stranger_vector *= len(strangers) / total
    neighbour_vector *= len(node.connections) / total
    return stranger_vector + neighbour_vector


def connection_pairs(nodes: Sequence[Node]) -> List[ConnectionPair]:
    pairs: List[ConnectionPair] = []
    visited: Set[int] = set()
    for node in nodes:
        for connection in node.connections:
            if id(connection) not in visited:
                pairs.append(ConnectionPair(node, connection))
        visited.add(id(node))
    return pairs


def find_untangle_pair(pairs: Sequence[ConnectionPair]) -> Optional[UntanglePair]:
    """Return the mover/target of the first crossing, or None.

    Of two crossing pairs the one holding the newest node is disturbed; its
    newer endpoint moves toward the older one.
    """
    for i in range(len(pairs) - 1):
        first = pairs[i]
        p1 = first.first.position
        p2 = first.second.position
        for j in range(i + 1, len(pairs)):
            second = pairs[j]
            if first.shares_endpoint(second):
                continue
            if not segments_intersect(p1, p2, second.first.position, second.second.position):
                continue
            chosen = first if first.newest_id > second.newest_id else second
            a, b = chosen.first, chosen.second
            if a.id > b.id:
                return UntanglePair(mover=a, target=b)
            return UntanglePair(mover=b, target=a)
    return None


def gather_movers(mover: Node, target: Node) -> List[Node]:
    """Mover plus everything reachable from it without passing through target."""
    movers = [mover]
    seen = {id(mover), id(target)}
    stack = [mover]
    while stack:
        current = stack.pop()
        for connection in current.connections:
            if id(connection) in seen:
                continue
            seen.add(id(connection))
            movers.append(connection)
            stack.append(connection)
    return movers
