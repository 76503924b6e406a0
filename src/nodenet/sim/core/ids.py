from __future__ import annotations


class NodeIdGenerator:
    """Issues strictly increasing node ids, starting at ``start``."""

    def __init__(self, start: int = 1):
        self._start = start
        self._next_id = start

    def next_id(self) -> int:
        node_id = self._next_id
        self._next_id += 1
        return node_id

    def reset(self) -> None:
        self._next_id = self._start
