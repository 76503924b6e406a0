from __future__ import annotations

import logging
from dataclasses import dataclass
from time import perf_counter
from typing import Any, Dict, List, Optional, Set

from pygame.math import Vector2

from .config import SimulationConfig
from .ids import NodeIdGenerator
from .node import ConnectionPair, Node
from .rng import DeterministicRng
from ..systems import metrics as metrics_system, motion, network, spawning, steering
from ..systems.network import UntanglePair
from ..types.metrics import TickMetrics
from ..types.snapshot import Snapshot, SnapshotMetadata, SnapshotWorld
from ..utils.math2d import _average_nonzero

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UpdateResult:
    spawned: Optional[Node]
    untangle: Optional[UntanglePair]
    movers: int


class NetworkController:
    def __init__(self, config: SimulationConfig, now_ms: float = 0.0):
        config.validate()
        self._config = config
        self._rng = DeterministicRng(config.seed)
        self._ids = NodeIdGenerator()
        self._nodes: List[Node] = []
        self._pairs: List[ConnectionPair] = []
        self._fence: List[Vector2] = []
        self._last_spawn_ms = 0.0
        self._cap_logged = False
        self._last_target: Optional[tuple[int, int]] = None
        self._metrics: TickMetrics | None = None
        self.setup(now_ms)

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def nodes(self) -> List[Node]:
        return self._nodes

    @property
    def connection_pairs(self) -> List[ConnectionPair]:
        return self._pairs

    @property
    def fence(self) -> List[Vector2]:
        return self._fence

    @property
    def metrics(self) -> TickMetrics | None:
        return self._metrics

    def setup(self, now_ms: float = 0.0) -> None:
        config = self._config
        inset = config.network.fence_inset
        self._fence = [
            Vector2(inset, inset),
            Vector2(config.width - inset, inset),
            Vector2(config.width - inset, config.height - inset),
            Vector2(inset, config.height - inset),
        ]
        self._last_spawn_ms = now_ms
        logger.info(
            "Network ready: canvas %.0fx%.0f, cap %d nodes every %.0f ms",
            config.width,
            config.height,
            config.network.max_nodes,
            config.network.spawn_interval_ms,
        )

    def reset(self, now_ms: float = 0.0) -> None:
        self._nodes.clear()
        self._pairs.clear()
        self._rng.reset()
        self._ids.reset()
        self._cap_logged = False
        self._last_target = None
        self._metrics = None
        self.setup(now_ms)

    def rebuild_connection_pairs(self) -> List[ConnectionPair]:
        self._pairs = network.connection_pairs(self._nodes)
        return self._pairs

    def add_node(self) -> Node:
        node = spawning.spawn_node(self)
        self.rebuild_connection_pairs()
        if len(self._nodes) >= self._config.network.max_nodes and not self._cap_logged:
            self._cap_logged = True
            logger.info("Node cap reached (%d nodes, %d connections)", len(self._nodes), len(self._pairs))
        return node

    def find_untangle_pair(self) -> Optional[UntanglePair]:
        return network.find_untangle_pair(self._pairs)

    def update(self, now_ms: float) -> UpdateResult:
        spawned = None
        if spawning.spawn_due(self, now_ms):
            self._last_spawn_ms = now_ms
            spawned = self.add_node()

        untangle = self.find_untangle_pair()
        movers: Set[int] = set()
        if untangle is not None:
            movers = {id(node) for node in network.gather_movers(untangle.mover, untangle.target)}
            key = (untangle.mover.id, untangle.target.id)
            if key != self._last_target:
                logger.debug(
                    "Untangling node %d toward node %d (%d movers)", key[0], key[1], len(movers)
                )
            self._last_target = key
        else:
            self._last_target = None

        for node in self._nodes:
            vectors = [steering.contain(node, self._fence)]
            if untangle is None or node is not untangle.target:
                if id(node) in movers:
                    vectors.append(steering.seek(node, untangle.target.position))
                else:
                    vectors.append(network.crowd(node))
                    vectors.append(network.separate(node, self._nodes))
            desired = _average_nonzero(vectors)
            if desired is not None:
                motion.steer(node, desired)
        for node in self._nodes:
            motion.integrate(node)

        return UpdateResult(spawned=spawned, untangle=untangle, movers=len(movers))

    def step(self, tick: int) -> TickMetrics:
        start = perf_counter()
        now_ms = (tick + 1) * self._config.time_step * 1000.0
        result = self.update(now_ms)
        duration_ms = (perf_counter() - start) * 1000.0
        self._metrics = metrics_system.create_metrics(
            tick,
            self._nodes,
            len(self._pairs),
            result.spawned is not None,
            result.untangle,
            result.movers,
            duration_ms,
        )
        return self._metrics

    def snapshot(self, tick: int) -> Snapshot:
        config = self._config
        return Snapshot(
            tick=tick,
            metrics=self._metrics,
            nodes=[self._node_snapshot(node) for node in self._nodes],
            edges=[list(pair.ids) for pair in self._pairs],
            world=SnapshotWorld(
                width=config.width,
                height=config.height,
                fence=[[vertex.x, vertex.y] for vertex in self._fence],
            ),
            metadata=SnapshotMetadata(
                sim_dt=config.time_step,
                tick_rate=1.0 / config.time_step,
                seed=config.seed,
                max_nodes=config.network.max_nodes,
                config_version=config.config_version,
            ),
        )

    @staticmethod
    def _node_snapshot(node: Node) -> Dict[str, Any]:
        return {
            "id": node.id,
            "x": node.position.x,
            "y": node.position.y,
            "vx": node.velocity.x,
            "vy": node.velocity.y,
            "speed": node.velocity.length(),
            "connections": [connection.id for connection in node.connections],
        }
