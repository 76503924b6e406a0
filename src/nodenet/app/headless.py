from __future__ import annotations

import argparse
import csv
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Optional

from ..logging_config import parse_level, setup_logging
from ..sim.core.config import SimulationConfig
from ..sim.core.controller import NetworkController
from ..sim.types.metrics import TickMetrics

logger = logging.getLogger(__name__)

_HEADER = [
    "tick",
    "nodes",
    "connections",
    "spawned",
    "untangling",
    "mover_id",
    "target_id",
    "movers",
    "avg_speed",
    "tick_ms",
]


def _format_row(metrics: TickMetrics, tick_ms: float) -> list[object]:
    return [
        metrics.tick,
        metrics.nodes,
        metrics.connections,
        int(metrics.spawned),
        int(metrics.untangling),
        "" if metrics.mover_id is None else metrics.mover_id,
        "" if metrics.target_id is None else metrics.target_id,
        metrics.movers,
        f"{metrics.average_speed:.4f}",
        f"{tick_ms:.3f}",
    ]


def _write_snapshot(controller: NetworkController, path: Path) -> None:
    metrics = controller.metrics
    snapshot = controller.snapshot(metrics.tick if metrics is not None else 0)
    path.write_text(json.dumps(asdict(snapshot), indent=2))
    logger.info("Wrote final network snapshot to %s", path)


def run_headless(
    steps: int,
    seed: Optional[int],
    log_path: Optional[Path],
    deterministic_log: bool = False,
    config_path: Optional[Path] = None,
    snapshot_path: Optional[Path] = None,
) -> NetworkController:
    config = SimulationConfig.from_yaml(config_path) if config_path else SimulationConfig()
    if seed is not None:
        config.seed = seed
    controller = NetworkController(config)

    writer = None
    csv_file = None
    if log_path:
        csv_file = Path(log_path).open("w", newline="")
        writer = csv.writer(csv_file)
        writer.writerow(_HEADER)

    try:
        untangle_frames = 0
        for tick in range(steps):
            metrics = controller.step(tick)
            if metrics.untangling:
                untangle_frames += 1
            if writer:
                tick_ms = 0.0 if deterministic_log else metrics.tick_duration_ms
                writer.writerow(_format_row(metrics, tick_ms))
    finally:
        if csv_file:
            csv_file.close()

    logger.info(
        "Ran %d frames: %d nodes, %d connections, %d frames spent untangling",
        steps,
        len(controller.nodes),
        len(controller.connection_pairs),
        untangle_frames,
    )
    if snapshot_path:
        _write_snapshot(controller, Path(snapshot_path))
    return controller


def main() -> None:
    parser = argparse.ArgumentParser(description="Headless node network simulation")
    parser.add_argument("--steps", type=int, default=3000)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log", type=Path, default=None, help="CSV file to write per-frame metrics")
    parser.add_argument("--config", type=Path, default=None, help="YAML file overriding the default configuration")
    parser.add_argument(
        "--deterministic-log",
        action="store_true",
        help="Write deterministic CSV (tick_ms is forced to 0.000 so identical seeds match).",
    )
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write log records to this file")
    parser.add_argument("--snapshot", type=Path, default=None, help="JSON file for the final nodes, edges and fence")
    args = parser.parse_args()
    setup_logging(parse_level(args.log_level), args.log_file)
    run_headless(
        args.steps,
        args.seed,
        args.log,
        deterministic_log=args.deterministic_log,
        config_path=args.config,
        snapshot_path=args.snapshot,
    )


if __name__ == "__main__":
    main()
