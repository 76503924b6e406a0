from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

import pygame

from ..logging_config import parse_level, setup_logging
from ..render.draw import draw_fps, draw_frame
from ..sim.core.config import SimulationConfig
from ..sim.core.controller import NetworkController

logger = logging.getLogger(__name__)


def _load_config(config_path: Optional[Path], seed: Optional[int]) -> SimulationConfig:
    config = SimulationConfig.from_yaml(config_path) if config_path else SimulationConfig()
    if seed is not None:
        config.seed = seed
    return config


def run_viewer(config: SimulationConfig, max_frames: Optional[int] = None) -> NetworkController:
    pygame.init()
    try:
        surface = pygame.display.set_mode((int(config.width), int(config.height)))
        pygame.display.set_caption("Node network")
        font = pygame.font.Font(None, 20)
        clock = pygame.time.Clock()
        controller = NetworkController(config, now_ms=pygame.time.get_ticks())
        render = config.render
        frames = 0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            controller.update(pygame.time.get_ticks())
            draw_frame(surface, controller, render)
            if render.show_fps:
                draw_fps(surface, font, clock.get_fps(), render.fps_color)
            pygame.display.flip()
            clock.tick(render.target_fps)
            frames += 1
            if max_frames is not None and frames >= max_frames:
                running = False
        logger.info("Viewer closed after %d frames with %d nodes", frames, len(controller.nodes))
        return controller
    finally:
        pygame.quit()


def main() -> None:
    parser = argparse.ArgumentParser(description="Interactive node network viewer")
    parser.add_argument("--config", type=Path, default=None, help="YAML file overriding the default configuration")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--frames", type=int, default=None, help="Close the window after this many frames")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write log records to this file")
    args = parser.parse_args()
    setup_logging(parse_level(args.log_level), args.log_file)
    run_viewer(_load_config(args.config, args.seed), max_frames=args.frames)


if __name__ == "__main__":
    main()
