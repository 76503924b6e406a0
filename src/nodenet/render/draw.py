from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from ..sim.core.config import RenderConfig

if TYPE_CHECKING:
    from ..sim.core.controller import NetworkController


def draw_connections(surface: pygame.Surface, controller: NetworkController, config: RenderConfig) -> None:
    for pair in controller.connection_pairs:
        pygame.draw.line(surface, config.line_color, pair.first.position, pair.second.position, config.line_width)


def draw_nodes(surface: pygame.Surface, controller: NetworkController, config: RenderConfig) -> None:
    for node in controller.nodes:
        pygame.draw.circle(surface, config.node_fill_color, node.position, config.node_radius)
        if config.node_outline_width > 0:
            pygame.draw.circle(
                surface, config.node_outline_color, node.position, config.node_radius, config.node_outline_width
            )


def draw_frame(surface: pygame.Surface, controller: NetworkController, config: RenderConfig | None = None) -> None:
    # Lines first so nodes are painted on top of them.
    if config is None:
        config = controller.config.render
    surface.fill(config.background_color)
    draw_connections(surface, controller, config)
    draw_nodes(surface, controller, config)


def draw_fps(surface: pygame.Surface, font: pygame.font.Font, fps: float, color=(255, 255, 255)) -> None:
    label = font.render(f"FPS: {fps:.1f}", True, color)
    width, height = surface.get_size()
    surface.blit(label, (width - 100, height - 10 - label.get_height()))
