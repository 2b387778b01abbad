"""
pygame drawing of a WorldView. Reads views only, never engine state.
"""

from typing import Iterable, Sequence

import pygame

from ..core.agents import AgentView, Role
from ..core.config import SimulationConfig
from .state import WorldView

# Unit triangle pointing along +x, scaled by (agentLength, agentWidth)
TRIANGLE = (
    pygame.Vector2(0.5, 0.0),
    pygame.Vector2(-0.5, 0.5),
    pygame.Vector2(-0.5, -0.5),
)


def triangle_points(agent: AgentView, length: float, width: float) -> list:
    """
    Screen-space vertices of an agent's triangle.

    Args:
        agent: Agent view to draw
        length: Size along the heading
        width: Size across the heading

    Returns:
        Three (x, y) tuples
    """
    center = pygame.Vector2(agent.position)
    points = []
    for vertex in TRIANGLE:
        scaled = pygame.Vector2(vertex.x * length, vertex.y * width)
        p = center + scaled.rotate(agent.heading)
        points.append((p.x, p.y))
    return points


class Renderer:
    """Draws obstacles, agents and an optional text overlay onto a surface."""

    def __init__(self, surface: pygame.Surface, config: SimulationConfig):
        self.surface = surface
        self.config = config
        self._font = None

    def draw(self, view: WorldView, overlay: Sequence[str] = ()) -> None:
        self.surface.fill(self.config.backgroundColor)

        for obst in view.obstacles:
            pygame.draw.circle(self.surface, self.config.obstacleColor,
                               (int(obst.x), int(obst.y)), int(obst.radius))

        for agent in view.agents:
            color = self.config.leaderColor if agent.role is Role.LEADER else self.config.boidColor
            pygame.draw.polygon(self.surface, color,
                                triangle_points(agent, self.config.agentLength, self.config.agentWidth))

        if overlay:
            self._draw_overlay(overlay)

    def _draw_overlay(self, lines: Iterable[str]) -> None:
        if self._font is None:
            self._font = pygame.font.Font(None, 24)
        y_offset = 10
        for text in lines:
            surface = self._font.render(text, True, (20, 20, 20))
            self.surface.blit(surface, (10, y_offset))
            y_offset += 25
