"""
World bounds and static circular obstacles.
"""

from dataclasses import dataclass
from typing import Tuple

import pygame

from .config import ConfigError
from .vector import distance


@dataclass(frozen=True)
class World:
    """Rectangular simulation area, fixed for the session."""

    width: float
    height: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"world must have positive size, got {self.width}x{self.height}")

    def contains(self, point: pygame.Vector2) -> bool:
        return 0 <= point.x <= self.width and 0 <= point.y <= self.height

    @property
    def size(self) -> Tuple[float, float]:
        return (self.width, self.height)


@dataclass(frozen=True)
class Obstacle:
    """Static circular obstacle, immutable once generated."""

    x: float
    y: float
    radius: float

    @property
    def position(self) -> pygame.Vector2:
        return pygame.Vector2(self.x, self.y)

    def overlaps(self, other: "Obstacle") -> bool:
        """Circles touching or intersecting count as overlapping."""
        dx = self.x - other.x
        dy = self.y - other.y
        reach = self.radius + other.radius
        return dx * dx + dy * dy <= reach * reach

    def contains(self, point: pygame.Vector2) -> bool:
        return distance(self.position, point) < self.radius

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "radius": self.radius}
