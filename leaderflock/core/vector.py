"""
2D vector helpers on top of pygame.Vector2.

All functions return new vectors and never mutate their arguments.
"""

import math
from typing import Iterable, Optional

import pygame


def vec2(x: float = 0.0, y: float = 0.0) -> pygame.Vector2:
    return pygame.Vector2(x, y)


def add(a: pygame.Vector2, b: pygame.Vector2) -> pygame.Vector2:
    return pygame.Vector2(a.x + b.x, a.y + b.y)


def subtract(a: pygame.Vector2, b: pygame.Vector2) -> pygame.Vector2:
    return pygame.Vector2(a.x - b.x, a.y - b.y)


def scale(k: float, v: pygame.Vector2) -> pygame.Vector2:
    return pygame.Vector2(k * v.x, k * v.y)


def length(v: pygame.Vector2) -> float:
    return math.hypot(v.x, v.y)


def distance(a: pygame.Vector2, b: pygame.Vector2) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def mean(vectors: Iterable[pygame.Vector2]) -> Optional[pygame.Vector2]:
    """
    Arithmetic mean of a collection of vectors.

    Args:
        vectors: Vectors to average

    Returns:
        The mean vector, or None when the collection is empty
    """
    total = pygame.Vector2(0, 0)
    count = 0
    for v in vectors:
        total += v
        count += 1
    if count == 0:
        return None
    return total / count


def heading_degrees(v: pygame.Vector2) -> float:
    """Direction of v in degrees; the zero vector points at 0."""
    # atan2 gives +-180 for a signed zero x, which reflection produces
    if v.x == 0 and v.y == 0:
        return 0.0
    return math.degrees(math.atan2(v.y, v.x))


def from_polar(speed: float, degrees: float) -> pygame.Vector2:
    theta = math.radians(degrees)
    return pygame.Vector2(speed * math.cos(theta), speed * math.sin(theta))
