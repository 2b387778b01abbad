"""
Uniform bucket grid used to pre-filter flock neighbour candidates.
"""

import math
from collections import defaultdict
from typing import Any, List, Tuple

from .vector import distance

# Cells per query radius; smaller cells mean a tighter square around each query
CELLS_PER_RADIUS = 4


class SpatialGrid:
    """
    Buckets agents by position so a radius query only visits nearby cells.

    A query of radius r scans ``ceil(r / cell_size)`` rings of cells around
    the query cell, then applies the exact distance test, so the answer is
    the same as a scan over every agent. Positions off the world (agents
    are only reflected after they move) fall into the nearest edge cell.
    """

    def __init__(self, width: float, height: float, cell_size: float):
        if cell_size <= 0:
            raise ValueError("cell_size must be positive")
        self.width = width
        self.height = height
        self.cell_size = cell_size
        self.cols = int(width / cell_size) + 1
        self.rows = int(height / cell_size) + 1
        self.buckets = defaultdict(list)

    @classmethod
    def for_radius(cls, width: float, height: float, radius: float,
                   subdivisions: int = CELLS_PER_RADIUS) -> "SpatialGrid":
        """Grid whose cells are ``radius / subdivisions`` wide."""
        return cls(width, height, radius / subdivisions)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self.buckets.values())

    def clear(self) -> None:
        self.buckets.clear()

    def cell_of(self, x: float, y: float) -> Tuple[int, int]:
        col = math.floor(x / self.cell_size)
        row = math.floor(y / self.cell_size)
        return (min(max(col, 0), self.cols - 1), min(max(row, 0), self.rows - 1))

    def insert(self, agent: Any) -> None:
        self.buckets[self.cell_of(agent.position.x, agent.position.y)].append(agent)

    def insert_all(self, agents) -> None:
        for agent in agents:
            self.insert(agent)

    def candidates(self, position: Any, radius: float) -> List[Any]:
        """
        Agents in every cell a circle of ``radius`` around position can touch.

        Args:
            position: Query point (pygame.Vector2)
            radius: Query radius

        Returns:
            Superset of the agents closer than radius, in bucket order
        """
        col, row = self.cell_of(position.x, position.y)
        reach = max(1, math.ceil(radius / self.cell_size))

        found = []
        for c in range(max(col - reach, 0), min(col + reach, self.cols - 1) + 1):
            for r in range(max(row - reach, 0), min(row + reach, self.rows - 1) + 1):
                found.extend(self.buckets.get((c, r), ()))
        return found

    def get_neighbors(self, position: Any, radius: float) -> List[Any]:
        """Agents strictly closer than radius to position."""
        return [agent for agent in self.candidates(position, radius)
                if distance(position, agent.position) < radius]
