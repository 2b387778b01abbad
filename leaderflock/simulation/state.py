"""
Simulation state: agents, obstacle field, clock and identity counter.
"""

import itertools
from dataclasses import dataclass, field
from typing import List, Tuple

from ..core.agents import AgentId, AgentView, Boid, Leader
from ..core.world import Obstacle, World

LEADER_ID = AgentId(1)


class SimulationClock:
    """Elapsed simulated time. Only advances while the simulation runs."""

    def __init__(self):
        self.elapsed = 0.0

    def advance(self, dt: float, paused: bool = False) -> float:
        """
        Add dt to the elapsed time unless paused.

        Args:
            dt: Wall-clock frame duration in seconds
            paused: When True the clock holds

        Returns:
            The new elapsed time
        """
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        if not paused:
            self.elapsed += dt
        return self.elapsed


@dataclass(frozen=True)
class WorldView:
    """Immutable per-frame view consumed by renderers."""

    frame: int
    elapsed: float
    paused: bool
    width: float
    height: float
    agents: Tuple[AgentView, ...]
    obstacles: Tuple[Obstacle, ...]

    @property
    def leader(self) -> AgentView:
        return self.agents[0]

    @property
    def boids(self) -> Tuple[AgentView, ...]:
        return self.agents[1:]


@dataclass
class SimulationState:
    """
    Everything the frame loop mutates, owned by one engine.

    The leader is fixed at construction and holds the first identity; boid
    ids continue from it and are never reused. Boids are kept in creation
    order so the newest one is at the end.
    """

    world: World
    obstacles: Tuple[Obstacle, ...]
    leader: Leader
    boids: List[Boid] = field(default_factory=list)
    clock: SimulationClock = field(default_factory=SimulationClock)
    paused: bool = False
    frame: int = 0
    _ids: itertools.count = field(init=False, repr=False)

    def __post_init__(self):
        last = max([self.leader.id] + [boid.id for boid in self.boids])
        self._ids = itertools.count(last + 1)

    def next_id(self) -> AgentId:
        return AgentId(next(self._ids))

    def agents(self) -> list:
        """Leader followed by the boids."""
        return [self.leader] + self.boids

    def view(self) -> WorldView:
        return WorldView(
            frame=self.frame,
            elapsed=self.clock.elapsed,
            paused=self.paused,
            width=self.world.width,
            height=self.world.height,
            agents=tuple(agent.view() for agent in self.agents()),
            obstacles=self.obstacles,
        )

    def to_dict(self) -> dict:
        return {
            "frame": self.frame,
            "elapsed": self.clock.elapsed,
            "paused": self.paused,
            "world": {"width": self.world.width, "height": self.world.height},
            "leader": self.leader.to_dict(),
            "boids": [boid.to_dict() for boid in self.boids],
            "obstacles": [obst.to_dict() for obst in self.obstacles],
        }
