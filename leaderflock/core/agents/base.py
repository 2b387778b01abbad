"""
Base Agent class shared by the leader and every boid.
"""

import enum
from dataclasses import dataclass
from typing import NewType, Tuple

import pygame

from ..collisions import reflect_at_bounds
from ..vector import heading_degrees, length
from ..world import World

AgentId = NewType("AgentId", int)


class Role(enum.Enum):
    LEADER = "leader"
    BOID = "boid"


@dataclass(frozen=True)
class AgentView:
    """Read-only snapshot of one agent, handed to rendering collaborators."""

    id: AgentId
    role: Role
    position: Tuple[float, float]
    velocity: Tuple[float, float]
    heading: float


class Agent:
    """
    Base class for all agents in the simulation.

    An agent is a moving point with a position, a velocity and an identity.
    The heading is always derived from the velocity and never stored.
    """

    role = Role.BOID

    def __init__(self, agent_id: AgentId, x: float, y: float, vx: float, vy: float):
        """
        Initialize an agent.

        Args:
            agent_id: Unique identity assigned by the simulation state
            x: Initial x position
            y: Initial y position
            vx: Initial x velocity
            vy: Initial y velocity
        """
        self.id = agent_id
        self.position = pygame.Vector2(x, y)
        self.velocity = pygame.Vector2(vx, vy)

    @property
    def heading(self) -> float:
        """Direction of travel in degrees; 0 for a stationary agent."""
        return heading_degrees(self.velocity)

    @property
    def speed(self) -> float:
        return length(self.velocity)

    def integrate(self, dt: float, world: World, paused: bool = False) -> None:
        """
        Advance the position by velocity * dt and bounce off the world edges.

        Args:
            dt: Elapsed time in seconds
            world: World bounds to reflect against
            paused: When True the agent does not move
        """
        if paused:
            return

        self.position += self.velocity * dt
        reflect_at_bounds(self, world)

    def view(self) -> AgentView:
        return AgentView(
            id=self.id,
            role=self.role,
            position=(self.position.x, self.position.y),
            velocity=(self.velocity.x, self.velocity.y),
            heading=self.heading,
        )

    def to_dict(self) -> dict:
        return {
            "id": int(self.id),
            "role": self.role.value,
            "position": [self.position.x, self.position.y],
            "velocity": [self.velocity.x, self.velocity.y],
            "heading": self.heading,
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, Agent):
            return NotImplemented
        return (self.id, self.role, self.position, self.velocity) == \
            (other.id, other.role, other.position, other.velocity)

    def __hash__(self) -> int:
        return hash((self.id, self.role))

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(id={self.id}, pos=({self.position.x:.1f}, {self.position.y:.1f}), "
                f"vel=({self.velocity.x:.1f}, {self.velocity.y:.1f}))")
