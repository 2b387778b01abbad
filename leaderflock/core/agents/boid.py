"""
Boid (follower) agent.
"""

import random

from .base import Agent, AgentId, Role
from ..config import SimulationConfig
from ..world import World


class Boid(Agent):
    """
    A follower agent whose velocity is governed by the flocking rules.

    Boids have no speed bound of their own; see ``SimulationConfig.boidMaxSpeed``
    for the optional cap applied by the flock engine.
    """

    role = Role.BOID

    @classmethod
    def spawn(cls, agent_id: AgentId, world: World, config: SimulationConfig, rng=None) -> "Boid":
        """
        Create a boid at a random position with a random velocity.

        Args:
            agent_id: Identity for the new boid
            world: World bounds for the position draw
            config: Configuration holding the velocity range
            rng: Random source with ``randrange`` (defaults to the random module)

        Returns:
            The new boid
        """
        rng = rng or random
        x = rng.randrange(0, int(world.width))
        y = rng.randrange(0, int(world.height))
        vx = rng.randrange(config.boidVmin, config.boidVmax)
        vy = rng.randrange(config.boidVmin, config.boidVmax)
        return cls(agent_id, x, y, vx, vy)
