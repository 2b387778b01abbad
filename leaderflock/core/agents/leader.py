"""
Leader agent steered by discrete user input.
"""

from .base import Agent, AgentId, Role
from ..config import SimulationConfig
from ..vector import from_polar, heading_degrees, length


class Leader(Agent):
    """
    The single user-controlled agent.

    Acceleration changes only the magnitude of the velocity and turning
    changes only its direction. Both read the other half from the live
    velocity, so there is no cached angle that can drift.
    """

    role = Role.LEADER

    def __init__(self, agent_id: AgentId, x: float, y: float, vx: float, vy: float,
                 vmin: float, vmax: float):
        """
        Initialize the leader.

        Args:
            agent_id: Unique identity
            x: Initial x position
            y: Initial y position
            vx: Initial x velocity
            vy: Initial y velocity
            vmin: Lower speed bound applied on acceleration
            vmax: Upper speed bound applied on acceleration
        """
        super().__init__(agent_id, x, y, vx, vy)
        self.vmin = vmin
        self.vmax = vmax

    @classmethod
    def from_config(cls, agent_id: AgentId, config: SimulationConfig) -> "Leader":
        x, y = config.leaderStart
        vx, vy = config.leaderStartVelocity
        return cls(agent_id, x, y, vx, vy, config.leaderVmin, config.leaderVmax)

    def accelerate(self, delta: float, dt: float) -> None:
        """
        Change speed by delta * dt, keeping the current heading.

        Args:
            delta: Acceleration in pixels / s^2 (negative to brake)
            dt: Frame duration in seconds
        """
        theta = heading_degrees(self.velocity)
        speed = length(self.velocity) + delta * dt
        speed = min(max(speed, self.vmin), self.vmax)
        self.velocity = from_polar(speed, theta)

    def turn(self, delta_degrees: float, dt: float) -> None:
        """
        Rotate the heading by delta_degrees * dt, keeping the current speed.

        Args:
            delta_degrees: Angular velocity in degrees / s (positive turns clockwise on screen)
            dt: Frame duration in seconds
        """
        speed = length(self.velocity)
        theta = (heading_degrees(self.velocity) + delta_degrees * dt) % 360
        self.velocity = from_polar(speed, theta)
