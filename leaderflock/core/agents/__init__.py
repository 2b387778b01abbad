"""
Agent classes for the leader + flock simulation.
"""

from .base import Agent, AgentId, AgentView, Role
from .boid import Boid
from .leader import Leader

__all__ = ['Agent', 'AgentId', 'AgentView', 'Role', 'Boid', 'Leader']
