"""
Core module containing configuration, world geometry, agents and the force rules.
"""

from .config import SimulationConfig, ConfigError, DEFAULT_CONFIG, HEADLESS_CONFIG
from .world import World, Obstacle
from .spatial_grid import SpatialGrid

__all__ = ['SimulationConfig', 'ConfigError', 'DEFAULT_CONFIG', 'HEADLESS_CONFIG',
           'World', 'Obstacle', 'SpatialGrid']
