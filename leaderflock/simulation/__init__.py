"""
Simulation module containing the engine and its interactive and headless front ends.
"""

from .engine import SimulationEngine
from .interactive import Simulation
from .headless import HeadlessSimulation

__all__ = ['SimulationEngine', 'Simulation', 'HeadlessSimulation']
