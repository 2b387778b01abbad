"""
Leader + flock boids simulation.
"""

__version__ = "0.1.0"
