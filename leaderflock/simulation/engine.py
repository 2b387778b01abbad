"""
Simulation engine: owns the state and runs one frame at a time.
"""

import dataclasses
import json
import logging
import random
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np

from ..core.agents import Boid, Leader
from ..core.collisions import clearance, reflect_at_bounds, repel_from_obstacles
from ..core.config import FLOCK_MODES, ConfigError, SimulationConfig
from ..core.flocking import update_boid_velocities
from ..core.obstacles import generate_from_config
from ..core.spatial_grid import SpatialGrid
from ..core.world import Obstacle, World
from .intents import (
    AddBoid, Intent, LeaderAccelerate, LeaderController, LeaderTurn, RemoveBoid, TogglePause,
)
from .state import LEADER_ID, SimulationState, WorldView

logger = logging.getLogger(__name__)

PopulationListener = Callable[[int], None]


class SimulationEngine:
    """
    Single-threaded frame loop for the leader + flock simulation.

    Each ``step`` runs, in order: buffered leader input, flocking forces,
    obstacle repulsion, position integration with edge reflection, and the
    clock. Collaborators read the result through ``snapshot()``.
    """

    def __init__(self, config: Optional[SimulationConfig] = None, seed: Optional[int] = None,
                 obstacles: Optional[Sequence[Obstacle]] = None):
        """
        Initialize the engine.

        Args:
            config: Simulation configuration (uses defaults if None)
            seed: Seed for obstacle and boid placement (random if None)
            obstacles: Fixed obstacle field; generated from the config if None

        Raises:
            ConfigError: If the configuration is invalid
        """
        self.config = dataclasses.replace(config if config else SimulationConfig()).validate()
        self.rng = random.Random(seed)

        world = World(self.config.screenWidth, self.config.screenHeight)
        if obstacles is None:
            obstacles = generate_from_config(self.config, world, self.rng)

        leader = Leader.from_config(LEADER_ID, self.config)
        self.state = SimulationState(world=world, obstacles=tuple(obstacles), leader=leader)

        self.controller = LeaderController()
        self.grid = self._make_grid() if self.config.useSpatialGrid else None
        self._listeners: List[PopulationListener] = []

        for _ in range(self.config.boidCount):
            self.add_boid()

        logger.debug("Engine ready: %dx%d world, %d obstacles, %d boids",
                     world.width, world.height, len(self.state.obstacles), len(self.state.boids))

    # -- accessors -----------------------------------------------------

    @property
    def world(self) -> World:
        return self.state.world

    @property
    def leader(self) -> Leader:
        return self.state.leader

    @property
    def boids(self) -> List[Boid]:
        return self.state.boids

    @property
    def obstacles(self):
        return self.state.obstacles

    @property
    def paused(self) -> bool:
        return self.state.paused

    def snapshot(self) -> WorldView:
        """Fresh read-only view of every agent and obstacle."""
        return self.state.view()

    # -- input ---------------------------------------------------------

    def submit(self, intent: Intent) -> None:
        """
        Consume one user intent.

        Leader intents are buffered until the next step; the others take
        effect immediately.

        Args:
            intent: Intent produced by the input front end
        """
        if isinstance(intent, (LeaderAccelerate, LeaderTurn)):
            self.controller.push(intent)
        elif isinstance(intent, AddBoid):
            self.add_boid()
        elif isinstance(intent, RemoveBoid):
            self.remove_boid()
        elif isinstance(intent, TogglePause):
            self.toggle_pause()
        else:
            raise TypeError(f"unknown intent: {intent!r}")

    def add_boid(self) -> Boid:
        boid = Boid.spawn(self.state.next_id(), self.world, self.config, self.rng)
        self.state.boids.append(boid)
        logger.debug("Added boid %d (flock size %d)", boid.id, len(self.state.boids))
        self._notify()
        return boid

    def remove_boid(self) -> Optional[Boid]:
        """Remove the most recently added boid; no-op on an empty flock."""
        if not self.state.boids:
            return None
        boid = self.state.boids.pop()
        logger.debug("Removed boid %d (flock size %d)", boid.id, len(self.state.boids))
        self._notify()
        return boid

    def toggle_pause(self) -> bool:
        self.state.paused = not self.state.paused
        logger.debug("Simulation %s", "paused" if self.state.paused else "resumed")
        return self.state.paused

    def set_flock_mode(self, mode: str) -> None:
        if mode not in FLOCK_MODES:
            raise ConfigError(f"flockMode must be one of {FLOCK_MODES}, got {mode!r}")
        self.config.flockMode = mode
        logger.debug("Flock mode set to %s", mode)

    def subscribe(self, callback: PopulationListener) -> None:
        """Register a callback invoked with the new boid count after every resize."""
        self._listeners.append(callback)

    def _notify(self) -> None:
        count = len(self.state.boids)
        for callback in self._listeners:
            callback(count)

    # -- frame loop ----------------------------------------------------

    def step(self, dt: float) -> None:
        """
        Advance the simulation by one frame.

        Args:
            dt: Wall-clock time since the previous frame in seconds

        Raises:
            ValueError: If dt is negative
        """
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")

        state = self.state
        agents = state.agents()

        self.controller.apply(state.leader, dt)
        update_boid_velocities(state.boids, agents, dt, self.config, self.grid)
        repel_from_obstacles(agents, state.obstacles, dt,
                             self.config.separationRadius, self.config.separationWeight)

        for agent in agents:
            agent.integrate(dt, state.world, state.paused)

        state.clock.advance(dt, state.paused)
        state.frame += 1

    def run(self, frames: int, dt: float) -> WorldView:
        """Step a fixed number of frames with a constant dt."""
        for _ in range(frames):
            self.step(dt)
        return self.snapshot()

    def resize_world(self, width: float, height: float) -> None:
        """
        Switch to a new world size and regenerate the obstacle field.

        Raises:
            ConfigError: If the new size cannot hold the obstacle margin
        """
        self.config = dataclasses.replace(self.config, screenWidth=width, screenHeight=height).validate()

        world = World(width, height)
        self.state.world = world
        self.state.obstacles = generate_from_config(self.config, world, self.rng)
        for agent in self.state.agents():
            reflect_at_bounds(agent, world)
        if self.grid is not None:
            self.grid = self._make_grid()
        logger.debug("World resized to %sx%s", width, height)

    def _make_grid(self) -> SpatialGrid:
        return SpatialGrid.for_radius(self.world.width, self.world.height, self.config.neighborRadius)

    # -- statistics and output ------------------------------------------

    def stats(self) -> Dict[str, float]:
        """
        Summary metrics for the current frame.

        Returns:
            Dictionary with flock size, speeds, cohesion (mean distance of
            boids to their centroid), mean distance to the leader and the
            number of agents currently inside an obstacle
        """
        state = self.state
        leader = state.leader
        stats = {
            "frame": state.frame,
            "elapsed": state.clock.elapsed,
            "boid_count": len(state.boids),
            "leader_speed": leader.speed,
            "avg_speed": 0.0,
            "max_speed": 0.0,
            "flock_cohesion": 0.0,
            "leader_distance": 0.0,
            "agents_in_obstacles": sum(
                1 for agent in state.agents() if clearance(agent, state.obstacles) < 0
            ),
        }

        if state.boids:
            positions = np.array([[b.position.x, b.position.y] for b in state.boids])
            velocities = np.array([[b.velocity.x, b.velocity.y] for b in state.boids])
            speeds = np.linalg.norm(velocities, axis=1)
            centroid = positions.mean(axis=0)

            stats["avg_speed"] = float(speeds.mean())
            stats["max_speed"] = float(speeds.max())
            stats["flock_cohesion"] = float(np.linalg.norm(positions - centroid, axis=1).mean())
            stats["leader_distance"] = float(
                np.linalg.norm(positions - np.array([leader.position.x, leader.position.y]), axis=1).mean()
            )

        return stats

    def to_dict(self) -> dict:
        data = self.state.to_dict()
        data["config"] = self.config.to_dict()
        return data

    def save_state(self, path: Optional[str] = None) -> str:
        """
        Write the current state to a JSON file.

        Args:
            path: Output file (defaults to config.stateOutputFile)

        Returns:
            Path of the written file
        """
        path = path or self.config.stateOutputFile
        with open(path, 'w') as f:
            json.dump(self.to_dict(), f, indent=4)
        logger.info("State saved to %s", path)
        return path
