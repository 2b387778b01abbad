"""
Configuration classes and defaults for the leader + flock simulation.
"""

import logging
from dataclasses import dataclass, field, fields
from typing import List, Literal, Optional

logger = logging.getLogger(__name__)


# Leader kinematics
LEADER_ACCEL = 300.0
LEADER_VMIN = 100.0
LEADER_VMAX = 800.0
LEADER_ANGULAR_SPEED = 360.0  # degrees per second

# Boid spawn velocity range (per axis)
BOID_VMIN = 100
BOID_VMAX = 400

# Interaction radii and rule weights (used across modules)
COHESION_RADIUS = 300.0
ALIGNMENT_RADIUS = 300.0
SEPARATION_RADIUS = 30.0
COHESION_WEIGHT = 4.0
ALIGNMENT_WEIGHT = 2.0
SEPARATION_WEIGHT = 10.0

# Obstacle generation bounds
OBST_MIN_RADIUS = 25
OBST_MAX_RADIUS = 100
NUM_MIN_OBST = 3
NUM_MAX_OBST = 8

FLOCK_MODES = ("snapshot", "sequential")


class ConfigError(ValueError):
    """Raised when the simulation is constructed with invalid parameters."""


@dataclass
class SimulationConfig:
    """Configuration for the leader + flock simulation."""

    # World settings
    screenWidth: int = 800
    screenHeight: int = 600

    # Agent counts
    boidCount: int = 0

    # Leader kinematics
    leaderAccel: float = LEADER_ACCEL
    leaderVmin: float = LEADER_VMIN
    leaderVmax: float = LEADER_VMAX
    leaderAngularSpeed: float = LEADER_ANGULAR_SPEED
    leaderStart: List[float] = field(default_factory=lambda: [100.0, 150.0])
    leaderStartVelocity: List[float] = field(default_factory=lambda: [100.0, 100.0])

    # Boid kinematics
    boidVmin: int = BOID_VMIN
    boidVmax: int = BOID_VMAX
    boidMaxSpeed: Optional[float] = None  # None = unbounded

    # Neighbor detection
    cohesionRadius: float = COHESION_RADIUS
    alignmentRadius: float = ALIGNMENT_RADIUS
    separationRadius: float = SEPARATION_RADIUS
    useSpatialGrid: bool = False

    # Rule weights
    cohesionWeight: float = COHESION_WEIGHT
    alignmentWeight: float = ALIGNMENT_WEIGHT
    separationWeight: float = SEPARATION_WEIGHT

    # Flock update evaluation order
    flockMode: Literal["snapshot", "sequential"] = "snapshot"

    # Obstacle field
    minObstacles: int = NUM_MIN_OBST
    maxObstacles: int = NUM_MAX_OBST
    minObstacleRadius: int = OBST_MIN_RADIUS
    maxObstacleRadius: int = OBST_MAX_RADIUS

    # Visualization
    fpsTarget: int = 60
    agentLength: int = 30
    agentWidth: int = 10
    backgroundColor: List[int] = field(default_factory=lambda: [0, 255, 255])
    leaderColor: List[int] = field(default_factory=lambda: [128, 128, 128])
    boidColor: List[int] = field(default_factory=lambda: [230, 230, 0])
    obstacleColor: List[int] = field(default_factory=lambda: [153, 0, 0])

    # Output
    stateOutputFile: str = "leaderflock_state.json"

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            data[f.name] = list(value) if isinstance(value, list) else value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationConfig":
        """Create config from dictionary."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})

    @property
    def neighborRadius(self) -> float:
        """Largest of the three interaction radii."""
        return max(self.cohesionRadius, self.alignmentRadius, self.separationRadius)

    def validate(self) -> "SimulationConfig":
        """
        Check construction-time preconditions.

        Returns:
            The config itself, so calls can be chained

        Raises:
            ConfigError: If any parameter is out of range
        """
        problems = []

        if self.screenWidth <= 0 or self.screenHeight <= 0:
            problems.append(f"world must have positive size, got {self.screenWidth}x{self.screenHeight}")
        elif min(self.screenWidth, self.screenHeight) <= 2 * self.maxObstacleRadius:
            problems.append(
                f"world {self.screenWidth}x{self.screenHeight} cannot fit obstacles "
                f"with margin {self.maxObstacleRadius}"
            )

        if self.boidCount < 0:
            problems.append("boidCount must be >= 0")
        if not 0 <= self.leaderVmin <= self.leaderVmax:
            problems.append("leader speed bounds must satisfy 0 <= leaderVmin <= leaderVmax")
        if self.boidVmin >= self.boidVmax:
            problems.append("boidVmin must be smaller than boidVmax")
        if self.boidMaxSpeed is not None and self.boidMaxSpeed <= 0:
            problems.append("boidMaxSpeed must be positive or None")
        if not 0 <= self.minObstacles < self.maxObstacles:
            problems.append("obstacle count range must satisfy 0 <= minObstacles < maxObstacles")
        if not 0 < self.minObstacleRadius < self.maxObstacleRadius:
            problems.append("obstacle radius range must satisfy 0 < minObstacleRadius < maxObstacleRadius")

        for name in ("cohesionRadius", "alignmentRadius", "separationRadius",
                     "cohesionWeight", "alignmentWeight", "separationWeight"):
            if getattr(self, name) < 0:
                problems.append(f"{name} must be >= 0")

        if self.flockMode not in FLOCK_MODES:
            problems.append(f"flockMode must be one of {FLOCK_MODES}, got {self.flockMode!r}")

        if problems:
            for problem in problems:
                logger.warning("Invalid configuration: %s", problem)
            raise ConfigError("; ".join(problems))
        return self


# Default configuration for interactive simulation
DEFAULT_CONFIG = SimulationConfig()

# Configuration for headless runs (a flock to look at, spatial grid on)
HEADLESS_CONFIG = SimulationConfig(
    boidCount=30,
    useSpatialGrid=True,
)
