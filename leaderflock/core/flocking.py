"""
Flock behavior engine: cohesion, alignment and separation.

Each rule has its own neighborhood radius. The three neighbor sets are
independent, so one agent may count for any subset of the rules.
"""

from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Sequence

import pygame

from .config import SimulationConfig
from .spatial_grid import SpatialGrid
from .vector import distance, mean


@dataclass(frozen=True)
class AgentState:
    """Frozen copy of the fields the flocking rules read."""

    id: int
    position: pygame.Vector2
    velocity: pygame.Vector2

    @classmethod
    def of(cls, agent) -> "AgentState":
        return cls(agent.id, pygame.Vector2(agent.position), pygame.Vector2(agent.velocity))


class FlockForces(NamedTuple):
    cohesion: pygame.Vector2
    alignment: pygame.Vector2
    separation: pygame.Vector2

    @property
    def total(self) -> pygame.Vector2:
        return self.cohesion + self.alignment + self.separation


class Neighborhood(NamedTuple):
    cohesion: list
    alignment: list
    separation: list


def snapshot_agents(agents) -> List[AgentState]:
    return [AgentState.of(agent) for agent in agents]


def classify_neighbors(boid, others, config: SimulationConfig) -> Neighborhood:
    """
    Sort the other agents into the three rule neighborhoods.

    Args:
        boid: The boid being updated
        others: Candidate agents (the boid itself is skipped by id)
        config: Configuration holding the radii

    Returns:
        Neighborhood with one list per rule
    """
    hood = Neighborhood([], [], [])
    for other in others:
        if other.id == boid.id:
            continue

        d = distance(boid.position, other.position)
        if d < config.cohesionRadius:
            hood.cohesion.append(other)
        if d < config.alignmentRadius:
            hood.alignment.append(other)
        if d < config.separationRadius:
            hood.separation.append(other)
    return hood


def compute_flock_forces(boid, others, config: SimulationConfig) -> FlockForces:
    """
    Compute the three steering forces acting on one boid.

    Cohesion pulls toward the centroid of its neighbors, alignment toward
    their mean velocity, and separation pushes away from each close
    neighbor. Separation is summed rather than averaged so crowding
    amplifies it. Empty neighborhoods contribute a zero force.

    Args:
        boid: The boid being updated
        others: Agents to consider as neighbors
        config: Configuration holding radii and weights

    Returns:
        FlockForces with the weighted cohesion, alignment and separation
    """
    hood = classify_neighbors(boid, others, config)

    cohesion = pygame.Vector2(0, 0)
    centroid = mean(n.position for n in hood.cohesion)
    if centroid is not None:
        cohesion = (centroid - boid.position) * config.cohesionWeight

    alignment = pygame.Vector2(0, 0)
    avg_velocity = mean(n.velocity for n in hood.alignment)
    if avg_velocity is not None:
        alignment = (avg_velocity - boid.velocity) * config.alignmentWeight

    separation = pygame.Vector2(0, 0)
    for n in hood.separation:
        separation += boid.position - n.position
    separation *= config.separationWeight

    return FlockForces(cohesion, alignment, separation)


def _limit_speed(velocity: pygame.Vector2, max_speed: Optional[float]) -> pygame.Vector2:
    if max_speed is not None and velocity.length() > max_speed:
        velocity.scale_to_length(max_speed)
    return velocity


def update_boid_velocities(boids: Sequence, all_agents: Sequence, dt: float,
                           config: SimulationConfig, grid: Optional[SpatialGrid] = None) -> None:
    """
    Apply the flocking rules to every boid for one frame.

    In ``snapshot`` mode every boid reads the same frozen copy of all agents
    and the new velocities are committed together at the end, so the result
    does not depend on boid order. In ``sequential`` mode each boid's new
    velocity is written immediately and later boids see it.

    Args:
        boids: Boids to update (velocity is the only field written)
        all_agents: Every agent, leader included
        dt: Frame duration in seconds
        config: Configuration holding radii, weights and the flock mode
        grid: Optional spatial grid used to pre-filter neighbor candidates
    """
    if not boids:
        return

    sequential = config.flockMode == "sequential"
    others = list(all_agents) if sequential else snapshot_agents(all_agents)

    if grid is not None:
        grid.clear()
        grid.insert_all(others)
    radius = config.neighborRadius

    pending = []
    for boid in boids:
        candidates = grid.get_neighbors(boid.position, radius) if grid is not None else others
        forces = compute_flock_forces(boid, candidates, config)
        new_velocity = _limit_speed(boid.velocity + forces.total * dt, config.boidMaxSpeed)

        if sequential:
            boid.velocity = new_velocity
        else:
            pending.append((boid, new_velocity))

    for boid, new_velocity in pending:
        boid.velocity = new_velocity
