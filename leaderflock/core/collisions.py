"""
World-bounds reflection and obstacle repulsion.

Both functions only nudge velocities (and, for the bounds, positions) of the
agents they are given; they never own agent records.
"""

from typing import Iterable, Sequence

from .vector import distance
from .world import Obstacle, World


def reflect_at_bounds(agent, world: World) -> None:
    """
    Bounce an agent off the world edges, treating it as a point.

    Below zero the coordinate is mirrored; at or past the far edge it is
    clamped onto the edge. Either way the matching velocity component flips.

    Args:
        agent: Object with ``position`` and ``velocity`` vectors
        world: World bounds
    """
    pos = agent.position
    vel = agent.velocity

    if pos.x < 0:
        pos.x = -pos.x
        vel.x = -vel.x
    if pos.y < 0:
        pos.y = -pos.y
        vel.y = -vel.y
    if pos.x >= world.width:
        pos.x = world.width
        vel.x = -vel.x
    if pos.y >= world.height:
        pos.y = world.height
        vel.y = -vel.y


def repel_from_obstacles(agents: Iterable, obstacles: Sequence[Obstacle], dt: float,
                         separation_radius: float, separation_weight: float) -> None:
    """
    Push agents away from obstacles they are about to hit.

    For every agent within ``radius + separation_radius`` of an obstacle
    centre, ``velocity += dt * separation_weight * (position - centre)``.
    There is no position correction.

    Args:
        agents: Leader and boids
        obstacles: Static obstacle field
        dt: Frame duration in seconds
        separation_radius: Extra reach around each obstacle
        separation_weight: Repulsion strength
    """
    for agent in agents:
        for obst in obstacles:
            centre = obst.position
            if distance(agent.position, centre) <= obst.radius + separation_radius:
                agent.velocity += (agent.position - centre) * (separation_weight * dt)


def clearance(agent, obstacles: Sequence[Obstacle]) -> float:
    """
    Distance from an agent to the edge of the closest obstacle.

    Args:
        agent: Object with a ``position`` vector
        obstacles: Obstacle field

    Returns:
        Signed distance (negative when inside an obstacle), or inf without obstacles
    """
    best = float("inf")
    for obst in obstacles:
        best = min(best, distance(agent.position, obst.position) - obst.radius)
    return best
