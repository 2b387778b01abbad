"""
Random generation of a non-overlapping obstacle field.
"""

import logging
import random
from typing import List, Optional, Tuple

from .config import ConfigError, SimulationConfig
from .world import Obstacle, World

logger = logging.getLogger(__name__)


def generate_obstacles(count_range: Tuple[int, int], radius_range: Tuple[int, int],
                       world: World, margin: Optional[int] = None,
                       rng=None) -> Tuple[Obstacle, ...]:
    """
    Generate a random set of non-overlapping circular obstacles.

    The target count is drawn from ``[count_range[0], count_range[1])``. Each
    slot draws one candidate; a candidate overlapping an already accepted
    obstacle is dropped, not retried, so the result may hold fewer
    obstacles than the target.

    Args:
        count_range: (min, max) number of obstacles, max exclusive
        radius_range: (min, max) radius, max exclusive
        world: World the obstacles live in
        margin: Distance kept from every edge (defaults to the max radius)
        rng: Random source with ``randrange`` (defaults to the random module)

    Returns:
        Tuple of accepted obstacles

    Raises:
        ConfigError: If the world is too small for the margin
    """
    rng = rng or random
    min_count, max_count = count_range
    min_radius, max_radius = radius_range
    if margin is None:
        margin = max_radius

    width, height = int(world.width), int(world.height)
    if width - margin <= margin or height - margin <= margin:
        raise ConfigError(f"world {width}x{height} cannot fit obstacles with margin {margin}")

    target = rng.randrange(min_count, max_count)
    accepted: List[Obstacle] = []

    for _ in range(target):
        candidate = Obstacle(
            x=rng.randrange(margin, width - margin),
            y=rng.randrange(margin, height - margin),
            radius=rng.randrange(min_radius, max_radius),
        )

        if any(candidate.overlaps(existing) for existing in accepted):
            logger.debug("Rejected obstacle at (%s, %s) r=%s: overlap",
                         candidate.x, candidate.y, candidate.radius)
            continue

        accepted.append(candidate)

    logger.debug("Generated %d of %d obstacles", len(accepted), target)
    return tuple(accepted)


def generate_from_config(config: SimulationConfig, world: World, rng=None) -> Tuple[Obstacle, ...]:
    """Generate an obstacle field using the ranges held in a config."""
    return generate_obstacles(
        (config.minObstacles, config.maxObstacles),
        (config.minObstacleRadius, config.maxObstacleRadius),
        world,
        margin=config.maxObstacleRadius,
        rng=rng,
    )
