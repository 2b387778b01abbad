"""
Tests for the obstacle field generator.

Covers non-overlap and containment of generated obstacles, the single-pass
rejection rule and construction-time bound checks.
"""

import itertools
import math
import random

import pytest

from leaderflock.core.config import ConfigError, SimulationConfig
from leaderflock.core.obstacles import generate_from_config, generate_obstacles
from leaderflock.core.world import Obstacle, World


class TestInvariants:

    @pytest.mark.parametrize("seed", range(40))
    def test_no_two_obstacles_overlap(self, seed, world, config):
        field = generate_from_config(config, world, random.Random(seed))
        for a, b in itertools.combinations(field, 2):
            assert math.hypot(a.x - b.x, a.y - b.y) > a.radius + b.radius

    @pytest.mark.parametrize("seed", range(40))
    def test_obstacles_inside_world(self, seed, world, config):
        field = generate_from_config(config, world, random.Random(seed))
        for obst in field:
            assert obst.x - obst.radius >= 0
            assert obst.y - obst.radius >= 0
            assert obst.x + obst.radius <= world.width
            assert obst.y + obst.radius <= world.height

    @pytest.mark.parametrize("seed", range(40))
    def test_count_and_radius_ranges(self, seed, world, config):
        field = generate_from_config(config, world, random.Random(seed))
        assert 1 <= len(field) < config.maxObstacles
        for obst in field:
            assert config.minObstacleRadius <= obst.radius < config.maxObstacleRadius

    def test_field_is_immutable(self, world, config, rng):
        field = generate_from_config(config, world, rng)
        assert isinstance(field, tuple)
        with pytest.raises(AttributeError):
            field[0].radius = 1


class TestRejection:

    def test_overlapping_candidate_dropped_not_retried(self, world, scripted_random):
        # target=3, then (x, y, r) per slot; the second slot overlaps the first
        rng = scripted_random([3, 200, 200, 50, 210, 200, 50, 500, 400, 30])
        field = generate_obstacles((3, 8), (25, 100), world, rng=rng)

        assert field == (Obstacle(200, 200, 50), Obstacle(500, 400, 30))
        assert rng.values == []

    def test_touching_circles_count_as_overlap(self, world, scripted_random):
        rng = scripted_random([3, 200, 200, 50, 300, 200, 50, 500, 400, 30])
        field = generate_obstacles((3, 8), (25, 100), world, rng=rng)

        assert Obstacle(300, 200, 50) not in field
        assert len(field) == 2

    def test_draw_ranges_use_max_radius_margin(self, world, scripted_random):
        rng = scripted_random([3, 150, 150, 30, 400, 300, 30, 650, 450, 30])
        generate_obstacles((3, 8), (25, 100), world, rng=rng)

        assert rng.calls[0] == (3, 8)
        assert rng.calls[1] == (100, 700)
        assert rng.calls[2] == (100, 500)
        assert rng.calls[3] == (25, 100)


class TestBounds:

    def test_world_too_small_for_margin(self):
        with pytest.raises(ConfigError):
            generate_obstacles((3, 8), (25, 100), World(150, 600), margin=100)

    def test_explicit_margin(self, world, scripted_random):
        rng = scripted_random([1, 20, 20, 10])
        generate_obstacles((1, 2), (5, 20), world, margin=20, rng=rng)
        assert rng.calls[1] == (20, 780)


class TestObstacle:

    def test_overlaps(self):
        a = Obstacle(0, 0, 10)
        assert a.overlaps(Obstacle(15, 0, 5))
        assert not a.overlaps(Obstacle(16, 0, 5))

    def test_contains(self):
        obst = Obstacle(100, 100, 20)
        assert obst.contains(obst.position)
        assert not obst.contains(obst.position + (20, 0))
