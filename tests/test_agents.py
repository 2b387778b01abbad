"""Tests for the agent model: integration, heading, spawning and the leader controls."""

import random

import pygame
import pytest

from leaderflock.core.agents import AgentId, Boid, Leader, Role
from leaderflock.core.config import LEADER_VMAX, LEADER_VMIN


def make_leader(vx=100.0, vy=100.0, x=100.0, y=150.0):
    return Leader(AgentId(1), x, y, vx, vy, LEADER_VMIN, LEADER_VMAX)


class TestAgentModel:

    def test_heading_derived_from_velocity(self):
        boid = Boid(AgentId(2), 0, 0, 0, 5)
        assert boid.heading == pytest.approx(90)
        boid.velocity = pygame.Vector2(-3, 0)
        assert boid.heading == pytest.approx(180)

    def test_stationary_heading_is_zero(self):
        assert Boid(AgentId(2), 0, 0, 0, 0).heading == 0

    def test_integrate_moves_by_velocity_times_dt(self, world):
        boid = Boid(AgentId(2), 100, 100, 10, -5)
        boid.integrate(2.0, world)
        assert boid.position == pygame.Vector2(120, 90)

    def test_integrate_paused_is_noop(self, world):
        boid = Boid(AgentId(2), 100, 100, 10, -5)
        boid.integrate(2.0, world, paused=True)
        assert boid.position == pygame.Vector2(100, 100)
        assert boid.velocity == pygame.Vector2(10, -5)

    def test_integrate_zero_dt(self, world):
        boid = Boid(AgentId(2), 100, 100, 10, -5)
        boid.integrate(0.0, world)
        assert boid.position == pygame.Vector2(100, 100)

    def test_integrate_reflects_at_bounds(self, world):
        boid = Boid(AgentId(2), 5, 300, -10, 0)
        boid.integrate(1.0, world)
        assert boid.position == pygame.Vector2(5, 300)
        assert boid.velocity == pygame.Vector2(10, 0)

    def test_view_is_a_value(self):
        boid = Boid(AgentId(7), 1, 2, 3, 0)
        view = boid.view()
        assert view.id == 7
        assert view.role is Role.BOID
        assert view.position == (1, 2)
        assert view.heading == 0
        boid.position.x = 50
        assert view.position == (1, 2)

    def test_value_equality(self):
        assert Boid(AgentId(2), 1, 2, 3, 4) == Boid(AgentId(2), 1, 2, 3, 4)
        assert Boid(AgentId(2), 1, 2, 3, 4) != Boid(AgentId(3), 1, 2, 3, 4)

    def test_to_dict(self):
        data = make_leader().to_dict()
        assert data["id"] == 1
        assert data["role"] == "leader"
        assert data["velocity"] == [100.0, 100.0]
        assert data["heading"] == pytest.approx(45)


class TestBoidSpawn:

    @pytest.mark.parametrize("seed", range(20))
    def test_spawn_ranges(self, seed, world, config):
        boid = Boid.spawn(AgentId(2), world, config, random.Random(seed))
        assert 0 <= boid.position.x < world.width
        assert 0 <= boid.position.y < world.height
        assert config.boidVmin <= boid.velocity.x < config.boidVmax
        assert config.boidVmin <= boid.velocity.y < config.boidVmax
        assert boid.role is Role.BOID


class TestLeaderAccelerate:

    def test_from_rest(self):
        leader = make_leader(0, 0)
        leader.accelerate(300, 1.0)
        assert leader.speed == pytest.approx(300)
        assert leader.velocity.x == pytest.approx(300)
        assert leader.velocity.y == pytest.approx(0)

    def test_from_signed_zero_rest(self):
        leader = make_leader(-0.0, 0.0)
        leader.accelerate(300, 1.0)
        assert leader.velocity == pygame.Vector2(300, 0)

    def test_clamped_to_max(self):
        leader = make_leader()
        leader.accelerate(10000, 1.0)
        assert leader.speed == pytest.approx(LEADER_VMAX)

    def test_clamped_to_min(self):
        leader = make_leader()
        leader.accelerate(-10000, 1.0)
        assert leader.speed == pytest.approx(LEADER_VMIN)

    def test_zero_dt_still_clamps(self):
        leader = make_leader(30, 40)
        leader.accelerate(300, 0.0)
        assert leader.speed == pytest.approx(LEADER_VMIN)
        assert leader.heading == pytest.approx(pygame.Vector2(30, 40).as_polar()[1])

    def test_keeps_heading(self):
        leader = make_leader(100, 100)
        leader.accelerate(300, 0.5)
        assert leader.heading == pytest.approx(45)
        assert leader.speed == pytest.approx(pygame.Vector2(100, 100).length() + 150)

    def test_speed_always_within_bounds(self):
        rng = random.Random(99)
        leader = make_leader()
        for _ in range(500):
            leader.accelerate(rng.uniform(-2000, 2000), rng.uniform(0, 0.5))
            assert LEADER_VMIN - 1e-9 <= leader.speed <= LEADER_VMAX + 1e-9


class TestLeaderTurn:

    def test_quarter_turn(self):
        leader = make_leader(100, 0)
        leader.turn(90, 1.0)
        assert leader.velocity.x == pytest.approx(0, abs=1e-9)
        assert leader.velocity.y == pytest.approx(100)

    def test_negative_turn_wraps(self):
        leader = make_leader(100, 0)
        leader.turn(-90, 0.5)
        assert leader.heading == pytest.approx(-45)
        assert leader.speed == pytest.approx(100)

    def test_turn_preserves_speed(self):
        rng = random.Random(5)
        leader = make_leader(250, -120)
        speed = leader.speed
        for _ in range(200):
            leader.turn(rng.uniform(-720, 720), rng.uniform(0, 0.1))
            assert leader.speed == pytest.approx(speed)

    def test_turn_while_stationary(self):
        leader = make_leader(0, 0)
        leader.turn(360, 0.25)
        assert leader.speed == 0

    def test_accelerate_after_turn_uses_live_heading(self):
        leader = make_leader(100, 0)
        leader.turn(90, 1.0)
        leader.accelerate(100, 1.0)
        assert leader.heading == pytest.approx(90)
        assert leader.speed == pytest.approx(200)
