"""Tests for SimulationConfig defaults, conversion and validation."""

import pytest

from leaderflock.core.config import (
    DEFAULT_CONFIG, HEADLESS_CONFIG, ConfigError, SimulationConfig,
)


class TestDefaults:

    def test_default_constants(self):
        config = SimulationConfig()
        assert (config.screenWidth, config.screenHeight) == (800, 600)
        assert (config.leaderVmin, config.leaderVmax) == (100, 800)
        assert (config.cohesionRadius, config.alignmentRadius, config.separationRadius) == (300, 300, 30)
        assert (config.cohesionWeight, config.alignmentWeight, config.separationWeight) == (4, 2, 10)
        assert config.flockMode == "snapshot"
        assert config.boidMaxSpeed is None

    def test_presets_are_valid(self):
        DEFAULT_CONFIG.validate()
        HEADLESS_CONFIG.validate()

    def test_neighbor_radius(self):
        assert SimulationConfig(separationRadius=500).neighborRadius == 500


class TestConversion:

    def test_dict_round_trip(self):
        config = SimulationConfig(boidCount=12, flockMode="sequential", boidMaxSpeed=250.0)
        assert SimulationConfig.from_dict(config.to_dict()) == config

    def test_unknown_keys_ignored(self):
        config = SimulationConfig.from_dict({"boidCount": 3, "windStrength": 5})
        assert config.boidCount == 3

    def test_list_fields_and_properties(self):
        config = SimulationConfig.from_dict({"leaderStart": [5.0, 6.0], "neighborRadius": 10})
        assert config.leaderStart == [5.0, 6.0]
        assert config.neighborRadius == 300

    def test_lists_are_copied(self):
        config = SimulationConfig()
        data = config.to_dict()
        data["boidColor"][0] = 0
        assert config.boidColor[0] == 230


class TestValidation:

    @pytest.mark.parametrize("overrides", [
        {"screenWidth": 0},
        {"screenHeight": -5},
        {"screenWidth": 200},
        {"boidCount": -1},
        {"leaderVmin": 900},
        {"boidVmin": 400},
        {"boidMaxSpeed": 0},
        {"minObstacles": 8},
        {"minObstacleRadius": 0},
        {"separationWeight": -1},
        {"flockMode": "parallel"},
    ])
    def test_rejected(self, overrides):
        with pytest.raises(ConfigError):
            SimulationConfig(**overrides).validate()

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            SimulationConfig(screenWidth=0).validate()

    def test_validate_returns_self(self):
        config = SimulationConfig()
        assert config.validate() is config
