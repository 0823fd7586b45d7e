from flocking.core.config import BENCHMARK_CONFIG, DEFAULT_CONFIG, FlockConfig


def test_defaults_match_flock_parameters():
    assert DEFAULT_CONFIG.width == 800.0
    assert DEFAULT_CONFIG.height == 600.0
    assert DEFAULT_CONFIG.maxSpeed == 3.0
    assert DEFAULT_CONFIG.perceptionRadius == 50.0
    assert DEFAULT_CONFIG.updateIntervalMillis == 16
    assert BENCHMARK_CONFIG.seed is not None


def test_from_dict_ignores_unknown_keys():
    config = FlockConfig.from_dict({"boidCount": 12, "boidColor": [1, 2, 3], "trailLength": 4})

    assert config.boidCount == 12
    assert config.boidColor == [1, 2, 3]
    assert not hasattr(config, "trailLength")


def test_to_dict_feeds_from_dict():
    config = FlockConfig(width=320.0, cohesionWeight=0.25, seed=5)
    assert FlockConfig.from_dict(config.to_dict()) == config
