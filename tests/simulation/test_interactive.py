import json
from dataclasses import replace

import pygame
import pytest

from flocking.core.config import DEFAULT_CONFIG, FlockConfig
from flocking.simulation.interactive import Simulation


@pytest.fixture
def simulation(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    config = FlockConfig(width=200.0, height=150.0, boidCount=8, seed=4,
                         reportOutputFile=str(tmp_path / "report.json"))
    sim = Simulation(config)
    yield sim
    pygame.quit()


def test_update_ticks_flock_and_stats(simulation):
    simulation.update()
    simulation.draw()

    assert simulation.flock.tick_count == 1
    assert simulation.stats["boid_count"] == 8


def test_pause_stops_ticks(simulation):
    simulation._handle_keydown(pygame.K_p)
    simulation.update()

    assert simulation.paused
    assert simulation.flock.tick_count == 0


def test_reset_respawns_flock(simulation):
    simulation.update()
    simulation._handle_keydown(pygame.K_r)

    assert simulation.flock.tick_count == 0
    assert len(simulation.flock) == 8


def test_escape_stops_loop(simulation):
    simulation._handle_keydown(pygame.K_ESCAPE)
    assert not simulation.running


def test_save_report(simulation):
    simulation.update()
    simulation._handle_keydown(pygame.K_SPACE)

    with open(simulation.config.reportOutputFile) as f:
        report = json.load(f)
    assert report["tick_count"] == 1
    assert report["config"]["boidCount"] == 8


def test_fps_target_follows_update_interval(simulation):
    simulation.config = replace(simulation.config, updateIntervalMillis=20)
    assert simulation.fps_target == 50


def test_default_config_is_not_shared(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    sim = Simulation()
    try:
        sim._handle_keydown(pygame.K_s)

        assert sim.config.showStats is False
        assert DEFAULT_CONFIG.showStats is True
    finally:
        pygame.quit()
