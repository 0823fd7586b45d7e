import numpy as np
import pytest

from flocking.analysis.metrics import (
    average_neighbors, average_speed, cohesion, flock_statistics,
    neighbor_counts, polarization,
)
from flocking.core.flock import Flock


def test_cohesion_is_mean_distance_to_centroid():
    positions = np.array([[0, 0], [10, 0], [0, 10], [10, 10]], dtype=np.float32)
    assert cohesion(positions) == pytest.approx(np.sqrt(50))


def test_polarization_bounds():
    aligned = np.array([[1, 0], [2, 0], [0.5, 0]], dtype=np.float32)
    opposed = np.array([[1, 0], [-1, 0]], dtype=np.float32)

    assert polarization(aligned) == pytest.approx(1.0)
    assert polarization(opposed) == pytest.approx(0.0)


def test_polarization_ignores_stationary_boids():
    velocities = np.array([[0, 0], [0, 3]], dtype=np.float32)
    assert polarization(velocities) == pytest.approx(0.5)


def test_average_speed():
    velocities = np.array([[3, 4], [0, 1]], dtype=np.float32)
    assert average_speed(velocities) == pytest.approx(3.0)


def test_neighbor_counts_use_strict_radius_and_skip_self():
    positions = np.array([[0, 0], [0, 0], [50, 0], [49, 0]], dtype=np.float32)
    counts = neighbor_counts(positions, 50)

    assert counts.tolist() == [2, 2, 1, 3]
    assert average_neighbors(positions, 50) == pytest.approx(2.0)


def test_empty_inputs():
    empty = np.zeros((0, 2), dtype=np.float32)
    assert average_speed(empty) == 0.0
    assert cohesion(empty) == 0.0
    assert polarization(empty) == 0.0
    assert average_neighbors(empty, 50) == 0.0


def test_neighbor_counts_match_flock_scan():
    flock = Flock(200, 200, boids_count=30, seed=8)
    counts = neighbor_counts(flock.positions(), flock.config.perceptionRadius)

    assert counts.tolist() == [len(flock.neighbors(i)) for i in range(len(flock))]


def test_flock_statistics_keys():
    stats = flock_statistics(Flock(200, 200, boids_count=10, seed=2))
    assert set(stats) == {"boid_count", "avg_speed", "cohesion", "polarization", "avg_neighbors"}
    assert stats["boid_count"] == 10
