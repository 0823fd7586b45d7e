"""
Flock-level statistics computed from position and velocity arrays.
"""

from typing import Dict

import numpy as np


def average_speed(velocities: np.ndarray) -> float:
    """Mean speed over all boids (0 for an empty flock)."""
    if len(velocities) == 0:
        return 0.0
    return float(np.linalg.norm(velocities, axis=1).mean())


def cohesion(positions: np.ndarray) -> float:
    """
    Mean distance from each boid to the flock centroid.
    
    Lower values mean a tighter flock. Wrap-around is ignored, so a flock
    straddling an edge reads as spread out.
    """
    if len(positions) == 0:
        return 0.0
    centroid = positions.mean(axis=0)
    return float(np.linalg.norm(positions - centroid, axis=1).mean())


def polarization(velocities: np.ndarray) -> float:
    """
    Norm of the mean heading unit vector, between 0 (disordered) and 1 (aligned).
    
    Stationary boids contribute a zero vector.
    """
    if len(velocities) == 0:
        return 0.0
    speeds = np.linalg.norm(velocities, axis=1, keepdims=True)
    units = np.divide(velocities, speeds, out=np.zeros_like(velocities), where=speeds > 0)
    return float(np.linalg.norm(units.mean(axis=0)))


def neighbor_counts(positions: np.ndarray, radius: float) -> np.ndarray:
    """
    Number of neighbors strictly closer than radius for each boid.
    
    Uses the same predicate as the flock's neighbor scan: a boid is never
    its own neighbor, even when two boids share a position.
    """
    positions = np.asarray(positions, dtype=np.float32)
    diff = positions[:, np.newaxis, :] - positions[np.newaxis, :, :]
    dist = np.sqrt((diff * diff).sum(axis=2))
    within = dist < np.float32(radius)
    np.fill_diagonal(within, False)
    return within.sum(axis=1)


def average_neighbors(positions: np.ndarray, radius: float) -> float:
    if len(positions) == 0:
        return 0.0
    return float(neighbor_counts(positions, radius).mean())


def flock_statistics(flock) -> Dict[str, float]:
    """
    Collect all metrics for the current state of a flock.
    
    Args:
        flock: Flock instance
        
    Returns:
        Dictionary of metric name to value
    """
    positions = flock.positions()
    velocities = flock.velocities()
    return {
        "boid_count": len(flock),
        "avg_speed": average_speed(velocities),
        "cohesion": cohesion(positions),
        "polarization": polarization(velocities),
        "avg_neighbors": average_neighbors(positions, flock.config.perceptionRadius),
    }
