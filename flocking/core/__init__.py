"""
Core module containing the vector type, configuration, agents and the flock.
"""

from .config import FlockConfig, DEFAULT_CONFIG, BENCHMARK_CONFIG
from .vector import Vector2, ZERO
from .flock import Flock, BoidState

__all__ = ['FlockConfig', 'DEFAULT_CONFIG', 'BENCHMARK_CONFIG', 'Vector2', 'ZERO', 'Flock', 'BoidState']
