"""
Boids flocking simulation: separation, alignment and cohesion on a toroidal plane.
"""

from .core import Flock, FlockConfig, Vector2

__all__ = ['Flock', 'FlockConfig', 'Vector2']
