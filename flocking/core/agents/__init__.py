"""
Agent classes for the flocking simulation.
"""

from .base import Agent
from .boid import Boid

__all__ = ['Agent', 'Boid']
