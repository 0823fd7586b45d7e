"""
Boid agent class implementing the three flocking rules.
"""

from typing import List, Tuple

import numpy as np

from .base import Agent
from ..vector import Vector2, ZERO

# (neighbor, distance) pairs found by the flock's neighbor scan
Neighbors = List[Tuple["Boid", np.float32]]


class Boid(Agent):
    """
    A boid that exhibits flocking behavior.
    
    Implements Reynolds' boid rules:
    - Separation: Avoid crowding neighbors
    - Alignment: Steer toward average heading of neighbors
    - Cohesion: Steer toward average position of neighbors
    
    The rules only read the neighbors they are given; applying the
    resulting forces is left to the caller.
    """
    
    def __init__(self, x: float, y: float, vx: float, vy: float, config: dict):
        super().__init__(x, y, vx, vy, config)
        self.separation_weight = np.float32(config["separationWeight"])
        self.alignment_weight = np.float32(config["alignmentWeight"])
        self.cohesion_weight = np.float32(config["cohesionWeight"])
    
    def flock(self, neighbors: Neighbors) -> Tuple[Vector2, Vector2, Vector2]:
        """
        Calculate the weighted flocking forces for this boid.
        
        Args:
            neighbors: Boids within perception range, with their distances
            
        Returns:
            Tuple of (separation, alignment, cohesion) forces
        """
        sep = self.separation(neighbors)
        ali = self.alignment(neighbors)
        coh = self.cohesion(neighbors)
        return (
            sep * self.separation_weight,
            ali * self.alignment_weight,
            coh * self.cohesion_weight,
        )
    
    def separation(self, neighbors: Neighbors) -> Vector2:
        """
        Calculate separation steering to avoid crowding neighbors.
        
        Args:
            neighbors: Boids within perception range, with their distances
            
        Returns:
            Separation steering force
        """
        steering = ZERO
        
        for other, dist in neighbors:
            diff = (self.position - other.position).normalize()
            steering = steering + diff / dist  # Weight by distance
        
        if neighbors:
            steering = steering / len(neighbors)
        
        if not steering.is_zero():
            steering = self.steering(steering.normalize() * self.max_speed)
        return steering
    
    def alignment(self, neighbors: Neighbors) -> Vector2:
        """
        Calculate alignment steering toward average neighbor heading.
        
        Args:
            neighbors: Boids within perception range, with their distances
            
        Returns:
            Alignment steering force
        """
        if not neighbors:
            return ZERO
        
        total = ZERO
        for other, _ in neighbors:
            total = total + other.velocity
        average = total / len(neighbors)
        return self.steering(average.normalize() * self.max_speed)
    
    def cohesion(self, neighbors: Neighbors) -> Vector2:
        """
        Calculate cohesion steering toward average neighbor position.
        
        Args:
            neighbors: Boids within perception range, with their distances
            
        Returns:
            Cohesion steering force
        """
        if not neighbors:
            return ZERO
        
        center = ZERO
        for other, _ in neighbors:
            center = center + other.position
        return self.seek(center / len(neighbors))
    
    def seek(self, target: Vector2) -> Vector2:
        """Steer toward a target position at full speed."""
        desired = (target - self.position).normalize() * self.max_speed
        return self.steering(desired)
