"""
Base Agent class for all simulation entities.
"""

import numpy as np

from ..vector import Vector2, ZERO


class Agent:
    """
    Base class for all agents in the simulation.
    
    Holds position, velocity and the acceleration accumulated during a tick,
    and integrates them on a toroidal plane.
    """
    
    def __init__(self, x: float, y: float, vx: float, vy: float, config: dict):
        """
        Initialize an agent.
        
        Args:
            x: Initial x position
            y: Initial y position
            vx: Initial x velocity
            vy: Initial y velocity
            config: Configuration dictionary
        """
        self.position = Vector2(x, y)
        self.velocity = Vector2(vx, vy)
        self.acceleration = ZERO
        self.max_speed = np.float32(config["maxSpeed"])
        self.max_force = np.float32(config["maxForce"])
        self.width = np.float32(config["width"])
        self.height = np.float32(config["height"])
        self.config = config
    
    @property
    def heading(self) -> float:
        """Direction of travel in radians."""
        return self.velocity.heading()
    
    def apply_force(self, force: Vector2) -> None:
        """
        Apply a force to the agent's acceleration.
        
        Args:
            force: Force vector to apply
        """
        self.acceleration = self.acceleration + force
    
    def update(self) -> None:
        """Update the agent's position based on velocity and acceleration."""
        self.velocity = (self.velocity + self.acceleration).limit(self.max_speed)
        self.position = self.position + self.velocity
        self.acceleration = ZERO
        self.wrap()
    
    def wrap(self) -> None:
        """
        Wrap the position around the plane edges.
        
        Checks run one after another on the already-wrapped position, so a
        corner agent can wrap on both axes in the same tick.
        """
        if self.position.x < 0:
            self.position = Vector2(self.width, self.position.y)
        if self.position.y < 0:
            self.position = Vector2(self.position.x, self.height)
        if self.position.x > self.width:
            self.position = Vector2(0.0, self.position.y)
        if self.position.y > self.height:
            self.position = Vector2(self.position.x, 0.0)
    
    def steering(self, desired: Vector2) -> Vector2:
        """
        Calculate steering force toward a desired velocity.
        
        Args:
            desired: The desired velocity vector
            
        Returns:
            Steering force vector
        """
        return (desired - self.velocity).limit(self.max_force)
