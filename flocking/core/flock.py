"""
Flock simulator: owns the boid population and advances it one tick at a time.
"""

import random
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .agents.boid import Boid, Neighbors
from .config import FlockConfig
from .vector import Vector2


@dataclass(frozen=True)
class BoidState:
    """Read-only view of one boid, as handed to renderers."""
    position: Vector2
    velocity: Vector2

    @property
    def heading(self) -> float:
        return self.velocity.heading()


class Flock:
    """
    A fixed population of boids on a toroidal plane.
    
    Each call to update() is one tick: every boid's steering forces are
    computed from the population as it stood at the start of the tick, and
    only then are the boids moved. Neighbors are found by scanning the whole
    population, so a tick costs O(n^2).
    """
    
    def __init__(self, width: float, height: float, boids_count: int = 100,
                 max_speed: float = 3.0, max_force: float = 0.05,
                 separation_weight: float = 1.5, alignment_weight: float = 1.0,
                 cohesion_weight: float = 1.0, perception_radius: float = 50.0,
                 seed: Optional[int] = None):
        """
        Initialize the flock with randomly placed boids.
        
        Args:
            width: Width of the plane
            height: Height of the plane
            boids_count: Number of boids (0 gives an empty simulation)
            max_speed: Maximum boid speed
            max_force: Maximum steering force per rule
            separation_weight: Multiplier for the separation force
            alignment_weight: Multiplier for the alignment force
            cohesion_weight: Multiplier for the cohesion force
            perception_radius: Neighbor distance (exclusive)
            seed: Seed for the initial placement (random if None)
        """
        self.config = FlockConfig(
            width=width,
            height=height,
            boidCount=boids_count,
            maxSpeed=max_speed,
            maxForce=max_force,
            separationWeight=separation_weight,
            alignmentWeight=alignment_weight,
            cohesionWeight=cohesion_weight,
            perceptionRadius=perception_radius,
            seed=seed,
        )
        self.config_dict = self.config.to_dict()
        self.perception_radius = np.float32(perception_radius)
        self.rng = random.Random(seed)
        self.tick_count = 0
        
        self._boids: List[Boid] = []
        self._spawn_boids(boids_count)
    
    @classmethod
    def from_config(cls, config: FlockConfig) -> "Flock":
        """Create a flock from a FlockConfig."""
        return cls(
            config.width,
            config.height,
            boids_count=config.boidCount,
            max_speed=config.maxSpeed,
            max_force=config.maxForce,
            separation_weight=config.separationWeight,
            alignment_weight=config.alignmentWeight,
            cohesion_weight=config.cohesionWeight,
            perception_radius=config.perceptionRadius,
            seed=config.seed,
        )
    
    @classmethod
    def from_states(cls, config: FlockConfig,
                    states: Iterable[Tuple[Vector2, Vector2]]) -> "Flock":
        """
        Create a flock with explicitly placed boids.
        
        Args:
            config: Flock parameters (boidCount is ignored)
            states: (position, velocity) pair for each boid, in order
        """
        flock = cls.from_config(replace(config, boidCount=0))
        for position, velocity in states:
            flock._boids.append(
                Boid(position.x, position.y, velocity.x, velocity.y, flock.config_dict)
            )
        flock.config.boidCount = len(flock._boids)
        flock.config_dict["boidCount"] = len(flock._boids)
        return flock
    
    def _spawn_boids(self, count: int) -> None:
        """Spawn boids uniformly over the plane with velocities in [-1, 1)."""
        width = self.config.width
        height = self.config.height
        
        for _ in range(count):
            x = self._uniform(width)
            y = self._uniform(height)
            vx = self._uniform(2) - np.float32(1)
            vy = self._uniform(2) - np.float32(1)
            self._boids.append(Boid(x, y, vx, vy, self.config_dict))
    
    def _uniform(self, upper: float) -> np.float32:
        """Single-precision draw in [0, upper)."""
        upper = np.float32(upper)
        value = np.float32(self.rng.random()) * upper
        # float32 rounding can land on the bound itself
        if value >= upper:
            value = np.nextafter(upper, np.float32(0))
        return value
    
    def __len__(self) -> int:
        return len(self._boids)
    
    @property
    def boids(self) -> Tuple[BoidState, ...]:
        """Snapshot of every boid's position and velocity, in order."""
        return tuple(BoidState(b.position, b.velocity) for b in self._boids)
    
    def positions(self) -> np.ndarray:
        """Boid positions as an (n, 2) float32 array."""
        return np.array([[b.position.x, b.position.y] for b in self._boids],
                        dtype=np.float32).reshape(-1, 2)
    
    def velocities(self) -> np.ndarray:
        """Boid velocities as an (n, 2) float32 array."""
        return np.array([[b.velocity.x, b.velocity.y] for b in self._boids],
                        dtype=np.float32).reshape(-1, 2)
    
    def update(self) -> None:
        """Advance the simulation by one tick."""
        boids = self._boids
        
        # Forces first, so no boid sees another's state from this tick
        forces = [boid.flock(self.neighbors(index)) for index, boid in enumerate(boids)]
        
        for boid, (separation, alignment, cohesion) in zip(boids, forces):
            boid.apply_force(separation)
            boid.apply_force(alignment)
            boid.apply_force(cohesion)
            boid.update()
        
        self.tick_count += 1
    
    def neighbors(self, index: int) -> Neighbors:
        """
        Find every boid within the perception radius of the boid at index.
        
        Args:
            index: Position of the boid in the population
            
        Returns:
            List of (boid, distance) pairs, in population order
        """
        boids = self._boids
        position = boids[index].position
        found = []
        
        for other_index, other in enumerate(boids):
            if other_index == index:
                continue
            dist = position.dist(other.position)
            if dist < self.perception_radius:
                found.append((other, dist))
        
        return found
