"""
Configuration classes and defaults for the flocking simulation.
"""

from dataclasses import dataclass, field, fields
from typing import List, Optional


@dataclass
class FlockConfig:
    """Configuration for the flocking simulation."""
    
    # Plane dimensions
    width: float = 800.0
    height: float = 600.0
    
    # Population
    boidCount: int = 100
    seed: Optional[int] = None
    
    # Movement parameters
    maxSpeed: float = 3.0
    maxForce: float = 0.05
    
    # Rule weights
    separationWeight: float = 1.5
    alignmentWeight: float = 1.0
    cohesionWeight: float = 1.0
    
    # Neighbor detection
    perceptionRadius: float = 50.0
    
    # Pacing
    updateIntervalMillis: int = 16
    
    # Visualization
    boidSize: float = 6.0
    showStats: bool = True
    backgroundColor: List[int] = field(default_factory=lambda: [0, 0, 0])
    boidColor: List[int] = field(default_factory=lambda: [255, 255, 255])
    
    # Output
    reportOutputFile: str = "flock_report.json"
    
    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "boidCount": self.boidCount,
            "seed": self.seed,
            "maxSpeed": self.maxSpeed,
            "maxForce": self.maxForce,
            "separationWeight": self.separationWeight,
            "alignmentWeight": self.alignmentWeight,
            "cohesionWeight": self.cohesionWeight,
            "perceptionRadius": self.perceptionRadius,
            "updateIntervalMillis": self.updateIntervalMillis,
            "boidSize": self.boidSize,
            "showStats": self.showStats,
            "backgroundColor": self.backgroundColor,
            "boidColor": self.boidColor,
            "reportOutputFile": self.reportOutputFile,
        }
    
    @classmethod
    def from_dict(cls, data: dict) -> "FlockConfig":
        """Create config from dictionary."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


# Default configuration for the interactive window
DEFAULT_CONFIG = FlockConfig()

# Configuration for headless benchmarking (fixed seed for reproducible runs)
BENCHMARK_CONFIG = FlockConfig(
    seed=42,
    showStats=False,
)
