"""
Interactive simulation with pygame GUI.
"""

import pygame
import json
import sys
from dataclasses import replace
from typing import Optional

from ..core.flock import Flock
from ..core.config import FlockConfig, DEFAULT_CONFIG
from ..analysis.metrics import flock_statistics
from .render import draw_flock, draw_stats


class Simulation:
    """
    Interactive flocking simulation with pygame visualization.
    
    Ticks the flock on a fixed interval and supports keyboard controls for
    pausing, respawning and viewing statistics.
    """
    
    def __init__(self, config: Optional[FlockConfig] = None):
        """
        Initialize the simulation.
        
        Args:
            config: Flock configuration (uses defaults if None)
        """
        pygame.init()
        
        self.config = config if config else replace(DEFAULT_CONFIG)
        
        width = int(self.config.width)
        height = int(self.config.height)
        
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("flocking-mvp")
        self.clock = pygame.time.Clock()
        
        self.flock = Flock.from_config(self.config)
        
        self.running = True
        self.paused = False
        
        self.stats = {
            "avg_speed": 0,
            "cohesion": 0,
            "polarization": 0,
            "avg_neighbors": 0,
        }
    
    @property
    def fps_target(self) -> float:
        return 1000 / self.config.updateIntervalMillis
    
    def update(self) -> None:
        """Update simulation state for one frame."""
        if self.paused:
            return
        
        self.flock.update()
        self._update_statistics()
    
    def _update_statistics(self) -> None:
        """Update simulation statistics."""
        if not self.config.showStats or len(self.flock) == 0:
            return
        
        self.stats.update(flock_statistics(self.flock))
    
    def reset(self) -> None:
        """Respawn the flock with fresh random positions."""
        self.flock = Flock.from_config(self.config)
        print(f"Flock respawned with {len(self.flock)} boids")
    
    def draw(self) -> None:
        """Render the current frame."""
        self.screen.fill(self.config.backgroundColor)
        
        draw_flock(self.screen, self.flock.boids, self.config.boidSize, self.config.boidColor)
        
        if self.config.showStats:
            self._draw_stats()
        
        pygame.display.flip()
    
    def _draw_stats(self) -> None:
        """Draw statistics overlay."""
        stats_text = [
            f"FPS: {int(self.clock.get_fps())}",
            f"Boids: {len(self.flock)}",
            f"Tick: {self.flock.tick_count}",
            f"Avg Speed: {self.stats['avg_speed']:.2f}",
            f"Cohesion: {self.stats['cohesion']:.1f}",
            f"Polarization: {self.stats['polarization']:.2f}",
        ]
        
        if self.paused:
            stats_text.append("PAUSED")
        
        draw_stats(self.screen, stats_text)
    
    def save_report(self) -> None:
        """Save current statistics to a JSON file."""
        report = {
            "tick_count": self.flock.tick_count,
            "boid_count": len(self.flock),
            "statistics": self.stats,
            "config": self.config.to_dict()
        }
        
        try:
            with open(self.config.reportOutputFile, 'w') as f:
                json.dump(report, f, indent=4)
            print(f"Report saved to {self.config.reportOutputFile}")
        except OSError as e:
            print(f"Error saving report: {e}")
    
    def run(self) -> None:
        """Run the simulation main loop."""
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN:
                    self._handle_keydown(event.key)
            
            self.update()
            self.draw()
            self.clock.tick(self.fps_target)
        
        pygame.quit()
        sys.exit()
    
    def _handle_keydown(self, key: int) -> None:
        """Handle keyboard input."""
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_p:
            self.paused = not self.paused
            print(f"Simulation: {'PAUSED' if self.paused else 'RUNNING'}")
        elif key == pygame.K_r:
            self.reset()
        elif key == pygame.K_s:
            self.config.showStats = not self.config.showStats
        elif key == pygame.K_SPACE:
            self.save_report()
