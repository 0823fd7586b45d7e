"""
Benchmark simulation for performance testing and data collection.
"""

import time
from typing import Dict, List, Optional, Any

import pygame

try:
    import numpy as np
    import cv2
    VIDEO_SUPPORT = True
except ImportError:
    VIDEO_SUPPORT = False

from ..core.flock import Flock
from ..core.config import FlockConfig
from ..analysis.metrics import flock_statistics
from .render import draw_flock, draw_stats


# Sample flock metrics every N frames
METRICS_TRACKING_INTERVAL = 10


class BenchmarkSimulation:
    """
    Headless flock simulation for measuring flock formation and tick cost.
    
    Runs without a window unless video recording is enabled, in which case
    frames are drawn to an offscreen pygame surface and written with OpenCV.
    """
    
    def __init__(self, config: FlockConfig, enable_video: bool = False,
                 video_filename: Optional[str] = None, video_fps: int = 30):
        """
        Initialize benchmark simulation.
        
        Args:
            config: Flock configuration
            enable_video: Whether to record video
            video_filename: Output video filename
            video_fps: Video frame rate
        """
        self.config = config
        width = int(config.width)
        height = int(config.height)
        
        # Video recording
        self.enable_video = enable_video and VIDEO_SUPPORT
        self.video_writer = None
        self.video_filename = video_filename
        self.frame_skip = max(1, int(1000 / config.updateIntervalMillis) // video_fps)
        self.screen = None
        
        if enable_video and not VIDEO_SUPPORT:
            print("Warning: numpy/cv2 not available. Video recording disabled.")
        
        if self.enable_video and self.video_filename:
            pygame.init()
            self.screen = pygame.Surface((width, height))
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.video_writer = cv2.VideoWriter(
                self.video_filename, fourcc, video_fps, (width, height)
            )
            print(f"  Recording video to: {self.video_filename}")
        
        self.flock = Flock.from_config(config)
        self.frame_count = 0
        self.start_time = time.time()
        
        self.stats = {
            "speed_sum": 0.0,
            "cohesion_sum": 0.0,
            "polarization_sum": 0.0,
            "neighbors_sum": 0.0,
            "samples": 0,
            "metrics_over_time": [],
        }
    
    def update(self) -> None:
        """Advance the flock and sample statistics."""
        self.flock.update()
        self.frame_count += 1
        
        if self.frame_count % METRICS_TRACKING_INTERVAL == 0:
            self._update_statistics()
    
    def _update_statistics(self) -> None:
        """Record a metrics sample for the current frame."""
        if len(self.flock) == 0:
            return
        
        sample = flock_statistics(self.flock)
        self.stats["speed_sum"] += sample["avg_speed"]
        self.stats["cohesion_sum"] += sample["cohesion"]
        self.stats["polarization_sum"] += sample["polarization"]
        self.stats["neighbors_sum"] += sample["avg_neighbors"]
        self.stats["samples"] += 1
        
        self.stats["metrics_over_time"].append({
            "frame": self.frame_count,
            "avg_speed": sample["avg_speed"],
            "cohesion": sample["cohesion"],
            "polarization": sample["polarization"],
            "avg_neighbors": sample["avg_neighbors"],
        })
    
    def run_benchmark(self, max_frames: int) -> Dict[str, Any]:
        """
        Run benchmark for specified number of frames.
        
        Args:
            max_frames: Maximum frames to simulate
            
        Returns:
            Results dictionary with all statistics
        """
        print(f"Running benchmark for {max_frames} frames...")
        
        while self.frame_count < max_frames:
            self.update()
            
            if self.video_writer:
                if self.frame_count % self.frame_skip == 0:
                    self._render_frame()
                    self._capture_frame()
            
            if self.frame_count % 1000 == 0:
                elapsed = time.time() - self.start_time
                progress = (self.frame_count / max_frames) * 100
                print(f"  Progress: {progress:.1f}% ({self.frame_count}/{max_frames} frames, "
                      f"{elapsed:.1f}s elapsed)")
        
        if self.video_writer:
            self.video_writer.release()
            print("  Video saved successfully!")
            pygame.quit()
        
        return self.get_results()
    
    def _render_frame(self) -> None:
        """Render frame for video capture."""
        self.screen.fill(self.config.backgroundColor)
        draw_flock(self.screen, self.flock.boids, self.config.boidSize, self.config.boidColor)
        
        texts = [
            f"Frame: {self.frame_count}",
            f"Boids: {len(self.flock)}",
        ]
        samples = self.stats["metrics_over_time"]
        if samples:
            texts.append(f"Cohesion: {samples[-1]['cohesion']:.1f}")
            texts.append(f"Polarization: {samples[-1]['polarization']:.2f}")
        draw_stats(self.screen, texts)
    
    def _capture_frame(self) -> None:
        """Capture frame to video."""
        if not self.video_writer or not VIDEO_SUPPORT:
            return
        
        frame = pygame.surfarray.array3d(self.screen)
        frame = np.transpose(frame, (1, 0, 2))
        frame = cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)
        self.video_writer.write(frame)
    
    def get_results(self) -> Dict[str, Any]:
        """
        Get benchmark results.
        
        Returns:
            Dictionary containing all statistics and derived metrics
        """
        elapsed = time.time() - self.start_time
        samples = self.stats["samples"]
        history: List[Dict] = self.stats["metrics_over_time"]
        
        def mean(key: str) -> float:
            return self.stats[key] / samples if samples > 0 else 0
        
        ticks_per_second = 0
        if elapsed > 0:
            ticks_per_second = self.frame_count / elapsed
        
        return {
            "frames": self.frame_count,
            "boid_count": len(self.flock),
            "elapsed_time_seconds": elapsed,
            "ticks_per_second": ticks_per_second,
            "avg_speed": mean("speed_sum"),
            "avg_cohesion": mean("cohesion_sum"),
            "avg_polarization": mean("polarization_sum"),
            "avg_neighbors": mean("neighbors_sum"),
            "final_cohesion": history[-1]["cohesion"] if history else None,
            "final_polarization": history[-1]["polarization"] if history else None,
            "metrics_over_time": history,
        }
