"""
Headless simulation for batch runs and data collection.
"""

import logging
import time
from typing import Any, Dict, Optional

import pygame

try:
    import numpy as np
    import cv2
    VIDEO_SUPPORT = True
except ImportError:
    VIDEO_SUPPORT = False

from ..core.config import SimulationConfig
from .engine import SimulationEngine
from .rendering import Renderer

logger = logging.getLogger(__name__)

STATS_TRACKING_INTERVAL = 10
DEFAULT_DT = 1.0 / 60.0


class HeadlessSimulation:
    """
    Runs the engine with a fixed frame duration and no window.

    Collects per-frame statistics and can record the run to a video file
    when OpenCV is installed.
    """

    def __init__(self, config: Optional[SimulationConfig] = None, seed: Optional[int] = None,
                 dt: float = DEFAULT_DT, enable_video: bool = False,
                 video_filename: Optional[str] = None, video_fps: int = 30):
        """
        Initialize the headless simulation.

        Args:
            config: Simulation configuration (uses defaults if None)
            seed: Seed for the obstacle field and boid placement
            dt: Fixed frame duration in seconds
            enable_video: Whether to record video
            video_filename: Output video filename
            video_fps: Video frame rate
        """
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")

        self.engine = SimulationEngine(config, seed=seed)
        self.config = self.engine.config
        self.seed = seed
        self.dt = dt

        self.enable_video = enable_video and VIDEO_SUPPORT and bool(video_filename)
        if enable_video and not VIDEO_SUPPORT:
            logger.warning("opencv-python is not installed; video recording disabled")

        self.video_writer = None
        self.video_filename = video_filename
        self.frame_skip = max(1, round(1.0 / (dt * video_fps))) if dt > 0 else 1
        self.renderer = None

        if self.enable_video:
            pygame.init()
            width, height = self.config.screenWidth, self.config.screenHeight
            self.renderer = Renderer(pygame.Surface((width, height)), self.config)
            fourcc = cv2.VideoWriter_fourcc(*'mp4v')
            self.video_writer = cv2.VideoWriter(self.video_filename, fourcc, video_fps, (width, height))
            print(f"  Recording video to: {self.video_filename}")

        self.start_time = time.time()
        self.history = []

    @property
    def frame_count(self) -> int:
        return self.engine.state.frame

    def update(self) -> None:
        """Advance one frame and sample statistics."""
        self.engine.step(self.dt)
        if self.frame_count % STATS_TRACKING_INTERVAL == 0:
            self.history.append(self.engine.stats())

    def run(self, max_frames: int) -> Dict[str, Any]:
        """
        Run for a given number of frames.

        Args:
            max_frames: Number of frames to simulate

        Returns:
            Results dictionary with final statistics and the sampled time series
        """
        print(f"Running {max_frames} frames ({self.config.flockMode} mode, seed={self.seed})...")

        try:
            while self.frame_count < max_frames:
                self.update()

                if self.video_writer is not None and self.frame_count % self.frame_skip == 0:
                    self._capture_frame()

                if self.frame_count % 1000 == 0:
                    elapsed = time.time() - self.start_time
                    progress = (self.frame_count / max_frames) * 100
                    print(f"  Progress: {progress:.1f}% ({self.frame_count}/{max_frames} frames, "
                          f"{elapsed:.1f}s elapsed)")
        finally:
            if self.video_writer is not None:
                self.video_writer.release()
                print("  Video saved successfully!")

        return self.get_results()

    def _capture_frame(self) -> None:
        """Render the current view and append it to the video."""
        stats = self.engine.stats()
        self.renderer.draw(self.engine.snapshot(), [
            f"Frame: {self.frame_count}",
            f"Boids: {stats['boid_count']}",
            f"Cohesion: {stats['flock_cohesion']:.1f}",
        ])
        frame = pygame.surfarray.array3d(self.renderer.surface)
        frame = np.transpose(frame, (1, 0, 2))
        frame = cv2.cvtColor(frame, cv2.COLOR_RGB2BGR)
        self.video_writer.write(frame)

    def get_results(self) -> Dict[str, Any]:
        """
        Collect the results of the run.

        Returns:
            Dictionary with summary metrics and the sampled time series
        """
        final = self.engine.stats()
        samples = self.history or [final]

        return {
            "seed": self.seed,
            "flock_mode": self.config.flockMode,
            "frames": self.frame_count,
            "dt": self.dt,
            "simulated_seconds": self.engine.state.clock.elapsed,
            "elapsed_time_seconds": time.time() - self.start_time,
            "obstacle_count": len(self.engine.obstacles),
            "final_boid_count": final["boid_count"],
            "final_cohesion": final["flock_cohesion"],
            "final_avg_speed": final["avg_speed"],
            "avg_cohesion": sum(s["flock_cohesion"] for s in samples) / len(samples),
            "avg_speed": sum(s["avg_speed"] for s in samples) / len(samples),
            "avg_leader_distance": sum(s["leader_distance"] for s in samples) / len(samples),
            "peak_speed": max(s["max_speed"] for s in samples),
            "obstacle_intrusions": sum(s["agents_in_obstacles"] for s in samples),
            "stats_over_time": self.history,
        }
