"""
Interactive simulation with pygame GUI.
"""

import logging
import sys
from typing import Optional

import pygame

from ..core.config import SimulationConfig
from .engine import SimulationEngine
from .intents import intent_for_key
from .rendering import Renderer

logger = logging.getLogger(__name__)

# pygame key codes -> key names understood by intent_for_key
KEY_NAMES = {
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_EQUALS: "=",
    pygame.K_PLUS: "+",
    pygame.K_KP_PLUS: "+",
    pygame.K_MINUS: "-",
    pygame.K_KP_MINUS: "-",
    pygame.K_p: "p",
}


class Simulation:
    """
    Interactive leader + flock simulation with pygame visualization.

    Arrow keys steer the leader, +/- resize the flock, P pauses, F switches
    the flock update mode and SPACE saves the current state.
    """

    def __init__(self, config: Optional[SimulationConfig] = None, seed: Optional[int] = None):
        """
        Initialize the simulation.

        Args:
            config: Simulation configuration (uses defaults if None)
            seed: Seed for the obstacle field and boid placement
        """
        pygame.init()

        self.engine = SimulationEngine(config, seed=seed)
        self.config = self.engine.config

        width = self.config.screenWidth
        height = self.config.screenHeight

        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Follow the Leader")
        self.clock = pygame.time.Clock()
        self.renderer = Renderer(self.screen, self.config)

        self.engine.subscribe(lambda count: print(f"Boids: {count}"))
        self.show_stats = True
        self.running = True

    def handle_key(self, key: int) -> None:
        """Handle keyboard input."""
        if key == pygame.K_ESCAPE:
            self.running = False
        elif key == pygame.K_SPACE:
            self.save_state()
        elif key == pygame.K_f:
            mode = "sequential" if self.config.flockMode == "snapshot" else "snapshot"
            self.engine.set_flock_mode(mode)
            self.config = self.engine.config
            print(f"Flock mode: {mode.upper()}")
        elif key == pygame.K_h:
            self.show_stats = not self.show_stats
        else:
            name = KEY_NAMES.get(key)
            intent = intent_for_key(name, self.config) if name else None
            if intent is not None:
                self.engine.submit(intent)

    def _overlay(self) -> list:
        if not self.show_stats:
            return []
        stats = self.engine.stats()
        lines = [
            f"FPS: {int(self.clock.get_fps())}",
            f"Boids: {stats['boid_count']}",
            f"Leader speed: {stats['leader_speed']:.0f}",
            f"Avg boid speed: {stats['avg_speed']:.0f}",
            f"Cohesion: {stats['flock_cohesion']:.1f}",
            f"Mode: {self.config.flockMode}",
        ]
        if self.engine.paused:
            lines.append("PAUSED")
        return lines

    def save_state(self) -> None:
        try:
            path = self.engine.save_state()
            print(f"State saved to {path}")
        except OSError as e:
            logger.error("Could not save state: %s", e)
            print(f"Error saving state: {e}")

    def run(self) -> None:
        """Run the simulation main loop."""
        # Prime the clock so the first frame measures from here
        self.clock.tick()

        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN:
                    self.handle_key(event.key)

            dt = self.clock.tick(self.config.fpsTarget) / 1000.0
            self.engine.step(dt)
            self.renderer.draw(self.engine.snapshot(), self._overlay())
            pygame.display.flip()

        pygame.quit()
        sys.exit()
