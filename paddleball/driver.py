"""Fixed-tick drivers.

A driver calls ``step(elapsed_ms)`` once per tick until ``step`` returns
False. Late ticks are not made up.
"""

import logging

import pygame

from paddleball.config import FPS

logger = logging.getLogger(__name__)


class TickDriver:
    def run(self, step):
        raise NotImplementedError


class ClockDriver(TickDriver):
    """Paces ticks with ``pygame.time.Clock``."""

    def __init__(self, fps: int = FPS):
        self.fps = fps
        self.ticks = 0

    def run(self, step):
        clock = pygame.time.Clock()
        elapsed = 0
        while step(elapsed):
            self.ticks += 1
            try:
                elapsed = clock.tick(self.fps)
            except InterruptedError:
                logger.debug("Tick wait interrupted after %d ticks", self.ticks)
                elapsed = 0


class FixedStepDriver(TickDriver):
    """Runs at most ``ticks`` ticks back to back, reporting a fixed elapsed time."""

    def __init__(self, ticks: int, fps: int = FPS):
        self.limit = ticks
        self.period_ms = 1000 // fps
        self.ticks = 0

    def run(self, step):
        while self.ticks < self.limit:
            self.ticks += 1
            if not step(self.period_ms):
                break
