"""Game session: wires input, simulation and rendering into one tick loop."""

import logging

import pygame

from paddleball.input_adapter import Command, InputAdapter
from paddleball.renderer import Renderer
from paddleball.simulation import Arena, new_game, tick

logger = logging.getLogger(__name__)

# Wheel motion arrives as buttons 4 and 5 in pygame.
CLICK_BUTTONS = (1, 2, 3)


class Game:
    def __init__(self, display, driver, renderer=None):
        self.display = display
        self.driver = driver
        self.arena = Arena(*display.size)
        self.renderer = renderer or Renderer(display, self.arena)
        self.input = InputAdapter(self.arena)
        self.snapshot = new_game(self.arena)
        self.input.handoff.publish(self.snapshot.paddle_x)
        self.input.observe(self.snapshot)
        self.running = True

    # ----- Events -----
    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.input.request_quit()
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.input.request_quit()
        elif event.type == pygame.MOUSEMOTION:
            self.input.on_pointer_move(event.pos[0])
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button in CLICK_BUTTONS:
            self.input.on_click(event.pos)

    def pump_events(self):
        for event in pygame.event.get():
            self.handle_event(event)

    # ----- State machine -----
    def reset(self):
        self.snapshot = new_game(self.arena, self.input.handoff.read())
        self.display.set_cursor_visible(False)
        logger.info("Game reset")

    def quit(self):
        self.running = False
        logger.info("Quit requested; final score %d", self.snapshot.score)

    def apply(self, command):
        if command is Command.RESET:
            self.reset()
        elif command is Command.QUIT:
            self.quit()

    # ----- Loop -----
    def step(self, elapsed_ms=0):
        """One tick: commands, physics, cursor, render. Returns False once quit."""
        for command in self.input.drain():
            self.apply(command)
            if not self.running:
                return False

        before = self.snapshot
        self.snapshot = tick(self.arena, before, self.input.handoff.read())
        if self.snapshot.game_over and not before.game_over:
            self.display.set_cursor_visible(True)
            logger.info("Game over with score %d", self.snapshot.score)

        self.input.observe(self.snapshot)
        self.renderer.draw(self.snapshot)
        return True

    def _loop_step(self, elapsed_ms):
        self.pump_events()
        return self.step(elapsed_ms)

    def run(self):
        logger.info("Starting on a %dx%d arena", self.arena.width, self.arena.height)
        self.display.set_cursor_visible(False)
        self.driver.run(self._loop_step)
        return 0
