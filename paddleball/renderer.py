import pygame

from paddleball.config import (
    BALL_COLOR,
    BALL_SIZE,
    BG_COLOR,
    FONT_NAME,
    PADDLE_COLOR,
    PADDLE_H,
    PADDLE_W,
    TEXT_COLOR,
)
from paddleball.overlay import game_over_lines, score_line


class Renderer:
    """Draws a snapshot into a reused back buffer, then presents it in one blit."""

    def __init__(self, display, arena):
        self.display = display
        self.arena = arena
        self._buffer = None
        self._fonts = {}

    @property
    def buffer(self) -> pygame.Surface:
        if self._buffer is None:
            self._buffer = self.display.create_buffer((self.arena.width, self.arena.height))
        return self._buffer

    def font(self, size: int, bold: bool = False) -> pygame.font.Font:
        key = (size, bold)
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[key] = pygame.font.SysFont(FONT_NAME, size, bold=bold)
        return self._fonts[key]

    def draw_text(self, surface, line):
        font = self.font(line.size, line.bold)
        surf = font.render(line.text, True, TEXT_COLOR)
        # Baseline anchor: lift the glyph box by the font's ascent.
        surface.blit(surf, (line.x, line.y - font.get_ascent()))

    def draw(self, snap):
        surface = self.buffer
        surface.fill(BG_COLOR)

        paddle = pygame.Rect(snap.paddle_x, self.arena.paddle_y, PADDLE_W, PADDLE_H)
        pygame.draw.rect(surface, PADDLE_COLOR, paddle)
        pygame.draw.ellipse(surface, BALL_COLOR, pygame.Rect(snap.ball_x, snap.ball_y, BALL_SIZE, BALL_SIZE))

        self.draw_text(surface, score_line(snap.score))
        if snap.game_over:
            for line in game_over_lines(self.arena, snap.score):
                self.draw_text(surface, line)

        self.display.present(surface)
