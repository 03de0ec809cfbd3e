"""Text layout for the HUD and the game-over overlay.

Positions are text baselines. The renderer draws these lines and the input
adapter hit-tests clicks against the quit prompt, so both read them from here.
"""

from dataclasses import dataclass

import pygame

from paddleball.config import (
    HEADLINE_FONT_SIZE,
    PROMPT_FONT_SIZE,
    SCORE_ANCHOR,
    SCORE_FONT_SIZE,
)

RESET_PROMPT = "Click to Reset"
QUIT_PROMPT = "Click to Quit"

# Baseline offsets from the arena centre
HEADLINE_OFFSET = (-90, -60)
FINAL_SCORE_OFFSET = (-70, -20)
RESET_OFFSET = (-70, 20)
QUIT_OFFSET = (-70, 60)

QUIT_HITBOX_W = 160


@dataclass(frozen=True)
class TextLine:
    key: str
    text: str
    size: int
    x: int
    y: int
    bold: bool = False


def score_line(score: int) -> TextLine:
    x, y = SCORE_ANCHOR
    return TextLine("score", f"Score: {score}", SCORE_FONT_SIZE, x, y, bold=True)


def _at(center, offset):
    return center[0] + offset[0], center[1] + offset[1]


def game_over_lines(arena, score: int):
    c = arena.center
    return [
        TextLine("headline", "Game Over!", HEADLINE_FONT_SIZE, *_at(c, HEADLINE_OFFSET), bold=True),
        TextLine("final_score", f"Your Score: {score}", PROMPT_FONT_SIZE, *_at(c, FINAL_SCORE_OFFSET)),
        TextLine("reset", RESET_PROMPT, PROMPT_FONT_SIZE, *_at(c, RESET_OFFSET)),
        TextLine("quit", QUIT_PROMPT, PROMPT_FONT_SIZE, *_at(c, QUIT_OFFSET)),
    ]


def quit_hitbox(arena) -> pygame.Rect:
    """Area around the "Click to Quit" line, from cap height to a little below the baseline."""
    x, y = _at(arena.center, QUIT_OFFSET)
    return pygame.Rect(x, y - PROMPT_FONT_SIZE, QUIT_HITBOX_W, PROMPT_FONT_SIZE + 6)
