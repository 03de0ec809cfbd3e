"""
Fixed-tick physics and the Playing/GameOver state machine.

Everything here is a pure function of (arena, snapshot, paddle x): a tick takes
the current snapshot and returns the next one, so a sequence of ticks can be
replayed without a window or a clock.
"""

import enum
import logging
from dataclasses import dataclass, replace

from paddleball.config import (
    BALL_SIZE,
    BALL_START_VX,
    BALL_START_VY,
    PADDLE_BOTTOM_GAP,
    PADDLE_W,
)

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Arena:
    width: int
    height: int

    @property
    def paddle_y(self) -> int:
        return self.height - PADDLE_BOTTOM_GAP

    @property
    def center(self):
        return self.width // 2, self.height // 2

    def clamp_paddle(self, x: int) -> int:
        return max(0, min(self.width - PADDLE_W, x))


@dataclass(frozen=True)
class Snapshot:
    ball_x: int
    ball_y: int
    vx: int
    vy: int
    paddle_x: int = 0
    score: int = 0
    phase: Phase = Phase.PLAYING

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    # Presentation flags follow the phase; they are never stored separately.
    @property
    def show_reset_prompt(self) -> bool:
        return self.game_over

    @property
    def show_quit_prompt(self) -> bool:
        return self.game_over


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


def new_game(arena: Arena, paddle_x: int = 0) -> Snapshot:
    """Starting snapshot: ball centred, moving down-right, score 0."""
    cx, cy = arena.center
    return Snapshot(ball_x=cx, ball_y=cy, vx=BALL_START_VX, vy=BALL_START_VY,
                    paddle_x=arena.clamp_paddle(paddle_x))


def paddle_contact(arena: Arena, x: int, y: int, paddle_x: int) -> bool:
    # No check on the direction of travel: a ball rising through the paddle
    # band while horizontally aligned bounces too.
    return (y + BALL_SIZE >= arena.paddle_y
            and x + BALL_SIZE >= paddle_x
            and x <= paddle_x + PADDLE_W)


def tick(arena: Arena, snap: Snapshot, paddle_x: int) -> Snapshot:
    """Advance one tick. A GameOver snapshot is returned unchanged."""
    if snap.game_over:
        return snap

    x = snap.ball_x + snap.vx
    y = snap.ball_y + snap.vy
    vx, vy = snap.vx, snap.vy
    score = snap.score
    phase = snap.phase

    # Side walls. Position is not clamped, so a ball lodged past the edge
    # flips again on the following tick.
    if x <= 0 or x >= arena.width - BALL_SIZE:
        vx = -vx
    # Top wall only; the bottom is the loss line.
    if y <= 0:
        vy = -vy

    if paddle_contact(arena, x, y, paddle_x):
        vy = -vy
        y = arena.paddle_y - BALL_SIZE  # sit on the paddle to avoid sticking
        vx += _sign(vx)
        vy += _sign(vy)
        score += 1
        logger.debug("Paddle contact: score=%d v=(%d, %d)", score, vx, vy)

    if y >= arena.height:
        phase = Phase.GAME_OVER
        logger.debug("Ball lost at x=%d; final score %d", x, score)

    return replace(snap, ball_x=x, ball_y=y, vx=vx, vy=vy,
                   paddle_x=paddle_x, score=score, phase=phase)


def run_ticks(arena: Arena, snap: Snapshot, paddle_xs):
    """Feed one paddle position per tick and return every resulting snapshot."""
    history = []
    for px in paddle_xs:
        snap = tick(arena, snap, px)
        history.append(snap)
    return history
