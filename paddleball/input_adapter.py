"""Pointer and click handling.

Events arrive on the event-delivery path; the tick loop reads one paddle x per
tick from the handoff and drains queued commands at the top of the tick.
"""

import enum
import logging
import queue
import threading

from paddleball.config import PADDLE_W
from paddleball.overlay import quit_hitbox

logger = logging.getLogger(__name__)


class Command(enum.Enum):
    RESET = "reset"
    QUIT = "quit"


class PaddleHandoff:
    """Latest paddle x, written by the input side and read once per tick."""

    def __init__(self, x: int = 0):
        self._lock = threading.Lock()
        self._x = x

    def publish(self, x: int):
        with self._lock:
            self._x = x

    def read(self) -> int:
        with self._lock:
            return self._x


class InputAdapter:
    def __init__(self, arena, handoff=None):
        self.arena = arena
        self.handoff = handoff or PaddleHandoff()
        self.commands = queue.SimpleQueue()
        self._snapshot = None

    def paddle_x_for(self, pointer_x: int) -> int:
        return self.arena.clamp_paddle(int(pointer_x) - PADDLE_W // 2)

    def on_pointer_move(self, pointer_x: int) -> int:
        x = self.paddle_x_for(pointer_x)
        self.handoff.publish(x)
        return x

    def observe(self, snapshot):
        """Record the snapshot the next click is resolved against."""
        self._snapshot = snapshot

    def resolve_click(self, pos=None):
        snap = self._snapshot
        if snap is None or not snap.game_over:
            return None
        if pos is not None and snap.show_quit_prompt and quit_hitbox(self.arena).collidepoint(pos):
            return Command.QUIT
        if snap.show_reset_prompt:
            return Command.RESET
        if snap.show_quit_prompt:
            return Command.QUIT
        return None

    def on_click(self, pos=None):
        command = self.resolve_click(pos)
        if command is not None:
            logger.debug("Click at %s -> %s", pos, command.value)
            self.commands.put(command)
        return command

    def request_quit(self):
        self.commands.put(Command.QUIT)

    def drain(self):
        pending = []
        while True:
            try:
                pending.append(self.commands.get_nowait())
            except queue.Empty:
                return pending
