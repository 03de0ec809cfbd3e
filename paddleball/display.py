"""pygame window: surface, back-buffer allocation, presentation and cursor."""

import logging

import pygame

from paddleball.config import FALLBACK_SIZE, TITLE

logger = logging.getLogger(__name__)


class DisplayError(RuntimeError):
    """The display surface could not be acquired."""


class PygameDisplay:
    def __init__(self, surface: pygame.Surface):
        self.surface = surface

    @classmethod
    def open(cls, fullscreen=True, size=None, title=TITLE):
        """Create the window. Falls back to a plain window if full screen fails."""
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise DisplayError(f"cannot initialise display: {exc}") from exc
        pygame.display.set_caption(title)

        surface = None
        if fullscreen:
            try:
                surface = pygame.display.set_mode(size or (0, 0), pygame.FULLSCREEN)
            except pygame.error as exc:
                logger.warning("Full screen unavailable (%s); using a window", exc)
        if surface is None:
            try:
                surface = pygame.display.set_mode(size or FALLBACK_SIZE)
            except pygame.error as exc:
                raise DisplayError(f"cannot open window: {exc}") from exc

        logger.info("Display ready: %dx%d%s", *surface.get_size(),
                    " (full screen)" if fullscreen and surface.get_flags() & pygame.FULLSCREEN else "")
        return cls(surface)

    @property
    def size(self):
        return self.surface.get_size()

    def create_buffer(self, size) -> pygame.Surface:
        return pygame.Surface(size).convert(self.surface)

    def present(self, buffer: pygame.Surface):
        self.surface.blit(buffer, (0, 0))
        pygame.display.flip()

    def set_cursor_visible(self, visible: bool):
        pygame.mouse.set_visible(visible)
