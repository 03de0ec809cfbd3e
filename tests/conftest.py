import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from paddleball.simulation import Arena


@pytest.fixture(scope="session", autouse=True)
def pygame_session():
    pygame.init()
    pygame.display.set_mode((1, 1))
    yield
    pygame.quit()


class FakeDisplay:
    """Records what the game asks of the window without opening one."""

    def __init__(self, size=(800, 600)):
        self.size = size
        self.surface = pygame.Surface(size)
        self.buffers_created = 0
        self.presented = []
        self.cursor = []

    def create_buffer(self, size):
        self.buffers_created += 1
        return pygame.Surface(size)

    def present(self, buffer):
        self.surface.blit(buffer, (0, 0))
        self.presented.append(buffer)

    def set_cursor_visible(self, visible):
        self.cursor.append(visible)


@pytest.fixture
def arena():
    return Arena(800, 600)


@pytest.fixture
def display():
    return FakeDisplay()
