import pygame
import pytest

from paddleball.driver import FixedStepDriver
from paddleball.game import Game
from paddleball.simulation import Snapshot


def motion(x, y=300):
    return pygame.event.Event(pygame.MOUSEMOTION, pos=(x, y), rel=(0, 0), buttons=(0, 0, 0))


def click(pos=(10, 10), button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=button)


@pytest.fixture
def game(display):
    return Game(display, FixedStepDriver(3))


def lose(game):
    game.snapshot = Snapshot(ball_x=400, ball_y=598, vx=5, vy=5, score=6)
    game.handle_event(motion(60))
    assert game.step()
    assert game.snapshot.game_over


def test_run_ticks_and_renders(game, display):
    assert game.run() == 0
    assert len(display.presented) == 3
    assert display.cursor == [False]
    assert (game.snapshot.ball_x, game.snapshot.ball_y) == (409, 309)


def test_pointer_moves_paddle_next_tick(game):
    game.handle_event(motion(400))
    assert game.snapshot.paddle_x == 0
    game.step()
    assert game.snapshot.paddle_x == 350


def test_loss_shows_cursor(game, display):
    lose(game)
    assert display.cursor == [True]
    assert game.snapshot.score == 6


def test_click_while_playing_does_nothing(game):
    game.step()
    before = game.snapshot
    game.handle_event(click())
    game.step()
    assert game.snapshot.ball_y == before.ball_y + before.vy
    assert game.running


def test_click_after_loss_resets(game, display):
    lose(game)
    game.handle_event(click())
    assert game.step()
    snap = game.snapshot
    assert not snap.game_over
    assert snap.score == 0
    assert (snap.ball_x, snap.ball_y, snap.vx, snap.vy) == (403, 303, 3, 3)
    assert display.cursor == [True, False]


def test_click_on_quit_prompt_stops(game):
    lose(game)
    game.handle_event(click(pos=(340, 355)))
    assert game.step() is False
    assert not game.running


def test_wheel_is_not_a_click(game):
    lose(game)
    game.handle_event(click(button=4))
    game.step()
    assert game.snapshot.game_over


@pytest.mark.parametrize("event", [
    pygame.event.Event(pygame.QUIT),
    pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE, mod=0, unicode="\x1b", scancode=41),
])
def test_window_close_and_escape_quit(game, event):
    game.handle_event(event)
    assert game.step() is False


def test_quit_ends_run_early(display):
    game = Game(display, FixedStepDriver(50))
    game.handle_event(pygame.event.Event(pygame.QUIT))
    assert game.run() == 0
    assert display.presented == []
