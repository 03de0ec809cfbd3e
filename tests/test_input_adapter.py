import threading
from dataclasses import replace

import pytest

from paddleball.input_adapter import Command, InputAdapter, PaddleHandoff
from paddleball.simulation import Phase, new_game


@pytest.fixture
def adapter(arena):
    return InputAdapter(arena)


def game_over(arena):
    return replace(new_game(arena), phase=Phase.GAME_OVER, score=4)


def test_pointer_centres_paddle(adapter):
    assert adapter.on_pointer_move(400) == 350
    assert adapter.handoff.read() == 350


def test_paddle_clamped_for_any_pointer(adapter, arena):
    for pointer_x in range(-1000, arena.width + 1001, 7):
        x = adapter.on_pointer_move(pointer_x)
        assert 0 <= x <= arena.width - 100
        assert adapter.handoff.read() == x


def test_paddle_clamp_edges(adapter):
    assert adapter.on_pointer_move(10) == 0
    assert adapter.on_pointer_move(799) == 700


def test_click_ignored_while_playing(adapter, arena):
    adapter.observe(new_game(arena))
    assert adapter.on_click((400, 300)) is None
    assert adapter.drain() == []


def test_click_ignored_before_first_tick(adapter):
    assert adapter.on_click() is None


def test_click_after_game_over_resets(adapter, arena):
    adapter.observe(game_over(arena))
    assert adapter.on_click() is Command.RESET
    assert adapter.on_click((10, 10)) is Command.RESET
    assert adapter.drain() == [Command.RESET, Command.RESET]
    assert adapter.drain() == []


def test_click_on_quit_prompt_quits(adapter, arena):
    adapter.observe(game_over(arena))
    # "Click to Quit" baseline sits at (330, 360) on an 800x600 arena
    assert adapter.on_click((340, 355)) is Command.QUIT
    # the reset line above it still resets
    assert adapter.on_click((340, 318)) is Command.RESET


def test_request_quit_queues(adapter):
    adapter.request_quit()
    assert adapter.drain() == [Command.QUIT]


def test_handoff_last_write_wins():
    handoff = PaddleHandoff(5)
    writers = [threading.Thread(target=handoff.publish, args=(i,)) for i in range(20)]
    for t in writers:
        t.start()
    for t in writers:
        t.join()
    assert handoff.read() in range(20)
    handoff.publish(42)
    assert handoff.read() == 42
