"""
Paddle Ball - Python (Pygame)

Keep the ball in play with the mouse-controlled paddle. Every hit scores a
point and speeds the ball up; letting it past the paddle ends the round.

Controls:
- Mouse: move the paddle
- Click (after Game Over): reset; click "Click to Quit" to exit
- Esc / window close: quit
"""

import argparse
import logging
from typing import Optional, Sequence

import pygame

from paddleball.config import FPS, TITLE
from paddleball.display import DisplayError, PygameDisplay
from paddleball.driver import ClockDriver
from paddleball.game import Game
from paddleball.logging_config import setup_logging

logger = logging.getLogger("paddleball.cli")


def parse_size(value: str):
    try:
        w, h = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {value!r}")
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError(f"size must be positive, got {value!r}")
    return w, h


def positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paddleball",
        description="Single-player paddle and ball reflex game.",
    )
    parser.add_argument("--windowed", "-w", action="store_true",
                        help="Run in a window instead of full screen.")
    parser.add_argument("--size", "-s", type=parse_size,
                        help="Arena size as WIDTHxHEIGHT. Default: screen size (800x600 windowed).")
    parser.add_argument("--title", default=TITLE, help="Window title.")
    parser.add_argument("--fps", type=positive_int, default=FPS,
                        help=f"Target tick rate. Default: {FPS}")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity. Default: INFO")
    parser.add_argument("--log-file", help="Also write the log to this file.")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    pygame.init()
    try:
        display = PygameDisplay.open(fullscreen=not args.windowed, size=args.size, title=args.title)
        return Game(display, ClockDriver(args.fps)).run()
    except DisplayError as exc:
        logger.error("Startup failed: %s", exc)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
    except Exception:
        logger.exception("Unhandled error")
        return 1
    finally:
        pygame.quit()
