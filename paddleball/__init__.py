"""Paddle Ball: keep the ball in play with a mouse-driven paddle."""

__version__ = "1.0.0"
