"""Shrinking-ball reflex game: click the bouncing ball before it gets away."""

__version__ = "0.1.0"
