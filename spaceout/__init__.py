"""A small 2D space game: window front end plus game logic usable without a window."""

__version__ = "0.1.0"