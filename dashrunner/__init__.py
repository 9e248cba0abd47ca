"""A side-scrolling endless runner with a tile-map editor and a local leaderboard."""

__version__ = "0.1.0"