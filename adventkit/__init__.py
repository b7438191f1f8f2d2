"""Puzzle helpers (text, grids, vectors, positions) and a timed day runner."""

__version__ = "0.1.0"

__all__ = ["executor", "grid", "position", "puzzles", "runner", "textutil", "vector2d"]