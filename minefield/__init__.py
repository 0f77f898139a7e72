"""Minesweeper: board engine, game session and Tk desktop window."""

__version__ = "1.0.0"
__all__ = ["board", "session", "window"]