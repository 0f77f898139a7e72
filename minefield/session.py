"""Game session: difficulty modes, timer, mine counter and face state."""

from __future__ import annotations

import random
from enum import Enum

from minefield.board import Board

CELL_PIXELS = 32


def format_counter(value) -> str:
    """Render a number as a three-digit, zero-padded display."""
    return f"{value:03d}"


class GameMode(Enum):
    """Difficulty levels: label, rows, columns, mines."""

    EASY = ("Лёгкий (9x9)", 9, 9, 10)
    MEDIUM = ("Средний (16x16)", 16, 16, 40)
    HARD = ("Сложный (30x16)", 16, 30, 99)

    def __init__(self, label, rows, cols, mines):
        self.label = label
        self.rows = rows
        self.cols = cols
        self.mines = mines

    @classmethod
    def from_index(cls, index) -> "GameMode":
        """Mode at a selector position; unknown positions fall back to easy."""
        modes = list(cls)
        return modes[index] if 0 <= index < len(modes) else cls.EASY


class FaceState(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


class Session:
    """One player's game: the board plus the timer and counters around it."""

    def __init__(self, mode_index=0, rng=None):
        self._rng = rng if rng is not None else random.Random()
        self.mode = GameMode.EASY
        self.board: Board
        self.time_elapsed = 0
        self.timer_running = False
        self.timer_text = format_counter(0)
        self.mine_counter_text = format_counter(0)
        self.face = FaceState.PLAYING
        self.game_over = False
        self.change_mode(mode_index)

    @property
    def rows(self) -> int:
        return self.mode.rows

    @property
    def cols(self) -> int:
        return self.mode.cols

    @property
    def mines(self) -> int:
        return self.mode.mines

    @property
    def window_size(self) -> tuple[int, int]:
        """Preferred window width and height in pixels."""
        return self.cols * CELL_PIXELS + 40, self.rows * CELL_PIXELS + 150

    def change_mode(self, index):
        """Switch difficulty and start a new game."""
        self.mode = GameMode.from_index(index)
        self.board = Board(self.rows, self.cols, self.mines, rng=self._rng)
        self.board.on_game_over = self._handle_game_over
        self.board.on_flags_changed = self._update_mine_counter
        self.restart()

    def restart(self):
        """Start a fresh game in the current mode."""
        self.board.reset(self.rows, self.cols, self.mines)
        self.timer_running = False
        self.time_elapsed = 0
        self.timer_text = format_counter(0)
        self.mine_counter_text = format_counter(self.mines)
        self.face = FaceState.PLAYING
        self.game_over = False

    def left_click(self, row, col):
        """Open a cell, starting the timer on the first move."""
        if self.game_over:
            return
        if self.time_elapsed == 0:
            self.timer_running = True
        self.board.reveal(row, col)

    def right_click(self, row, col):
        """Toggle the flag on a cell."""
        if self.game_over:
            return
        self.board.toggle_flag(row, col)

    def tick(self):
        """Advance the timer by one second if it is running."""
        if not self.timer_running:
            return
        self.time_elapsed += 1
        self.timer_text = format_counter(self.time_elapsed)

    def _handle_game_over(self, won):
        self.timer_running = False
        self.game_over = True
        self.face = FaceState.WON if won else FaceState.LOST

    def _update_mine_counter(self, flags_used):
        self.mine_counter_text = format_counter(flags_used)