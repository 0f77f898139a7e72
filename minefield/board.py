"""Minefield model: cells, mine placement, flood reveal and flags."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

_NEIGHBOUR_OFFSETS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


@dataclass
class Cell:
    """State of one square of the field."""

    has_mine: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    adjacent_mines: int = 0


class Board:
    """A rectangular minefield.

    Observers may be attached through ``on_cell_updated(row, col)``,
    ``on_game_over(won)`` and ``on_flags_changed(flags_used)``.
    """

    def __init__(self, rows, cols, mines, rng=None):
        self._rng = rng if rng is not None else random.Random()
        self.on_cell_updated: Optional[Callable[[int, int], None]] = None
        self.on_game_over: Optional[Callable[[bool], None]] = None
        self.on_flags_changed: Optional[Callable[[int], None]] = None
        self.rows = 0
        self.cols = 0
        self.total_mines = 0
        self.flags_used = 0
        self._grid: list[list[Cell]] = []
        self.reset(rows, cols, mines)

    def reset(self, rows, cols, mines):
        """Clear the field and lay out a fresh set of mines."""
        if rows < 0 or cols < 0:
            raise ValueError(f"board dimensions must not be negative: {rows}x{cols}")
        if mines < 0:
            raise ValueError(f"mine count must not be negative: {mines}")
        if mines > rows * cols:
            raise ValueError(f"{mines} mines do not fit on a {rows}x{cols} board")
        self.rows = rows
        self.cols = cols
        self.total_mines = mines
        self.flags_used = 0
        self._grid = [[Cell() for _ in range(cols)] for _ in range(rows)]
        self._place_mines()
        self._compute_adjacency()
        self._notify_flags()

    def _place_mines(self):
        placed = 0
        while placed < self.total_mines:
            cell = self._grid[self._rng.randrange(self.rows)][self._rng.randrange(self.cols)]
            if not cell.has_mine:
                cell.has_mine = True
                placed += 1

    def _neighbours(self, row, col) -> Iterator[tuple[int, int]]:
        for dr, dc in _NEIGHBOUR_OFFSETS:
            if self._in_bounds(row + dr, col + dc):
                yield row + dr, col + dc

    def _compute_adjacency(self):
        for row, col, cell in self.cells():
            if cell.has_mine:
                cell.adjacent_mines = -1
            else:
                cell.adjacent_mines = sum(
                    self._grid[r][c].has_mine for r, c in self._neighbours(row, col)
                )

    def _in_bounds(self, row, col) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _notify_cell(self, row, col):
        if self.on_cell_updated is not None:
            self.on_cell_updated(row, col)

    def _notify_game_over(self, won):
        if self.on_game_over is not None:
            self.on_game_over(won)

    def _notify_flags(self):
        if self.on_flags_changed is not None:
            self.on_flags_changed(self.flags_used)

    def reveal(self, row, col) -> list[tuple[int, int]]:
        """Open a cell, flooding outward from empty cells.

        Returns the positions opened, in the order they were opened.
        """
        revealed: list[tuple[int, int]] = []
        stack = [(row, col)]
        while stack:
            r, c = stack.pop()
            if not self._in_bounds(r, c):
                continue
            cell = self._grid[r][c]
            if cell.is_revealed or cell.is_flagged:
                continue
            cell.is_revealed = True
            revealed.append((r, c))
            self._notify_cell(r, c)
            if cell.has_mine:
                self._notify_game_over(False)
                return revealed
            if cell.adjacent_mines == 0:
                stack.extend((r + dr, c + dc) for dr, dc in reversed(_NEIGHBOUR_OFFSETS))
        if revealed and self.is_won():
            self._notify_game_over(True)
        return revealed

    def toggle_flag(self, row, col) -> bool:
        """Flip the flag on a hidden cell; return whether it is flagged now."""
        if not self._in_bounds(row, col):
            return False
        cell = self._grid[row][col]
        if cell.is_revealed:
            return False
        if cell.is_flagged:
            cell.is_flagged = False
            self.flags_used -= 1
        elif self.flags_used < self.total_mines:
            cell.is_flagged = True
            self.flags_used += 1
        self._notify_cell(row, col)
        self._notify_flags()
        return cell.is_flagged

    def cell(self, row, col) -> Cell:
        """Return the cell at a position."""
        if not self._in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside a {self.rows}x{self.cols} board")
        return self._grid[row][col]

    def is_won(self) -> bool:
        """True when every cell without a mine has been opened."""
        return all(cell.has_mine or cell.is_revealed for _, _, cell in self.cells())

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Yield ``(row, col, cell)`` in row-major order."""
        for row, line in enumerate(self._grid):
            for col, cell in enumerate(line):
                yield row, col, cell