# minefield

The classic Minesweeper puzzle. It runs in a Tkinter desktop window. The game engine underneath can also be used without the window.

## Installing

```
pip install .
```

The window needs Tkinter, which ships with most Python installations. The package has no other dependencies.

## Playing

```
minefield
```

You can also start it with `python -m minefield.window`.

- **Left click** a hidden cell to reveal it. If the cell has no neighbouring mines, the cells around it open too, and the opening spreads outward.
- **Right click** a hidden cell to place or remove a flag. You cannot place more flags than there are mines. A flagged cell cannot be revealed.
- The left counter starts at the number of mines. After you place or remove a flag, it shows how many flags are placed.
- The right counter shows the seconds elapsed. The clock starts with your first left click and stops when the game ends.
- The face button in the middle starts a new game. It turns green when you win and red when you reveal a mine. When the game ends, every cell is locked and any unflagged mines are shown.

Use the selector at the top to choose a difficulty. Changing it starts a new game.

| Mode   | Columns × rows | Mines |
|--------|----------------|-------|
| Easy   | 9 × 9          | 10    |
| Medium | 16 × 16        | 40    |
| Hard   | 30 × 16        | 99    |

## Using the engine

`minefield.board.Board` holds the field. `Cell` records four things for each square: `has_mine`, `is_revealed`, `is_flagged` and `adjacent_mines`. A cell that holds a mine has `adjacent_mines` set to `-1`.

```python
import random
from minefield.board import Board

board = Board(9, 9, 10, random.Random(42))
opened = board.reveal(0, 0)       # list of (row, col) opened, in order
flagged = board.toggle_flag(4, 4) # True if the cell is now flagged
print(board.cell(0, 0), board.is_won())
for row, col, cell in board.cells():
    ...
```

- `reset(rows, cols, mines)` lays out a new field. It raises `ValueError` for negative sizes, for a negative mine count, or for more mines than there are cells.
- `cell(row, col)` raises `IndexError` for a position outside the board.
- You can set the callbacks `on_cell_updated(row, col)`, `on_game_over(won)` and `on_flags_changed(flags_used)` to be told about changes.

`minefield.session.Session` wraps a board and adds the rest of a game:

- `GameMode`: the three difficulties.
- The counter texts: `mine_counter_text` and `timer_text`.
- The clock: `tick()` adds one second while the clock is running.
- `FaceState`: `PLAYING`, `WON` or `LOST`.
- `window_size`: the window size in pixels.

A session has the methods `change_mode(index)`, `restart()`, `left_click(row, col)` and `right_click(row, col)`. Clicks are ignored once the game is over. `format_counter` returns the zero-padded three-digit text that the counters show.

`minefield.window.cell_appearance(cell, game_over)` returns a `CellAppearance`: the text, icon, colours and enabled state that a cell button should have. `MinesweeperWindow` builds the game on a Tk root.

## Not included

The game keeps no best times or high scores, and it has no custom board sizes beyond the three modes.

## Running the tests

```
pip install .[test]
pytest
```