"""Tk front end for the Minesweeper game."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Optional

from minefield.board import Cell
from minefield.session import CELL_PIXELS, FaceState, GameMode, Session

_NUMBER_COLOURS: tuple[Optional[tuple[int, int, int]], ...] = (
    None,
    (0, 0, 255),
    (0, 128, 0),
    (255, 0, 0),
    (0, 0, 128),
    (128, 0, 0),
    (0, 128, 128),
    (0, 0, 0),
    (128, 128, 128),
)

_GLYPHS = {"mine": "\u2739", "flag": "\u2691"}
_FACE_COLOURS = {
    FaceState.PLAYING: "lightgray",
    FaceState.WON: "lightgreen",
    FaceState.LOST: "red",
}
_CHROME = "#c0c0c0"
_FRAME = "#808080"


@dataclass(frozen=True)
class CellAppearance:
    """How one cell button should look."""

    text: str = ""
    icon: Optional[str] = None
    background: str = "#c0c0c0"
    foreground: Optional[tuple[int, int, int]] = None
    bold: bool = False
    enabled: bool = True


def cell_appearance(cell: Cell, game_over=False) -> CellAppearance:
    """Decide a cell button's look from the cell and whether the game ended."""
    if cell.is_revealed:
        background = "#e0e0e0" if cell.adjacent_mines == 0 else "lightgray"
        if cell.has_mine:
            return CellAppearance(icon="mine", background=background, enabled=False)
        if cell.adjacent_mines > 0:
            return CellAppearance(
                text=str(cell.adjacent_mines),
                background=background,
                foreground=_NUMBER_COLOURS[cell.adjacent_mines],
                bold=True,
                enabled=False,
            )
        return CellAppearance(background=background, enabled=False)
    icon = "flag" if cell.is_flagged else None
    if game_over:
        if cell.has_mine and not cell.is_flagged:
            icon = "mine"
        return CellAppearance(icon=icon, enabled=False)
    return CellAppearance(icon=icon)


def _hex(rgb: tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


class MinesweeperWindow:
    """Main game window built on a Tk root."""

    def __init__(self, root):
        import tkinter as tk
        from tkinter import font as tkfont
        from tkinter import ttk

        self._tk = tk
        self.root = root
        self.session = Session()
        self._tick_job = None
        self._buttons: dict[tuple[int, int], object] = {}

        root.title("Minesweeper")
        root.configure(background=_CHROME)
        outer = tk.Frame(root, background=_CHROME, padx=10, pady=10)
        outer.pack(fill="both", expand=True)

        selector = ttk.Combobox(
            outer, values=[mode.label for mode in GameMode], state="readonly", width=20
        )
        selector.current(0)
        selector.bind("<<ComboboxSelected>>", lambda _e: self._change_mode(selector.current()))
        selector.pack(pady=(0, 10))

        panel = tk.Frame(outer, background=_FRAME, relief="sunken", borderwidth=2, height=50)
        panel.pack(fill="x", pady=(0, 10))
        lcd = ("Courier", 18, "bold")
        self._mine_label = tk.Label(panel, font=lcd, bg="black", fg="red", width=3)
        self._mine_label.pack(side="left", padx=5, pady=5)
        self._timer_label = tk.Label(panel, font=lcd, bg="black", fg="red", width=3)
        self._timer_label.pack(side="right", padx=5, pady=5)
        self._face_button = tk.Button(
            panel, text="\u263a", font=("TkDefaultFont", 16), command=self._restart
        )
        self._face_button.pack(expand=True, pady=5)

        self._board_frame = tk.Frame(
            outer, background=_FRAME, relief="sunken", borderwidth=2, padx=5, pady=5
        )
        self._board_frame.pack()
        self._cell_font = tkfont.Font(root=root, size=8)
        self._number_font = tkfont.Font(root=root, size=16, weight="bold")

        self._build_board()
        self.refresh()

    def _build_board(self):
        tk = self._tk
        for child in self._board_frame.winfo_children():
            child.destroy()
        self._buttons = {}
        for row in range(self.session.rows):
            for col in range(self.session.cols):
                holder = tk.Frame(self._board_frame, width=CELL_PIXELS, height=CELL_PIXELS)
                holder.pack_propagate(False)
                holder.grid(row=row, column=col, padx=(0, 1), pady=(0, 1))
                button = tk.Button(holder, borderwidth=2, padx=0, pady=0, highlightthickness=0)
                button.pack(fill="both", expand=True)
                button.bind("<Button-1>", lambda _e, r=row, c=col: self._left_click(r, c))
                button.bind("<Button-3>", lambda _e, r=row, c=col: self._right_click(r, c))
                self._buttons[(row, col)] = button
        width, height = self.session.window_size
        self.root.minsize(width, height)
        self.root.geometry(f"{width}x{height}")

    def _enabled(self, row, col) -> bool:
        return str(self._buttons[(row, col)].cget("state")) != "disabled"

    def _left_click(self, row, col):
        if not self._enabled(row, col):
            return "break"
        self.session.left_click(row, col)
        if self.session.timer_running and self._tick_job is None:
            self._tick_job = self.root.after(1000, self._on_tick)
        self.refresh()
        return "break"

    def _right_click(self, row, col):
        if self._enabled(row, col):
            self.session.right_click(row, col)
            self.refresh()
        return "break"

    def _on_tick(self):
        self._tick_job = None
        self.session.tick()
        if self.session.timer_running:
            self._tick_job = self.root.after(1000, self._on_tick)
        self._timer_label.config(text=self.session.timer_text)

    def _cancel_timer(self):
        if self._tick_job is not None:
            self.root.after_cancel(self._tick_job)
            self._tick_job = None

    def _restart(self):
        self._cancel_timer()
        self.session.restart()
        self.refresh()

    def _change_mode(self, index):
        self._cancel_timer()
        self.session.change_mode(index)
        self._build_board()
        self.refresh()

    def refresh(self):
        """Redraw counters, face and every cell from the session state."""
        session = self.session
        if not session.timer_running:
            self._cancel_timer()
        self._mine_label.config(text=session.mine_counter_text)
        self._timer_label.config(text=session.timer_text)
        face = _FACE_COLOURS[session.face]
        self._face_button.config(background=face, activebackground=face)
        for (row, col), button in self._buttons.items():
            look = cell_appearance(session.board.cell(row, col), session.game_over)
            text = _GLYPHS[look.icon] if look.icon else look.text
            colour = _hex(look.foreground) if look.foreground else "black"
            button.config(
                text=text,
                background=look.background,
                activebackground=look.background,
                foreground=colour,
                disabledforeground=colour,
                font=self._number_font if look.bold else self._cell_font,
                state="normal" if look.enabled else "disabled",
                relief="raised" if look.enabled else "sunken",
            )


def main(argv=None):
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="minefield", description="Play Minesweeper.")
    parser.parse_args(argv)
    import tkinter as tk

    root = tk.Tk()
    MinesweeperWindow(root)
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())