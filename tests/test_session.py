import random

import pytest

from minefield.session import FaceState, GameMode, Session, format_counter


def positions(session, mined):
    return [(r, c) for r, c, cell in session.board.cells() if cell.has_mine == mined]


def test_format_counter():
    assert format_counter(0) == "000"
    assert format_counter(10) == "010"
    assert format_counter(123) == "123"


def test_default_session():
    session = Session(0, random.Random(1))
    assert (session.rows, session.cols, session.mines) == (9, 9, 10)
    assert session.timer_text == "000"
    assert session.mine_counter_text == "010"
    assert session.face is FaceState.PLAYING
    assert not session.timer_running
    assert len(positions(session, True)) == 10


def test_window_size_easy():
    assert Session(0, random.Random(0)).window_size == (328, 438)


@pytest.mark.parametrize(
    "index, expected",
    [(0, (9, 9, 10)), (1, (16, 16, 40)), (2, (16, 30, 99)), (7, (9, 9, 10)), (-1, (9, 9, 10))],
)
def test_change_mode(index, expected):
    session = Session(0, random.Random(2))
    session.change_mode(index)
    assert (session.rows, session.cols, session.mines) == expected
    assert (session.board.rows, session.board.cols) == expected[:2]
    assert session.mine_counter_text == format_counter(session.mines)
    assert len(positions(session, True)) == session.mines


def test_mode_labels():
    assert GameMode.from_index(2) is GameMode.HARD
    assert GameMode.HARD.label == "Сложный (30x16)"
    assert [m.label for m in GameMode][0] == "Лёгкий (9x9)"


def test_tick_needs_first_click():
    session = Session(0, random.Random(3))
    session.tick()
    assert session.time_elapsed == 0
    assert session.timer_text == "000"


def test_safe_click_starts_timer():
    session = Session(0, random.Random(4))
    row, col = positions(session, False)[0]
    session.left_click(row, col)
    assert session.board.cell(row, col).is_revealed
    if not session.game_over:
        assert session.timer_running
    session.timer_running = True
    session.tick()
    assert session.time_elapsed == 1
    assert session.timer_text == format_counter(1)


def test_mine_click_loses_and_freezes():
    session = Session(0, random.Random(5))
    mine = positions(session, True)[0]
    session.left_click(*mine)
    assert session.game_over
    assert session.face is FaceState.LOST
    assert not session.timer_running
    session.tick()
    assert session.time_elapsed == 0
    safe = positions(session, False)[0]
    session.left_click(*safe)
    session.right_click(*safe)
    assert not session.board.cell(*safe).is_revealed
    assert not session.board.cell(*safe).is_flagged


def test_clearing_all_safe_cells_wins():
    session = Session(0, random.Random(6))
    for row, col in positions(session, False):
        session.left_click(row, col)
    assert session.face is FaceState.WON
    assert session.game_over
    assert not session.timer_running


def test_right_click_updates_counter():
    session = Session(0, random.Random(7))
    row, col = positions(session, True)[0]
    session.right_click(row, col)
    assert session.board.cell(row, col).is_flagged
    assert session.mine_counter_text == format_counter(1)
    session.right_click(row, col)
    assert session.mine_counter_text == format_counter(0)


def test_restart_resets_everything():
    session = Session(1, random.Random(8))
    session.left_click(*positions(session, True)[0])
    session.restart()
    assert session.face is FaceState.PLAYING
    assert not session.game_over
    assert session.time_elapsed == 0
    assert session.mine_counter_text == format_counter(40)
    assert not any(c.is_revealed for _, _, c in session.board.cells())