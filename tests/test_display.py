import io

from hex_dot_game.dot_engine.display import display, format_board

from tests.helpers import make_state


def test_board_layout():
    state = make_state((4, 4), [(0, 0), (8, 1), (3, 4)])
    lines = format_board(state).splitlines()
    assert len(lines) == 10
    assert lines[0] == "=" * 18
    assert lines[1] == "o . . . . . . . ."
    assert lines[2] == " . . . . . . . . o"
    assert lines[5] == ". . . o @ . . . ."


def test_odd_rows_are_indented():
    lines = format_board(make_state((0, 0))).splitlines()[1:]
    for y, line in enumerate(lines):
        assert line.startswith(" ") == (y % 2 == 1)
        assert len(line.split()) == 9


def test_every_cell_reflects_the_state():
    state = make_state((2, 7), [(1, 1), (5, 6)])
    rows = [line.split() for line in format_board(state).splitlines()[1:]]
    assert rows[7][2] == "@"
    assert rows[1][1] == "o" and rows[6][5] == "o"
    assert sum(row.count("o") for row in rows) == 2
    assert sum(row.count("@") for row in rows) == 1


def test_display_writes_to_stream():
    state = make_state((4, 4))
    out = io.StringIO()
    display(state, out)
    assert out.getvalue() == format_board(state)
