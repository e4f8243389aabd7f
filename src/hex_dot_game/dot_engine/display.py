"""Text rendering of a board state."""
from __future__ import annotations

import sys
from typing import Optional, TextIO

from ..config import BOARD_H, BOARD_W
from .geometry import from_xy
from .state import State

DOT_GLYPH = "@"
FILLED_GLYPH = "o"
EMPTY_GLYPH = "."


def format_board(state: State) -> str:
    """Return the board as text, one line per row, odd rows indented.

    Example (3 columns)::

        ======
        . o .
         . @ .
        . . .
    """
    lines = ["=" * (BOARD_W * 2)]
    for y in range(BOARD_H):
        cells = []
        for x in range(BOARD_W):
            pos = from_xy(x, y)
            if pos == state.dot:
                cells.append(DOT_GLYPH)
            elif state.is_filled(pos):
                cells.append(FILLED_GLYPH)
            else:
                cells.append(EMPTY_GLYPH)
        indent = " " if y % 2 else ""
        lines.append(indent + " ".join(cells))
    return "\n".join(lines) + "\n"


def display(state: State, stream: Optional[TextIO] = None) -> None:
    """Write :func:`format_board` to *stream* (stdout by default)."""
    stream = sys.stdout if stream is None else stream
    stream.write(format_board(state))
    stream.flush()


def clear_screen(stream: Optional[TextIO] = None) -> None:
    stream = sys.stdout if stream is None else stream
    stream.write("\x1b[H\x1b[2J")
