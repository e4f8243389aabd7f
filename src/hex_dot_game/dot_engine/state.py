"""Board state: which cells are filled and where the dot stands."""
from __future__ import annotations

from typing import Iterator, Tuple

import numpy as np

from ..config import BOARD_SIZE, INITIAL_OBSTACLES
from .geometry import NEIGHBORS, near_center, random_position, to_xy

_FULL_MASK = (1 << BOARD_SIZE) - 1
_MASK_BYTES = (BOARD_SIZE + 7) // 8


class State(object):
    """
    State of an active game.

    Attributes
    ----------
    filled : int
        Bitmask of filled cells. Bit ``p`` is set iff cell ``p`` is filled;
        bits at or above ``BOARD_SIZE`` are always zero.
    dot : int
        Cell index of the dot. Never a filled cell.

    Copying is O(1), so search code copies a state for every branch and
    mutates the copy. Nothing here checks that a dot move is legal; the
    branch generators only produce legal ones.
    """
    __slots__ = ("filled", "dot")

    def __init__(self, filled: int = 0, dot: int = 0):
        self.filled = filled
        self.dot = dot

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def with_dot(cls, pos: int) -> "State":
        """Empty board with the dot at *pos*."""
        return cls(0, pos)

    @classmethod
    def new(cls, rng, obstacles: int = INITIAL_OBSTACLES) -> "State":
        """Start a game: dot near the centre, up to *obstacles* random fills.

        Draws that land on the dot or on a filled cell are dropped, so the
        board may start with fewer filled cells than requested.
        """
        state = cls.with_dot(near_center(rng))
        for _ in range(obstacles):
            state.fill(random_position(rng))
        return state

    def copy(self) -> "State":
        return State(self.filled, self.dot)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def fill(self, pos: int) -> bool:
        """Fill *pos*. Return ``False`` (and change nothing) if *pos* is
        already filled or holds the dot."""
        bit = 1 << pos
        if pos == self.dot or self.filled & bit:
            return False
        self.filled |= bit
        return True

    def move_dot(self, pos: int) -> None:
        self.dot = pos

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def is_filled(self, pos: int) -> bool:
        return (self.filled >> pos) & 1 == 1

    def placer_has_won(self) -> bool:
        """True iff every neighbour of the dot exists and is filled."""
        for n in NEIGHBORS[self.dot]:
            if n is None or not (self.filled >> n) & 1:
                return False
        return True

    def is_full(self) -> bool:
        """True when every cell except the dot's is filled."""
        return self.filled | (1 << self.dot) == _FULL_MASK

    def filled_cells(self) -> Iterator[int]:
        bits = self.filled
        pos = 0
        while bits:
            if bits & 1:
                yield pos
            bits >>= 1
            pos += 1

    def filled_count(self) -> int:
        return bin(self.filled).count("1")

    def to_array(self) -> np.ndarray:
        """Flat ``uint8`` array of length ``BOARD_SIZE``, 1 where filled."""
        raw = np.frombuffer(self.filled.to_bytes(_MASK_BYTES, "little"),
                            dtype=np.uint8)
        return np.unpackbits(raw, bitorder="little")[:BOARD_SIZE]

    def key(self) -> Tuple[int, int]:
        return self.filled, self.dot

    def __eq__(self, other):
        if not isinstance(other, State):
            return NotImplemented
        return self.key() == other.key()

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return (f"State(dot={to_xy(self.dot)}, "
                f"filled={sorted(to_xy(p) for p in self.filled_cells())})")
