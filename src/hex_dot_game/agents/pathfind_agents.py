"""Distance-driven, random and human strategies."""
from __future__ import annotations

import math
from typing import Callable, Optional, Sequence

from ..config import BOARD_H, BOARD_W
from ..dot_engine.geometry import dist_to_edge, from_xy
from ..dot_engine.search import min_steps_to_edge
from ..dot_engine.state import State
from .strategy import DotStrategy, PlacerStrategy, require_choices


def reach_key(state: State) -> float:
    """BFS distance to the edge; a sealed-in dot sorts after any distance."""
    steps = min_steps_to_edge(state)
    return math.inf if steps is None else steps


class DumbPathfind(DotStrategy):
    """Moves towards whichever state gives the smallest straight-line
    distance to the edge, ignoring obstacles."""

    def preferred_state(self, choices: Sequence[State]) -> int:
        require_choices(choices)
        return min(range(len(choices)), key=lambda i: dist_to_edge(choices[i].dot))


class SmartPathfind(DotStrategy):
    """Like :class:`DumbPathfind` but pathfinds around filled cells."""

    def preferred_state(self, choices: Sequence[State]) -> int:
        require_choices(choices)
        # when every candidate is sealed in the pick is arbitrary, the
        # dot has lost either way
        return min(range(len(choices)), key=lambda i: reach_key(choices[i]))


class SmartBlock(PlacerStrategy):
    """Placer counterpart of :class:`SmartPathfind`: picks the placement that
    leaves the dot the longest path out, sealing it in if possible."""

    def preferred_state(self, choices: Sequence[State]) -> int:
        require_choices(choices)
        return max(range(len(choices)), key=lambda i: reach_key(choices[i]))


class RandomDot(DotStrategy):
    def __init__(self, rng):
        self.rng = rng

    def preferred_state(self, choices: Sequence[State]) -> int:
        require_choices(choices)
        return self.rng.randrange(len(choices))


class RandomPlacer(PlacerStrategy):
    def __init__(self, rng):
        self.rng = rng

    def preferred_state(self, choices: Sequence[State]) -> int:
        require_choices(choices)
        return self.rng.randrange(len(choices))


def parse_move(text: str) -> Optional[int]:
    """Translate a line like ``"3 4"`` (x then y) into a cell index.

    Returns ``None`` for anything that is not two in-range integers.
    """
    words = text.split()
    if len(words) != 2:
        return None
    try:
        x, y = int(words[0]), int(words[1])
    except ValueError:
        return None
    if not (0 <= x < BOARD_W and 0 <= y < BOARD_H):
        return None
    return from_xy(x, y)


class HumanPlacer(PlacerStrategy):
    """Placer driven by ``x y`` lines typed at a prompt.

    Never takes a winning move on the human's behalf.
    """
    PROMPT = "> "
    INVALID = "Please specify a valid location."

    def __init__(self, input_fn: Callable[[str], str] = input,
                 output: Callable[[str], None] = print):
        self.input_fn = input_fn
        self.output = output

    def _read_cell(self) -> int:
        while True:
            pos = parse_move(self.input_fn(self.PROMPT))
            if pos is not None:
                return pos
            self.output(self.INVALID)

    def play(self, state: State) -> Optional[State]:
        if state.is_full():
            return None
        while True:
            new = state.copy()
            if new.fill(self._read_cell()):
                return new
            self.output(self.INVALID)

    def preferred_state(self, choices: Sequence[State]) -> int:
        """Pick the candidate in which the typed cell is the new fill.

        A cell filled in every candidate was filled before the move, and
        one filled in none is not offered, so both are re-prompted.
        """
        require_choices(choices)
        if len(choices) == 1:
            return 0
        while True:
            pos = self._read_cell()
            hits = [i for i, c in enumerate(choices) if c.is_filled(pos)]
            if len(hits) == 1:
                return hits[0]
            self.output(self.INVALID)
