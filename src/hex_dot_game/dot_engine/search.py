"""Reachability search and one-ply branch generation.

``min_steps_to_edge`` runs on every dot candidate at every node of the
predictive search, so the frontier BFS itself is compiled with numba.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Iterator, List, NamedTuple, Optional, Tuple

import numba as nb
import numpy as np

from ..config import BOARD_H, BOARD_W
from .geometry import NEIGHBOR_TABLE, NEIGHBORS, from_xy
from .state import State

logger = logging.getLogger(__name__)


# ───────────────────────────────────────────────────────────────────────────────
# Frontier BFS (Numba)
# ───────────────────────────────────────────────────────────────────────────────
@nb.njit(cache=True)
def _min_steps_kernel(filled: np.ndarray, dot: int, neighbor_table: np.ndarray) -> int:
    """
    Return the number of dot moves needed to step off the board.

    Parameters
    ----------
    filled         : uint8[:]     1 where a cell is filled
    dot            : int          start cell
    neighbor_table : int16[:, :]  (cells, 6) adjacency, -1 = off-board

    Returns
    -------
    steps : int   first frontier depth holding a boundary cell, -1 = sealed in
    """
    n = filled.shape[0]
    searched = np.zeros(n, np.uint8)
    searched[dot] = 1

    frontier = np.empty(n, np.int16)
    next_frontier = np.empty(n, np.int16)
    frontier[0] = dot
    frontier_len = 1
    steps = 0

    while frontier_len > 0:
        steps += 1
        next_len = 0
        for k in range(frontier_len):
            pos = frontier[k]
            for d in range(6):
                nbr = neighbor_table[pos, d]
                if nbr < 0:                 # off-board: escape route found
                    return steps
                if searched[nbr] == 0 and filled[nbr] == 0:
                    searched[nbr] = 1
                    next_frontier[next_len] = nbr
                    next_len += 1
        frontier, next_frontier = next_frontier, frontier
        frontier_len = next_len

    return -1


def min_steps_to_edge(state: State) -> Optional[int]:
    """Minimum number of dot moves to leave the board around obstacles.

    ``None`` means the placer has sealed the dot in, even if the dot can
    still shuffle around inside its pocket.
    """
    steps = _min_steps_kernel(state.to_array(), state.dot, NEIGHBOR_TABLE)
    if steps < 0:
        logger.debug("dot sealed in at %s", state.dot)
        return None
    return int(steps)


# ───────────────────────────────────────────────────────────────────────────────
# Branch generators
# ───────────────────────────────────────────────────────────────────────────────
class BranchKind(Enum):
    CONTINUE = "continue"
    WIN = "win"          # the mover wins with this move


class Branch(NamedTuple):
    kind: BranchKind
    state: Optional[State]   # None when the dot stepped off the board

    @property
    def is_terminal(self) -> bool:
        return self.kind is BranchKind.WIN


ESCAPE = Branch(BranchKind.WIN, None)


def branch_dot(state: State) -> List[Optional[Branch]]:
    """Return one slot per neighbour direction of the dot.

    * ``None``                     - neighbour filled, not a legal move
    * ``ESCAPE``                   - neighbour off-board, the dot wins
    * ``Branch(CONTINUE, state')`` - dot moved to the neighbour
    """
    slots: List[Optional[Branch]] = []
    filled = state.filled
    for n in NEIGHBORS[state.dot]:
        if n is None:
            slots.append(ESCAPE)
        elif (filled >> n) & 1:
            slots.append(None)
        else:
            slots.append(Branch(BranchKind.CONTINUE, State(filled, n)))
    return slots


def dot_moves(state: State) -> Tuple[bool, List[State]]:
    """Collect the dot's options as ``(escape_available, successors)``."""
    escape = False
    successors: List[State] = []
    for slot in branch_dot(state):
        if slot is None:
            continue
        if slot.is_terminal:
            escape = True
        else:
            successors.append(slot.state)
    return escape, successors


def branch_placer(state: State) -> Iterator[Branch]:
    """Yield every legal placement in row-major order.

    The dot's cell and filled cells are skipped. A placement completing the
    enclosure is yielded as ``Branch(WIN, state')``. Each call builds a
    fresh single-pass generator.
    """
    for y in range(BOARD_H):
        for x in range(BOARD_W):
            new = state.copy()
            if not new.fill(from_xy(x, y)):
                continue
            if new.placer_has_won():
                yield Branch(BranchKind.WIN, new)
            else:
                yield Branch(BranchKind.CONTINUE, new)


def placer_moves(state: State) -> Tuple[Optional[State], List[State]]:
    """Collect the placer's options as ``(first_winning_state, successors)``.

    Stops at the first winning placement; ``successors`` is then partial.
    """
    successors: List[State] = []
    for branch in branch_placer(state):
        if branch.is_terminal:
            return branch.state, successors
        successors.append(branch.state)
    return None, successors
