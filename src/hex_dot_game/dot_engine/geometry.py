"""Cell indices, coordinates and adjacency on the staggered hex board.

Positions are plain ``int`` cell indices in row-major order. Odd rows are
shifted half a cell to the right, which decides which cells in the rows
above and below count as neighbours.
"""
from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from ..config import BOARD_H, BOARD_SIZE, BOARD_W

Coordinate = Tuple[int, int]
Neighbors = Tuple[Optional[int], ...]

# Direction order of every neighbour tuple. Branch generation, rendering and
# the tie-breaking of every min/max over branches rely on it.
DIRECTIONS: Tuple[str, ...] = (
    "upper-left", "upper-right",
    "left", "right",
    "lower-left", "lower-right",
)


def from_xy(x: int, y: int) -> int:
    """Return the cell index of column *x*, row *y*."""
    assert 0 <= x < BOARD_W, f"x coordinate {x} outside the board."
    assert 0 <= y < BOARD_H, f"y coordinate {y} outside the board."
    return y * BOARD_W + x


def to_xy(pos: int) -> Coordinate:
    """Inverse of :func:`from_xy`."""
    return pos % BOARD_W, pos // BOARD_W


def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < BOARD_W and 0 <= y < BOARD_H


def _compute_dist_to_edge(pos: int) -> int:
    x, y = to_xy(pos)
    return min(x + 1, BOARD_W - x, y + 1, BOARD_H - y)


def _compute_neighbors(pos: int) -> Neighbors:
    x, y = to_xy(pos)
    parity = y % 2
    offsets = (
        (-1 + parity, -1), (parity, -1),
        (-1, 0), (1, 0),
        (-1 + parity, 1), (parity, 1),
    )
    return tuple(
        from_xy(x + dx, y + dy) if in_bounds(x + dx, y + dy) else None
        for dx, dy in offsets
    )


# ---------------------------------------------------------------------------
# Lookup tables, built once at import
# ---------------------------------------------------------------------------
NEIGHBORS: Tuple[Neighbors, ...] = tuple(
    _compute_neighbors(p) for p in range(BOARD_SIZE)
)
DIST_TO_EDGE: Tuple[int, ...] = tuple(
    _compute_dist_to_edge(p) for p in range(BOARD_SIZE)
)

# Same adjacency as NEIGHBORS, -1 marking a missing neighbour, for the
# compiled search kernel.
NEIGHBOR_TABLE: np.ndarray = np.array(
    [[-1 if n is None else n for n in row] for row in NEIGHBORS],
    dtype=np.int16,
)

CENTER: int = from_xy(BOARD_W // 2, BOARD_H // 2)


def neighbors(pos: int) -> Neighbors:
    """Return the six neighbours of *pos* in :data:`DIRECTIONS` order.

    Off-board neighbours are ``None``.
    """
    return NEIGHBORS[pos]


def dist_to_edge(pos: int) -> int:
    """Straight-line number of moves needed to step off the board.

    Obstacles are ignored. A cell on the boundary is at distance 1.
    """
    return DIST_TO_EDGE[pos]


def is_boundary(pos: int) -> bool:
    return None in NEIGHBORS[pos]


def random_position(rng) -> int:
    """Uniform position anywhere on the board."""
    return rng.randrange(BOARD_SIZE)


def near_center(rng) -> int:
    """Uniform choice among the centre cell and its six neighbours."""
    i = rng.randrange(7)
    if i < 6:
        return NEIGHBORS[CENTER][i]
    return CENTER
