"""Shallow negamax scoring used by the utility strategies.

Each function scores a state for one side when it is the *other* side's
turn, searching ``depth`` plies. Forced results score
``UTILITY_SENTINEL``; sums of ordinary scores never reach it, but only the
sign and relative order of scores are meaningful.
"""
from __future__ import annotations

from ..config import UTILITY_SENTINEL
from .geometry import dist_to_edge
from .search import branch_dot, branch_placer
from .state import State


def approx_utility_placer(state: State, depth: int) -> int:
    """Placer's utility with the dot to move."""
    if depth == 0:
        return dist_to_edge(state.dot)
    scores = []
    for slot in branch_dot(state):
        if slot is None:
            continue
        if slot.is_terminal:
            scores.append(-UTILITY_SENTINEL)     # the dot escapes
        else:
            scores.append(-approx_utility_dot(slot.state, depth - 1))
    if not scores:
        # dot already enclosed
        return UTILITY_SENTINEL
    return min(scores)


def approx_utility_dot(state: State, depth: int) -> int:
    """Dot's utility with the placer to move.

    The state must leave the placer at least one legal placement; calling
    this on a full grid is a caller error and raises ``ValueError``.
    """
    if depth == 0:
        return -dist_to_edge(state.dot)
    best = None
    for branch in branch_placer(state):
        if branch.is_terminal:
            score = -UTILITY_SENTINEL
        else:
            score = -approx_utility_placer(branch.state, depth - 1)
        if best is None or score < best:
            best = score
    if best is None:
        raise ValueError("called `approx_utility_dot`, but grid is full")
    return best
