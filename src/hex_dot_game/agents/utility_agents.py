"""Strategies ranking candidates with the shallow negamax heuristics."""
from __future__ import annotations

from typing import Sequence

from ..config import UTILITY_DEPTH
from ..dot_engine.state import State
from ..dot_engine.utility import approx_utility_dot, approx_utility_placer
from .strategy import DotStrategy, PlacerStrategy, require_choices


class DotUtilityMax(DotStrategy):
    """Picks the move that leaves the placer the least utility.

    Each candidate has the placer to move, so the placer's utility there is
    the negation of :func:`approx_utility_dot`.
    """

    def __init__(self, depth: int = UTILITY_DEPTH):
        self.depth = depth

    def preferred_state(self, choices: Sequence[State]) -> int:
        require_choices(choices)
        return min(range(len(choices)),
                   key=lambda i: -approx_utility_dot(choices[i], self.depth))


class PlacerUtilityMax(PlacerStrategy):
    """Picks the placement that leaves the dot the least utility."""

    def __init__(self, depth: int = UTILITY_DEPTH):
        self.depth = depth

    def preferred_state(self, choices: Sequence[State]) -> int:
        require_choices(choices)
        return min(range(len(choices)),
                   key=lambda i: -approx_utility_placer(choices[i], self.depth))
