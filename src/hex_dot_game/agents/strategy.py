"""Decision interfaces for the two roles.

A strategy only ranks candidate successor states; ``play`` turns that
ranking into a move, taking any immediately winning branch first.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..dot_engine.search import dot_moves, placer_moves
from ..dot_engine.state import State


def require_choices(choices: Sequence[State]) -> None:
    if not choices:
        raise ValueError("preferred_state needs at least one candidate state.")


class DotStrategy(ABC):
    """Represents a strategy that could be used by the dot."""

    @abstractmethod
    def preferred_state(self, choices: Sequence[State]) -> int:
        """Given a non-empty list of potential states, return the index of
        the state which is most preferred."""

    def play(self, state: State) -> Optional[State]:
        """Move the dot according to this strategy.

        Returns ``None`` when the game ends on the dot's turn: either the dot
        steps off the board (always taken when available) or it has no legal
        move at all. ``state.placer_has_won()`` tells the two apart.
        """
        escape, choices = dot_moves(state)
        if escape or not choices:
            return None
        return choices[self.preferred_state(choices)]


class PlacerStrategy(ABC):
    """Represents a strategy that could be used by the placer."""

    @abstractmethod
    def preferred_state(self, choices: Sequence[State]) -> int:
        """Given a non-empty list of potential states, return the index of
        the state which is most preferred."""

    def play(self, state: State) -> Optional[State]:
        """Place one cell according to this strategy.

        A winning placement is always taken and its state returned. Returns
        ``None`` only when there is no legal placement left.
        """
        winning, choices = placer_moves(state)
        if winning is not None:
            return winning
        if not choices:
            return None
        return choices[self.preferred_state(choices)]
