"""Exact result classification for the predictive placer."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class OutcomeKind(IntEnum):
    LOSE = 0
    PLAY = 1
    WIN = 2


@dataclass(frozen=True, order=True)
class Outcome:
    """
    Best result of a branch of the game tree, from the placer's side.

    Ordered worst to best: every ``LOSE`` < every ``PLAY`` < every ``WIN``.

    * ``Lose(n)`` - the dot escapes after ``n`` more placer turns. A larger
      ``n`` loses later and compares higher: ``Lose(3) > Lose(1)``.
    * ``Play(d)`` - no forced result within the horizon; the dot is ``d``
      straight-line moves from the edge there. Farther is better.
    * ``Win(n)``  - the placer encloses the dot within ``n`` more turns.
      Stored negated so that ``Win(1) > Win(3)``.
    """
    kind: OutcomeKind
    value: int

    @classmethod
    def lose(cls, turns: int) -> "Outcome":
        return cls(OutcomeKind.LOSE, turns)

    @classmethod
    def play(cls, distance: int) -> "Outcome":
        return cls(OutcomeKind.PLAY, distance)

    @classmethod
    def win(cls, turns: int) -> "Outcome":
        return cls(OutcomeKind.WIN, -turns)

    @property
    def turns(self) -> int:
        """Turns until the forced result (``LOSE``/``WIN`` only)."""
        if self.kind is OutcomeKind.WIN:
            return -self.value
        if self.kind is OutcomeKind.LOSE:
            return self.value
        raise ValueError("a PLAY outcome has no forced result")

    def unwind(self) -> "Outcome":
        """Convert an outcome for the next turn into one for this turn."""
        if self.kind is OutcomeKind.PLAY:
            return self
        return Outcome(self.kind, self.value + 1 if self.kind is OutcomeKind.LOSE
                       else self.value - 1)

    def __repr__(self) -> str:
        name = self.kind.name.capitalize()
        if self.kind is OutcomeKind.PLAY:
            return f"{name}({self.value})"
        return f"{name}({self.turns})"
