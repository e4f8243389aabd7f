"""Depth-bounded adversarial search for the placer.

The dot is not searched over: it is assumed to answer every placement the
way a fixed :class:`~.strategy.DotStrategy` would, so only the placer's
replies branch. Leaves at the horizon are scored by the dot's straight-line
distance to the edge.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..config import PREDICTIVE_DEPTH, TIEBREAK_RANGE
from ..dot_engine.geometry import dist_to_edge
from ..dot_engine.search import branch_placer
from ..dot_engine.state import State
from .outcome import Outcome
from .strategy import DotStrategy, PlacerStrategy, require_choices

logger = logging.getLogger(__name__)


def search_outcome(state: State, dot_strategy: DotStrategy, depth: int) -> Outcome:
    """Best outcome the placer can reach within *depth* dot turns.

    It is the dot's turn in *state* and it moves according to
    *dot_strategy*. A state in which the dot is already enclosed is a win
    at any depth.
    """
    if state.placer_has_won():
        return Outcome.win(0)
    if depth == 0:
        return Outcome.play(dist_to_edge(state.dot))

    dot_state = dot_strategy.play(state)
    if dot_state is None:
        # not enclosed, so the dot stepped off the board
        return Outcome.lose(0)

    best: Optional[Outcome] = None
    for branch in branch_placer(dot_state):
        if branch.is_terminal:
            return Outcome.win(0)
        outcome = search_outcome(branch.state, dot_strategy, depth - 1).unwind()
        if best is None or outcome > best:
            best = outcome
    if best is None:
        # no placement left anywhere
        return Outcome.play(dist_to_edge(dot_state.dot))
    return best


class PlacerPredictive(PlacerStrategy):
    """
    A placer parameterized by an assumption about how the dot will answer.

    It brute-forces the game tree down to ``depth`` dot turns for every
    candidate and keeps the one with the best :class:`Outcome`. Exact ties
    are broken by a draw from *rng* so play does not always favour the last
    candidate. With ``depth=0`` only the heuristic distance is compared.

    Parameters
    ----------
    rng :
        Randomness capability (``random.Random`` interface) used for
        tie-breaking.
    dot_strategy :
        Model of the dot's replies. It should be deterministic; a
        randomized model makes the search consume *its* randomness too.
    depth :
        Dot turns searched below each candidate.
    """

    def __init__(self, rng, dot_strategy: DotStrategy, depth: int = PREDICTIVE_DEPTH):
        self.rng = rng
        self.dot_strategy = dot_strategy
        self.depth = depth

    def evaluate(self, choices: Sequence[State]) -> list:
        return [search_outcome(c, self.dot_strategy, self.depth) for c in choices]

    def preferred_state(self, choices: Sequence[State]) -> int:
        require_choices(choices)
        keyed = [(outcome, self.rng.randrange(TIEBREAK_RANGE))
                 for outcome in self.evaluate(choices)]
        best = max(range(len(choices)), key=lambda i: keyed[i])
        logger.debug("predictive placer: %d candidates, best %r",
                     len(choices), keyed[best][0])
        return best
