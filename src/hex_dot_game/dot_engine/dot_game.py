# hex_dot_game.dot_engine.dot_game - turn-taking driver
# ==============================================================
# Alternates placer and dot on a single mutable game state:
#   • placer acts, then dot acts, until one side wins
#   • human placer vs machine dot (console input)
#   • machine vs machine, auto-paced or stepped with Enter
# ------------------------------------------------------------------

from __future__ import annotations

import logging
import random
import sys
import time
from enum import Enum
from typing import TYPE_CHECKING, Callable, List, Optional, TextIO

from .display import clear_screen, format_board
from .state import State

if TYPE_CHECKING:
    from ..agents.strategy import DotStrategy, PlacerStrategy

logger = logging.getLogger(__name__)


class Role(Enum):
    PLACER = "placer"
    DOT = "dot"


# ==============================================================
# Game object
# ==============================================================

class DotGame(object):
    """
    Objects of this class correspond to one game of the dot and the placer.

    Parameters
    ----------
    rng : random.Random, optional
        Randomness used to set up the board (fresh unseeded one by default).
    state : State, optional
        Start from this position instead of a random one.
    stream : TextIO, optional
        Where boards and messages are written (stdout by default).

    Attributes
    ----------
    state : State
        The current position.
    winner : Role or None
        Who has won, ``None`` while the game is running.
    history : list[State]
        Every position reached, starting with the initial one.
    """

    def __init__(self, rng: Optional[random.Random] = None,
                 state: Optional[State] = None, stream: Optional[TextIO] = None):
        self.rng = random.Random() if rng is None else rng
        self.stream = sys.stdout if stream is None else stream
        self._initial = state
        self.reset()

    # ==============================================================
    # Core gameplay primitives
    # ==============================================================
    def reset(self) -> None:
        if self._initial is not None:
            self.state = self._initial.copy()
        else:
            self.state = State.new(self.rng)
        self.winner: Optional[Role] = None
        self.history: List[State] = [self.state.copy()]

    def _record(self, state: State) -> None:
        self.state = state
        self.history.append(state.copy())

    def placer_turn(self, placer: "PlacerStrategy") -> bool:
        """Let *placer* act. Return ``True`` when the game is over."""
        assert self.winner is None, "The game is already won."
        new_state = placer.play(self.state)
        if new_state is None:
            # no legal placement left: the enclosure never closed
            self.winner = Role.DOT
            return True
        self._record(new_state)
        if new_state.placer_has_won():
            self.winner = Role.PLACER
            return True
        return False

    def dot_turn(self, dot: "DotStrategy") -> bool:
        """Let *dot* act. Return ``True`` when the game is over."""
        assert self.winner is None, "The game is already won."
        new_state = dot.play(self.state)
        if new_state is None:
            self.winner = Role.PLACER if self.state.placer_has_won() else Role.DOT
            return True
        self._record(new_state)
        return False

    def play_match(self, placer: "PlacerStrategy", dot: "DotStrategy") -> Role:
        """Play a silent game from the current position; return the winner."""
        while not (self.placer_turn(placer) or self.dot_turn(dot)):
            pass
        logger.info("%s wins after %d positions", self.winner.value, len(self.history))
        return self.winner

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    def print(self, clear: bool = False) -> None:
        """Write the current board to the game's stream."""
        if clear:
            clear_screen(self.stream)
        self.stream.write(format_board(self.state))
        self.stream.flush()

    def _say(self, message: str) -> None:
        self.stream.write(message + "\n")
        self.stream.flush()

    # ==============================================================
    # Match wrappers
    # ==============================================================
    def machine_vs_machine(self, placer: "PlacerStrategy", dot: "DotStrategy", *,
                           auto: bool = True, rate: float = 5.0,
                           input_fn: Callable[[str], str] = input) -> Role:
        """Computer-controlled duel, redrawn after every move.

        With *auto* the game advances *rate* moves per second, otherwise
        each move waits for Enter.
        """
        def pause():
            if auto:
                time.sleep(1 / max(rate, 0.1))
            else:
                input_fn("Press ENTER to continue.")

        while True:
            self.print(clear=True)
            pause()
            if self.placer_turn(placer):
                break
            self.print(clear=True)
            pause()
            if self.dot_turn(dot):
                break

        self.print(clear=True)
        self._say(f"The {self.winner.value} wins.")
        return self.winner

    def human_vs_machine(self, dot: "DotStrategy",
                         input_fn: Callable[[str], str] = input,
                         delay: float = 0.5) -> Role:
        """
        Play the placer against a machine dot.

        Moves are typed as two integers ``x y``; invalid input, off-board
        cells, filled cells and the dot's own cell are re-prompted.
        """
        from ..agents.pathfind_agents import HumanPlacer

        human = HumanPlacer(input_fn=input_fn, output=self._say)
        while True:
            self.print(clear=True)
            over = self.placer_turn(human)
            self.print(clear=True)
            if over:
                break
            if delay:
                time.sleep(delay)
            if self.dot_turn(dot):
                break

        if self.winner is Role.PLACER:
            self._say("You win!")
        else:
            self._say("The dot wins.")
        return self.winner
