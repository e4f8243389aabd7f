import io
import random

import pytest

from hex_dot_game.agents.pathfind_agents import (
    DumbPathfind, RandomPlacer, SmartBlock, SmartPathfind,
)
from hex_dot_game.dot_engine.display import format_board
from hex_dot_game.dot_engine.dot_game import DotGame, Role
from hex_dot_game.dot_engine.geometry import from_xy
from hex_dot_game.dot_engine.state import State

from tests.helpers import ScriptedRng


def quiet_game(state=None, seed=0):
    return DotGame(rng=random.Random(seed), state=state, stream=io.StringIO())


def test_new_game_starts_from_a_random_board():
    game = quiet_game(seed=5)
    assert game.state == State.new(random.Random(5))
    assert game.winner is None
    assert len(game.history) == 1


def test_placer_wins_by_closing_the_last_gap(one_gap_state):
    game = quiet_game(one_gap_state)
    assert game.play_match(SmartBlock(), SmartPathfind()) is Role.PLACER
    assert game.state.placer_has_won()
    assert len(game.history) == 2


def test_dot_wins_by_stepping_off_the_board():
    game = quiet_game(State.with_dot(from_xy(0, 4)))
    assert game.play_match(RandomPlacer(random.Random(1)), DumbPathfind()) is Role.DOT
    # the placer's fill is recorded, the escape leaves no new position
    assert len(game.history) == 2


def test_full_board_ends_in_the_dots_favour():
    full = (1 << 81) - 1
    corner = from_xy(0, 0)
    game = quiet_game(State(full & ~(1 << corner), corner))
    assert game.placer_turn(SmartBlock()) is True
    assert game.winner is Role.DOT


def test_turns_refused_after_the_game_is_won(one_gap_state):
    game = quiet_game(one_gap_state)
    game.play_match(SmartBlock(), SmartPathfind())
    with pytest.raises(AssertionError):
        game.dot_turn(SmartPathfind())


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_machine_game_runs_to_completion(seed):
    game = quiet_game(seed=seed)
    winner = game.play_match(SmartBlock(), SmartPathfind())
    assert winner in (Role.PLACER, Role.DOT)
    for before, after in zip(game.history, game.history[1:]):
        assert not after.is_filled(after.dot)
        # every step is either one fill or one dot move
        assert (after.dot == before.dot) != (after.filled == before.filled)


def test_reset_restores_the_given_position(one_gap_state):
    game = quiet_game(one_gap_state)
    game.play_match(SmartBlock(), SmartPathfind())
    game.reset()
    assert game.state == one_gap_state
    assert game.winner is None and len(game.history) == 1


def test_print_writes_the_board(one_gap_state):
    game = quiet_game(one_gap_state)
    game.print()
    assert game.stream.getvalue() == format_board(one_gap_state)
    game.print(clear=True)
    assert "\x1b[H\x1b[2J" in game.stream.getvalue()


def test_human_vs_machine_win(one_gap_state):
    game = quiet_game(one_gap_state)
    lines = iter(["bad", "9 9", "4 4", "3 3", "5 4"])
    winner = game.human_vs_machine(SmartPathfind(), input_fn=lambda p: next(lines), delay=0)
    out = game.stream.getvalue()
    assert winner is Role.PLACER
    assert out.count("Please specify a valid location.") == 4
    assert out.rstrip().endswith("You win!")


def test_human_vs_machine_loss():
    game = quiet_game(State.with_dot(from_xy(0, 4)))
    winner = game.human_vs_machine(SmartPathfind(), input_fn=lambda p: "8 8", delay=0)
    assert winner is Role.DOT
    assert game.stream.getvalue().rstrip().endswith("The dot wins.")


def test_machine_vs_machine_announces_the_winner(one_gap_state):
    game = quiet_game(one_gap_state)
    winner = game.machine_vs_machine(SmartBlock(), SmartPathfind(), auto=True, rate=1000)
    assert winner is Role.PLACER
    assert "The placer wins." in game.stream.getvalue()


def test_machine_vs_machine_steps_on_enter(one_gap_state):
    game = quiet_game(one_gap_state)
    prompts = []
    game.machine_vs_machine(SmartBlock(), SmartPathfind(), auto=False,
                            input_fn=prompts.append)
    assert prompts == ["Press ENTER to continue."]


def test_random_setup_uses_injected_capability():
    rng = ScriptedRng([6] + [0] * 8)
    game = DotGame(rng=rng, stream=io.StringIO())
    assert game.state.dot == from_xy(4, 4)
    assert list(game.state.filled_cells()) == [0]
