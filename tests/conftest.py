import pytest

from hex_dot_game.config import BOARD_SIZE
from hex_dot_game.dot_engine.geometry import CENTER, neighbors
from hex_dot_game.dot_engine.state import State

from tests.helpers import FORCED_WIN_FILLS, ONE_GAP_FILLS, make_state


@pytest.fixture
def enclosed_state() -> State:
    state = State.with_dot(CENTER)
    for n in neighbors(CENTER):
        state.fill(n)
    return state


@pytest.fixture
def one_gap_state() -> State:
    return make_state((4, 4), ONE_GAP_FILLS)


@pytest.fixture
def forced_win_state() -> State:
    return make_state((4, 4), FORCED_WIN_FILLS)


@pytest.fixture
def full_state() -> State:
    """Every cell filled except the centre, where the dot sits."""
    full = (1 << BOARD_SIZE) - 1
    return State(full & ~(1 << CENTER), CENTER)
