from typing import Iterable, Sequence, Tuple

from hex_dot_game.dot_engine.geometry import from_xy
from hex_dot_game.dot_engine.state import State


class ScriptedRng:
    """Stand-in for ``random.Random`` replaying a fixed list of draws."""

    def __init__(self, values: Sequence[int]):
        self.values = list(values)
        self.calls = []

    def randrange(self, n: int) -> int:
        value = self.values.pop(0)
        assert 0 <= value < n, f"scripted draw {value} not in range({n})"
        self.calls.append(n)
        return value


def make_state(dot: Tuple[int, int], filled: Iterable[Tuple[int, int]] = ()) -> State:
    state = State.with_dot(from_xy(*dot))
    for xy in filled:
        assert state.fill(from_xy(*xy))
    return state


# Dot at the centre (4, 4); its only open neighbour is (5, 4), and every
# other neighbour of (5, 4) is filled. The dot has to step to (5, 4) and the
# placer then wins by filling (4, 4).
FORCED_WIN_FILLS = [(3, 3), (4, 3), (3, 4), (3, 5), (4, 5), (5, 3), (6, 4), (5, 5)]

# Centre dot with every neighbour filled except the right one, (5, 4)
ONE_GAP_FILLS = [(3, 3), (4, 3), (3, 4), (3, 5), (4, 5)]
