"""hex_dot_game.config
=====================
Fixed constants shared by the engine and the agents.

None of these are runtime options. The board must stay small enough for the
bitmask encoding used by :class:`~hex_dot_game.dot_engine.state.State`.
"""

# Board dimensions (staggered rows, odd rows shifted half a cell right)
BOARD_W: int = 9
BOARD_H: int = 9
BOARD_SIZE: int = BOARD_W * BOARD_H

# Number of random fill attempts made when a game starts. Collisions with
# the dot or an already filled cell are dropped, not retried.
INITIAL_OBSTACLES: int = 8

# Plies searched by the utility (negamax) strategies
UTILITY_DEPTH: int = 2

# Dot turns searched by the predictive placer
PREDICTIVE_DEPTH: int = 2

# Score standing in for a forced result in the utility heuristics
UTILITY_SENTINEL: int = 100

# Tie-break draws are uniform in range(TIEBREAK_RANGE)
TIEBREAK_RANGE: int = 256

assert BOARD_W >= 3 and BOARD_H >= 3, "board too small to have an interior"
