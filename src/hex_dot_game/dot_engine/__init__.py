from .dot_game import DotGame, Role
from .geometry import (
    CENTER, DIRECTIONS, dist_to_edge, from_xy, is_boundary, near_center,
    neighbors, random_position, to_xy,
)
from .search import (
    Branch, BranchKind, branch_dot, branch_placer, dot_moves, min_steps_to_edge,
    placer_moves,
)
from .state import State
from .utility import approx_utility_dot, approx_utility_placer
