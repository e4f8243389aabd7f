from .outcome import Outcome, OutcomeKind
from .pathfind_agents import (
    DumbPathfind, HumanPlacer, RandomDot, RandomPlacer, SmartBlock, SmartPathfind,
    parse_move,
)
from .predictive_agent import PlacerPredictive, search_outcome
from .registry import (
    DOT_STRATEGIES, PLACER_STRATEGIES, make_dot_strategy, make_placer_strategy,
)
from .strategy import DotStrategy, PlacerStrategy
from .utility_agents import DotUtilityMax, PlacerUtilityMax

__all__ = [
    "DotStrategy", "PlacerStrategy",
    "DumbPathfind", "SmartPathfind", "SmartBlock", "RandomDot", "RandomPlacer",
    "HumanPlacer", "parse_move",
    "DotUtilityMax", "PlacerUtilityMax",
    "Outcome", "OutcomeKind", "PlacerPredictive", "search_outcome",
    "DOT_STRATEGIES", "PLACER_STRATEGIES", "make_dot_strategy", "make_placer_strategy",
]
