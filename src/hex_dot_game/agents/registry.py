"""Strategies by short name, for the CLI and the tournament."""
from __future__ import annotations

import random
from typing import Callable, Dict, Optional

from .pathfind_agents import (
    DumbPathfind, HumanPlacer, RandomDot, RandomPlacer, SmartBlock, SmartPathfind,
)
from .predictive_agent import PlacerPredictive
from .strategy import DotStrategy, PlacerStrategy
from .utility_agents import DotUtilityMax, PlacerUtilityMax

# Every factory takes the game's randomness capability
DOT_STRATEGIES: Dict[str, Callable[[random.Random], DotStrategy]] = {
    "dumb"    : lambda rng: DumbPathfind(),
    "smart"   : lambda rng: SmartPathfind(),
    "utility" : lambda rng: DotUtilityMax(),
    "random"  : lambda rng: RandomDot(rng),
}

PLACER_STRATEGIES: Dict[str, Callable[[random.Random], PlacerStrategy]] = {
    "predictive": lambda rng: PlacerPredictive(rng, SmartPathfind()),
    "smart"     : lambda rng: SmartBlock(),
    "utility"   : lambda rng: PlacerUtilityMax(),
    "random"    : lambda rng: RandomPlacer(rng),
    "human"     : lambda rng: HumanPlacer(),
}

DEFAULT_DOT = "smart"
DEFAULT_PLACER = "predictive"


def _resolve(table, role: str, name: str, rng):
    factory = table.get(name.lower())
    if factory is None:
        raise ValueError(
            f"Unknown {role} strategy {name!r}; choose one of: {', '.join(table)}."
        )
    return factory(rng)


def make_dot_strategy(name: str, rng: Optional[random.Random] = None) -> DotStrategy:
    return _resolve(DOT_STRATEGIES, "dot", name, rng or random.Random())


def make_placer_strategy(name: str, rng: Optional[random.Random] = None) -> PlacerStrategy:
    return _resolve(PLACER_STRATEGIES, "placer", name, rng or random.Random())
