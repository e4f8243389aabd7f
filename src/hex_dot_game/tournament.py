"""Machine-vs-machine matchups between registered strategies.

Each game gets its own ``random.Random`` seeded from the matchup seed and
the game number, so a plan replays identically.
"""
from __future__ import annotations

import argparse
import json
import logging
import random
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional, Sequence

from .agents.registry import make_dot_strategy, make_placer_strategy
from .dot_engine.dot_game import DotGame, Role

logger = logging.getLogger(__name__)

# ==============================================================================
# DEFAULT MATCHUP PLAN
# ==============================================================================
# - placer / dot: registry names (see hex_dot_game.agents.registry)
# - games: number of games played for the matchup
# ==============================================================================
MATCHUPS: List[Dict] = [
    {"placer": "random",     "dot": "dumb",  "games": 20},
    {"placer": "smart",      "dot": "smart", "games": 20},
    {"placer": "utility",    "dot": "smart", "games": 10},
    {"placer": "predictive", "dot": "smart", "games": 5},
]


@dataclass
class MatchupResult:
    placer: str
    dot: str
    games: int
    placer_wins: int = 0
    dot_wins: int = 0

    @property
    def placer_win_rate(self) -> float:
        return self.placer_wins / self.games if self.games else 0.0


def run_matchup(placer: str, dot: str, games: int, seed: int = 0) -> MatchupResult:
    result = MatchupResult(placer=placer, dot=dot, games=games)
    for game_no in range(games):
        rng = random.Random(f"{seed}:{game_no}")
        game = DotGame(rng=rng)
        winner = game.play_match(make_placer_strategy(placer, rng),
                                 make_dot_strategy(dot, rng))
        if winner is Role.PLACER:
            result.placer_wins += 1
        else:
            result.dot_wins += 1
    logger.info("%s vs %s: placer %d / dot %d", placer, dot,
                result.placer_wins, result.dot_wins)
    return result


def check_plan(plan: Sequence[Dict]) -> None:
    """Raise ``ValueError`` if a matchup names an unknown strategy."""
    for matchup in plan:
        make_placer_strategy(matchup["placer"])
        make_dot_strategy(matchup["dot"])


def run_plan(plan: Sequence[Dict], seed: int = 0) -> List[MatchupResult]:
    results = []
    for i, matchup in enumerate(plan):
        print(f"\n▶️  Matchup {i+1}/{len(plan)}: "
              f"placer={matchup['placer']} vs dot={matchup['dot']} "
              f"({matchup['games']} games)")
        result = run_matchup(matchup["placer"], matchup["dot"],
                             matchup["games"], seed=seed)
        print(f"   placer wins: {result.placer_wins}   dot wins: {result.dot_wins}")
        results.append(result)
    return results


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        prog="hex-dot-tournament",
        description="Play machine-vs-machine matchups and tally the wins.",
    )
    parser.add_argument("--placer", help="Placer strategy for a single matchup.")
    parser.add_argument("--dot", help="Dot strategy for a single matchup.")
    parser.add_argument("--games", type=int, default=10,
                        help="Games per single matchup (default 10).")
    parser.add_argument("--seed", type=int, default=0,
                        help="Base seed for the per-game random sources.")
    parser.add_argument("--json", action="store_true",
                        help="Print the results as JSON at the end.")
    args = parser.parse_args(argv)

    if (args.placer is None) != (args.dot is None):
        parser.error("--placer and --dot must be given together")
    if args.placer is not None:
        plan = [{"placer": args.placer, "dot": args.dot, "games": args.games}]
    else:
        plan = MATCHUPS
    try:
        check_plan(plan)
    except ValueError as err:
        parser.error(str(err))

    print(f"Starting tournament: {len(plan)} matchups planned.")
    print("=" * 70)
    results = run_plan(plan, seed=args.seed)
    if args.json:
        print(json.dumps([asdict(r) for r in results], indent=2))


if __name__ == "__main__":  # pragma: no cover
    main()
