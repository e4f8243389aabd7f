"""hex_dot_game.cli
====================
CLI for starting a game of the dot and the placer.

* **Built-in strategies by name** - pass, e.g. ``--placer predictive`` or
  ``--dot smart``; see :mod:`hex_dot_game.agents.registry` for the names.
* Two modes: ``hvm`` (you place, a machine dot runs) and ``mvm`` (two
  machines, redrawn after every move).
* With no flags at all an *interactive wizard* asks for the options.
"""
from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Iterable, List, Optional, Tuple

from .agents.registry import (
    DEFAULT_DOT, DEFAULT_PLACER, DOT_STRATEGIES, PLACER_STRATEGIES,
    make_dot_strategy, make_placer_strategy,
)
from .agents.strategy import DotStrategy, PlacerStrategy
from .dot_engine.dot_game import DotGame

MODES = ["hvm", "mvm"]

# ---------------------------------------------------------------------------
# Interactive helpers
# ---------------------------------------------------------------------------

def _prompt_choice(prompt: str, names: Iterable[str], default: str) -> str:
    """Ask until the answer names one of *names*; Enter takes *default*.

    A unique prefix is enough, so ``p`` picks ``predictive``.
    """
    names = list(names)
    shown = "/".join(f"{name}*" if name == default else name for name in names)
    while True:
        answer = input(f"{prompt} [{shown}] ").strip().lower()
        if not answer:
            return default
        if answer in names:
            return answer
        matches = [name for name in names if name.startswith(answer)]
        if len(matches) == 1:
            return matches[0]
        print(f"Please type one of: {', '.join(names)}\n")


_YES_NO = {"y": True, "yes": True, "n": False, "no": False}


def _prompt_yes_no(prompt: str, default: bool) -> bool:
    hint = "Y/n" if default else "y/N"
    while True:
        answer = input(f"{prompt} [{hint}] ").strip().lower()
        if not answer:
            return default
        if answer in _YES_NO:
            return _YES_NO[answer]
        print("Please answer with 'y' or 'n'.\n")


def _prompt_rate(default: float) -> float:
    while True:
        answer = input(f"Auto-play speed in moves/second [{default}] ").strip()
        if not answer:
            return default
        try:
            rate = float(answer)
        except ValueError:
            rate = 0.0
        if rate > 0:
            return rate
        print("Please type a positive number.\n")


def _interactive_wizard(args: argparse.Namespace) -> argparse.Namespace:
    """Fill unspecified *args* fields by prompting the user."""
    if args.mode is None:
        args.mode = _prompt_choice("Choose game mode", MODES, default="hvm")

    if args.dot is None:
        args.dot = _prompt_choice("Dot strategy", DOT_STRATEGIES, default=DEFAULT_DOT)

    if args.mode == "mvm":
        if args.placer is None:
            machines = [name for name in PLACER_STRATEGIES if name != "human"]
            args.placer = _prompt_choice("Placer strategy", machines, default=DEFAULT_PLACER)
        args.auto = _prompt_yes_no("Enable auto-play mode?", default=True)
        if args.auto:
            args.rate = _prompt_rate(default=args.rate)

    print()  # spacing before game starts
    return args


def _configure_logging(verbosity: int) -> None:
    if verbosity <= 0:
        return
    level = logging.DEBUG if verbosity > 1 else logging.INFO
    logging.basicConfig(level=level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# ---------------------------------------------------------------------------
# Game runner
# ---------------------------------------------------------------------------

def _resolve_strategies(args: argparse.Namespace, rng: random.Random
                        ) -> Tuple[Optional[PlacerStrategy], DotStrategy]:
    """Build the machine players named in *args*. Unknown names raise ``ValueError``."""
    dot = make_dot_strategy(args.dot, rng)
    placer = make_placer_strategy(args.placer, rng) if args.mode == "mvm" else None
    return placer, dot


def _run_game(args: argparse.Namespace, rng: random.Random,
              placer: Optional[PlacerStrategy], dot: DotStrategy) -> None:
    game = DotGame(rng=rng)
    try:
        if args.mode == "hvm":
            game.human_vs_machine(dot)
        else:
            game.machine_vs_machine(placer, dot, auto=args.auto, rate=args.rate)
    except KeyboardInterrupt:
        print("\nGame interrupted by user.")

# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hex-dot-game",
        description="Enclose the dot before it escapes the hex board.",
    )
    parser.add_argument("--mode", choices=MODES,
                        help="Game mode: hvm (you are the placer), mvm (machine vs machine)")
    parser.add_argument("--placer",
                        help=f"Placer strategy for mvm mode (default {DEFAULT_PLACER}): "
                             + ", ".join(PLACER_STRATEGIES))
    parser.add_argument("--dot",
                        help=f"Dot strategy (default {DEFAULT_DOT}): "
                             + ", ".join(DOT_STRATEGIES))
    parser.add_argument("--auto", action="store_true",
                        help="Machine-vs-machine advances on its own instead of on Enter.")
    parser.add_argument("--rate", type=float, default=5.0,
                        help="Auto-play speed in moves / second (default 5).")
    parser.add_argument("--seed", type=int,
                        help="Seed for the board setup and the strategies.")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Log game events (-vv for search details).")
    parser.add_argument("-i", "--interactive", action="store_true",
                        help="Prompt for options interactively (default when no flags are given)")
    return parser


def main(argv: Optional[List[str]] = None) -> None:  # noqa: D401 - simple name
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    need_interactive = args.interactive or len(argv) == 0
    if need_interactive:
        args = _interactive_wizard(args)
    else:
        if args.mode is None:
            parser.error("--mode is required when not using interactive mode")
        if args.dot is None:
            args.dot = DEFAULT_DOT
        if args.mode == "mvm" and args.placer is None:
            args.placer = DEFAULT_PLACER
    if args.mode == "hvm" and args.placer not in (None, "human"):
        parser.error("--placer cannot be set in hvm mode; you are the placer")

    rng = random.Random(args.seed)
    try:
        placer, dot = _resolve_strategies(args, rng)
    except ValueError as err:
        parser.error(str(err))

    _run_game(args, rng, placer, dot)


# Allow "python -m hex_dot_game.cli" direct execution
if __name__ == "__main__":  # pragma: no cover
    main()
