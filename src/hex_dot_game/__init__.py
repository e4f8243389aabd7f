def main() -> None:
    # Quick demonstration: the predictive placer against the pathfinding dot

    import random

    from .agents.registry import make_dot_strategy, make_placer_strategy
    from .dot_engine import DotGame

    rng = random.Random()
    game = DotGame(rng=rng)

    # any registered names work here, see agents/registry.py
    placer = make_placer_strategy("predictive", rng)
    dot = make_dot_strategy("smart", rng)

    game.machine_vs_machine(placer, dot, auto=True, rate=5.0)

    #let yourself play the placer instead
    #game.human_vs_machine(dot)
