#!/usr/bin/env python3
"""
Demo script for Card Scavenger Hunt.
Plays a few rounds in the terminal and prints mission odds.

    python -m scavenger_hunt.demo --rounds 5 --odds
"""

import argparse
import random

from .engine.game import GameConfig, RoundState
from .engine.history import SessionHistory
from .engine.missions import CATALOG
from .logging_utils import setup_logging, describe_hand, env_log_level
from .simulator import Simulator


def demo_catalog():
    """List every mission template."""
    print("=" * 60)
    print("MISSION CATALOG")
    print("=" * 60)

    for i, definition in enumerate(CATALOG, start=1):
        domains = ", ".join(
            f"{p.name}={'/'.join(str(c) for c in p.candidates)}" for p in definition.params
        )
        print(f"{i:>2}. {definition.template}")
        if domains:
            print(f"      {domains}")


def demo_rounds(rounds: int, deals_per_mission: int, rng: random.Random,
                config: GameConfig, history: SessionHistory):
    """Request missions and deal until each is accomplished or deals run out."""
    print("\n" + "=" * 60)
    print("PLAYING ROUNDS")
    print("=" * 60)

    state = RoundState()
    for _ in range(rounds):
        state = state.new_mission(rng, history)
        print(f"\nMission: {state.task.text}")

        for deal in range(1, deals_per_mission + 1):
            state = state.deal(config, rng, history)
            mark = "✓" if state.completed else " "
            print(f"  [{mark}] Deal {deal}: {describe_hand(state.hand)}")
            if state.completed:
                print("  ✅ Mission Accomplished!")
                break
        else:
            print("  ✗ Out of deals")

    summary = history.to_dict()["summary"]
    print(f"\nCompleted {summary['missions_completed']}/{summary['missions']} missions "
          f"in {summary['deals']} deals")


def demo_odds(samples: int, seed: int, config: GameConfig):
    """Print simulated completion odds for every mission."""
    print()
    sim = Simulator(config, seed=seed)
    print(sim.odds_by_rule(rounds_per_rule=samples))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Card Scavenger Hunt demo")
    parser.add_argument("--rounds", type=int, default=3, help="Missions to play")
    parser.add_argument("--deals", type=int, default=10, help="Deals allowed per mission")
    parser.add_argument("--odds", action="store_true", help="Print simulated mission odds")
    parser.add_argument("--samples", type=int, default=2000, help="Deals per mission for --odds")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--save-history", type=str, help="Write the session history JSON here")
    parser.add_argument("--log-level", type=str, default=env_log_level(),
                        help="Defaults to the LOG_LEVEL environment variable")

    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    config = GameConfig(seed=args.seed)
    rng = random.Random(args.seed)
    history = SessionHistory(session_name="demo")

    demo_catalog()
    if args.rounds > 0:
        demo_rounds(args.rounds, args.deals, rng, config, history)
    if args.odds:
        demo_odds(args.samples, args.seed, config)

    if args.save_history:
        history.save(args.save_history)
        print(f"\nHistory saved to {args.save_history}")


if __name__ == "__main__":
    main()
