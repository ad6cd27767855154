"""
Monte Carlo odds for Card Scavenger Hunt missions.
Deals many hands and counts how often each mission is completed.
"""

import random
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .engine.game import GameConfig, RoundState, request_new_hand
from .engine.missions import RuleKind, evaluate, select_task, task_for
from .logging_utils import get_logger

logger = get_logger(__name__)


@dataclass
class BatchResult:
    """Results from many simulated deals."""
    rounds: int
    attempts: dict[str, int] = field(default_factory=dict)    # RuleKind name -> deals
    successes: dict[str, int] = field(default_factory=dict)   # RuleKind name -> completed deals
    hand_sizes: dict[int, int] = field(default_factory=dict)

    @property
    def wins(self) -> int:
        return sum(self.successes.values())

    @property
    def win_rate(self) -> float:
        if self.rounds == 0:
            return 0.0
        return self.wins / self.rounds * 100

    def rate(self, kind: RuleKind) -> float:
        """Completion rate (percent) for one rule kind."""
        tried = self.attempts.get(kind.name, 0)
        if tried == 0:
            return 0.0
        return self.successes.get(kind.name, 0) / tried * 100

    def record(self, kind: RuleKind, hand_size: int, completed: bool):
        self.attempts[kind.name] = self.attempts.get(kind.name, 0) + 1
        if completed:
            self.successes[kind.name] = self.successes.get(kind.name, 0) + 1
        self.hand_sizes[hand_size] = self.hand_sizes.get(hand_size, 0) + 1

    def __str__(self):
        lines = [
            f"{'='*50}",
            f"  MISSION ODDS ({self.rounds} deals)",
            f"{'='*50}",
            f"  Completed: {self.wins}/{self.rounds} ({self.win_rate:.1f}%)",
            "",
            "  By mission:",
        ]

        for kind in RuleKind:
            if kind.name not in self.attempts:
                continue
            pct = self.rate(kind)
            bar = "█" * int(pct / 2)
            lines.append(f"    {kind.name:<18} {self.attempts[kind.name]:>6} ({pct:>5.1f}%) {bar}")

        lines.append("")
        lines.append("  Hand sizes:")
        for size in sorted(self.hand_sizes):
            lines.append(f"    {size} cards: {self.hand_sizes[size]}")

        lines.append(f"{'='*50}")
        return "\n".join(lines)

    def to_dict(self):
        return {
            "rounds": self.rounds,
            "wins": self.wins,
            "win_rate": self.win_rate,
            "attempts": self.attempts,
            "successes": self.successes,
            "rates": {k: self.rate(RuleKind[k]) for k in self.attempts},
            "hand_sizes": self.hand_sizes,
        }


class Simulator:
    """
    Estimates how often a fresh deal completes a mission.

    Usage:
        sim = Simulator(seed=7)
        batch = sim.run_batch(rounds=5000)
        print(batch)

        # Or the same number of deals for every mission:
        odds = sim.odds_by_rule(rounds_per_rule=1000)
    """

    def __init__(self, config: GameConfig = None, seed: Optional[int] = None):
        self.config = config or GameConfig()
        if seed is None:
            seed = self.config.seed
        self.rng = random.Random(seed)

    def run_round(self, kind: Optional[RuleKind] = None) -> RoundState:
        """Pick a mission (random unless kind is given) and deal one hand for it."""
        task = task_for(kind, self.rng) if kind is not None else select_task(rng=self.rng)
        return RoundState(hand=request_new_hand(self.config, self.rng), task=task)

    def run_batch(self, rounds: int = 1000, kinds: Optional[Iterable[RuleKind]] = None,
                  verbose: bool = False) -> BatchResult:
        """
        Simulate deals and aggregate completion counts.

        Args:
            rounds: Deals per mission kind if ``kinds`` is given, otherwise in total
            kinds: Mission kinds to force; random missions when omitted
            verbose: Print progress

        Returns:
            BatchResult with per-mission counts
        """
        plan = [None] if kinds is None else list(kinds)
        result = BatchResult(rounds=rounds * len(plan))

        for kind in plan:
            for i in range(rounds):
                if verbose and (i + 1) % 1000 == 0:
                    label = kind.name if kind else "random"
                    print(f"  {label}: deal {i + 1}/{rounds}...")

                state = self.run_round(kind)
                result.record(state.task.kind, len(state.hand), evaluate(state.task, state.hand))

        logger.debug("Simulated %d deals, %d completed", result.rounds, result.wins)
        return result

    def odds_by_rule(self, rounds_per_rule: int = 1000) -> BatchResult:
        """Same number of deals for every mission kind."""
        return self.run_batch(rounds_per_rule, kinds=list(RuleKind))


def run_batch(rounds: int = 1000, seed: Optional[int] = None, verbose: bool = False) -> BatchResult:
    """Quick batch run with default settings."""
    return Simulator(seed=seed).run_batch(rounds, verbose=verbose)
