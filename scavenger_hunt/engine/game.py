"""
Round state and the dealing/mission API used by the front end.
"""

from dataclasses import dataclass, fields, replace
from typing import Optional

from .deck import Card, DECK_SIZE, deal_hand
from .missions import ActiveTask, evaluate, select_task
from ..logging_utils import get_logger, describe_hand

logger = get_logger(__name__)


@dataclass
class GameConfig:
    """Configuration for a play session."""
    min_hand_size: int = 2
    max_hand_size: int = 5
    # Cosmetic pauses before committing a new hand / mission (seconds)
    deal_delay: float = 0.4
    mission_delay: float = 0.3
    seed: Optional[int] = None

    def __post_init__(self):
        if not 1 <= self.min_hand_size <= self.max_hand_size <= DECK_SIZE:
            raise ValueError(
                f"Invalid hand size range {self.min_hand_size}..{self.max_hand_size} "
                f"(must be within 1..{DECK_SIZE})"
            )

    def with_overrides(self, overrides: dict) -> "GameConfig":
        """Copy with known keys replaced; unknown keys are ignored."""
        known = {f.name for f in fields(self)}
        return replace(self, **{k: v for k, v in overrides.items() if k in known})


def request_new_hand(config: GameConfig = None, rng=None) -> tuple[Card, ...]:
    """Build, shuffle and deal a fresh hand."""
    hand = deal_hand(config, rng)
    logger.debug("Dealt %d cards: %s", len(hand), describe_hand(hand))
    return hand


def request_new_task(rng=None) -> ActiveTask:
    """Select, resolve and render a new mission."""
    return select_task(rng=rng)


def is_complete(task: Optional[ActiveTask], hand) -> bool:
    return evaluate(task, hand)


@dataclass(frozen=True)
class RoundState:
    """
    Current hand and mission, held by the caller.

    Transitions return a new RoundState; nothing is mutated in place.
    """
    hand: tuple[Card, ...] = ()
    task: Optional[ActiveTask] = None

    @property
    def completed(self) -> bool:
        return is_complete(self.task, self.hand)

    def new_mission(self, rng=None, history=None) -> "RoundState":
        """Request a new mission. The current hand is discarded."""
        task = request_new_task(rng)
        if history is not None:
            history.add_mission(task)
        return RoundState(hand=(), task=task)

    def deal(self, config: GameConfig = None, rng=None, history=None) -> "RoundState":
        """Deal a new hand against the current mission."""
        state = RoundState(hand=request_new_hand(config, rng), task=self.task)
        if history is not None and self.task is not None:
            history.add_deal(state.hand, state.completed)
        if state.completed:
            logger.info("Mission accomplished: %s with %s", self.task.text, describe_hand(state.hand))
        return state
