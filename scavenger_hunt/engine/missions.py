"""
Mission catalog and rule evaluation for Card Scavenger Hunt.

Each catalog entry pairs a display template (with ``{{name}}`` placeholders)
with typed parameter domains and a rule type. Selecting a mission resolves
the parameters, renders the text and builds the rule; evaluation is a single
dispatch on the rule's kind.
"""

import random
from collections import Counter
from dataclasses import dataclass
from enum import Enum, auto
from itertools import combinations
from types import MappingProxyType
from typing import ClassVar, Iterable, Mapping, Optional, Sequence, Union

from .deck import Card, Suit, RANKS, RED_SUITS, BLACK_SUITS
from ..logging_utils import get_logger

logger = get_logger(__name__)


class RuleKind(Enum):
    """One kind per catalog row."""
    EVEN_RANK_PAIR = auto()
    EXACT_SUIT_COUNT = auto()
    JOKER_PRESENT = auto()
    ROYAL_PAIR = auto()
    PAIR_SUM = auto()
    FLUSH = auto()
    RANK_PAIR = auto()
    BLACK_JACK = auto()
    RED_QUEEN = auto()
    ODD_RANK_COUNT = auto()


class ParamStyle(Enum):
    CHOICE = "choice"                 # One candidate drawn at random, shown as-is
    CONSTANT_LIST = "constant_list"   # Whole candidate list, shown comma-joined


@dataclass(frozen=True)
class ParamSpec:
    """A placeholder's domain and how it resolves and renders."""
    name: str
    candidates: tuple
    style: ParamStyle = ParamStyle.CHOICE

    def resolve(self, rng=None):
        if self.style == ParamStyle.CONSTANT_LIST:
            return tuple(self.candidates)
        return (rng or random).choice(self.candidates)

    def render(self, value) -> str:
        if self.style == ParamStyle.CONSTANT_LIST:
            return ", ".join(str(v) for v in value)
        return str(value)


# --- Rule variants ---

@dataclass(frozen=True)
class EvenRankPair:
    kind: ClassVar[RuleKind] = RuleKind.EVEN_RANK_PAIR


@dataclass(frozen=True)
class ExactSuitCount:
    count: int
    suit: Suit = Suit.HEARTS
    kind: ClassVar[RuleKind] = RuleKind.EXACT_SUIT_COUNT


@dataclass(frozen=True)
class JokerPresent:
    kind: ClassVar[RuleKind] = RuleKind.JOKER_PRESENT


@dataclass(frozen=True)
class RoyalPair:
    royal_ranks: tuple[str, ...]
    kind: ClassVar[RuleKind] = RuleKind.ROYAL_PAIR


@dataclass(frozen=True)
class PairSum:
    target: int
    kind: ClassVar[RuleKind] = RuleKind.PAIR_SUM


@dataclass(frozen=True)
class Flush:
    count: int
    kind: ClassVar[RuleKind] = RuleKind.FLUSH


@dataclass(frozen=True)
class RankPair:
    rank: str
    kind: ClassVar[RuleKind] = RuleKind.RANK_PAIR


@dataclass(frozen=True)
class BlackJack:
    black_suits: tuple[Suit, ...]
    kind: ClassVar[RuleKind] = RuleKind.BLACK_JACK


@dataclass(frozen=True)
class RedQueen:
    kind: ClassVar[RuleKind] = RuleKind.RED_QUEEN


@dataclass(frozen=True)
class OddRankCount:
    count: int
    kind: ClassVar[RuleKind] = RuleKind.ODD_RANK_COUNT


Rule = Union[
    EvenRankPair, ExactSuitCount, JokerPresent, RoyalPair, PairSum,
    Flush, RankPair, BlackJack, RedQueen, OddRankCount,
]


@dataclass(frozen=True)
class TaskDefinition:
    """Static catalog entry."""
    template: str
    rule_type: type
    params: tuple[ParamSpec, ...] = ()

    @property
    def kind(self) -> RuleKind:
        return self.rule_type.kind

    def param_specs(self) -> dict[str, ParamSpec]:
        return {p.name: p for p in self.params}


@dataclass(frozen=True)
class ActiveTask:
    """A resolved mission: display text, typed rule and resolved parameters."""
    text: str
    rule: Rule
    # (name, value) pairs; read through .params
    param_items: tuple = ()

    @property
    def params(self) -> Mapping:
        """Resolved parameters, read-only."""
        return MappingProxyType(dict(self.param_items))

    @property
    def kind(self) -> RuleKind:
        return self.rule.kind


CATALOG: list[TaskDefinition] = [
    TaskDefinition("Find a Pair of Even Ranks", EvenRankPair),
    TaskDefinition(
        "Find exactly {{count}} Heart cards", ExactSuitCount,
        (ParamSpec("count", (3,)),),
    ),
    TaskDefinition("Find a Joker", JokerPresent),
    TaskDefinition(
        "Find a Royal Pair ({{royal_ranks}})", RoyalPair,
        (ParamSpec("royal_ranks", ("J", "Q", "K", "A"), ParamStyle.CONSTANT_LIST),),
    ),
    TaskDefinition(
        "Find two cards that add up to {{target}}", PairSum,
        (ParamSpec("target", (10, 12, 15, 16)),),
    ),
    TaskDefinition(
        "Find a Flush ({{count}} cards of the same suit)", Flush,
        (ParamSpec("count", (3, 4)),),
    ),
    TaskDefinition(
        "Find a pair of {{rank}}s", RankPair,
        # Number cards only
        (ParamSpec("rank", tuple(RANKS[:9])),),
    ),
    TaskDefinition(
        "Find a Black Jack (a Jack of {{black_suits}})", BlackJack,
        (ParamSpec("black_suits", BLACK_SUITS, ParamStyle.CONSTANT_LIST),),
    ),
    TaskDefinition("Find a Red Queen", RedQueen),
    TaskDefinition(
        "Find {{count}} Odd numbered cards", OddRankCount,
        (ParamSpec("count", (3,)),),
    ),
]


# --- Rule checks ---

def _ranked(hand: Sequence[Card]) -> list[Card]:
    """Cards with a rank value (jokers dropped)."""
    return [c for c in hand if not c.is_joker]


def _check_even_rank_pair(rule: EvenRankPair, hand: Sequence[Card]) -> bool:
    return sum(1 for c in _ranked(hand) if c.value % 2 == 0) >= 2


def _check_exact_suit_count(rule: ExactSuitCount, hand: Sequence[Card]) -> bool:
    return sum(1 for c in hand if c.suit == rule.suit) == rule.count


def _check_joker_present(rule: JokerPresent, hand: Sequence[Card]) -> bool:
    return any(c.is_joker for c in hand)


def _check_royal_pair(rule: RoyalPair, hand: Sequence[Card]) -> bool:
    return sum(1 for c in _ranked(hand) if c.rank in rule.royal_ranks) >= 2


def _check_pair_sum(rule: PairSum, hand: Sequence[Card]) -> bool:
    # combinations() pairs distinct positions, never a card with itself
    return any(a.value + b.value == rule.target
               for a, b in combinations(_ranked(hand), 2))


def _check_flush(rule: Flush, hand: Sequence[Card]) -> bool:
    suit_counts = Counter(c.suit for c in _ranked(hand))
    return any(n >= rule.count for n in suit_counts.values())


def _check_rank_pair(rule: RankPair, hand: Sequence[Card]) -> bool:
    return sum(1 for c in _ranked(hand) if c.rank == rule.rank) >= 2


def _check_black_jack(rule: BlackJack, hand: Sequence[Card]) -> bool:
    return any(c.rank == "J" and c.suit in rule.black_suits for c in hand)


def _check_red_queen(rule: RedQueen, hand: Sequence[Card]) -> bool:
    return any(c.rank == "Q" and c.suit in RED_SUITS for c in hand)


def _check_odd_rank_count(rule: OddRankCount, hand: Sequence[Card]) -> bool:
    return sum(1 for c in _ranked(hand) if c.value % 2 == 1) >= rule.count


_CHECKS = {
    RuleKind.EVEN_RANK_PAIR: _check_even_rank_pair,
    RuleKind.EXACT_SUIT_COUNT: _check_exact_suit_count,
    RuleKind.JOKER_PRESENT: _check_joker_present,
    RuleKind.ROYAL_PAIR: _check_royal_pair,
    RuleKind.PAIR_SUM: _check_pair_sum,
    RuleKind.FLUSH: _check_flush,
    RuleKind.RANK_PAIR: _check_rank_pair,
    RuleKind.BLACK_JACK: _check_black_jack,
    RuleKind.RED_QUEEN: _check_red_queen,
    RuleKind.ODD_RANK_COUNT: _check_odd_rank_count,
}


def check_rule(rule: Rule, hand: Sequence[Card]) -> bool:
    """Check whether a hand satisfies a rule."""
    return _CHECKS[rule.kind](rule, hand)


# --- Resolution and rendering ---

def render_template(template: str, params: dict,
                    specs: Optional[dict[str, ParamSpec]] = None) -> str:
    """Substitute every {{name}} placeholder with its rendered value."""
    specs = specs or {}
    text = template
    for name, value in params.items():
        spec = specs.get(name)
        if spec is None:
            # Undeclared parameter: lists join, everything else is str()
            style = ParamStyle.CONSTANT_LIST if isinstance(value, (list, tuple)) else ParamStyle.CHOICE
            spec = ParamSpec(name, (), style)
        text = text.replace("{{" + name + "}}", spec.render(value))
    return text


def resolve_params(definition: TaskDefinition, rng=None) -> dict:
    """Pick a concrete value for each of the definition's parameters."""
    return {spec.name: spec.resolve(rng) for spec in definition.params}


def build_task(definition: TaskDefinition, params: dict) -> ActiveTask:
    text = render_template(definition.template, params, definition.param_specs())
    return ActiveTask(text=text, rule=definition.rule_type(**params), param_items=tuple(params.items()))


def select_task(catalog: Optional[Sequence[TaskDefinition]] = None, rng=None) -> ActiveTask:
    """Pick a mission uniformly from the catalog and resolve it."""
    catalog = CATALOG if catalog is None else catalog
    if not catalog:
        raise ValueError("Task catalog is empty")

    rng = rng or random
    definition = rng.choice(catalog)
    task = build_task(definition, resolve_params(definition, rng))
    logger.debug("Selected mission %s: %s", definition.kind.name, task.text)
    return task


def get_definition(kind: RuleKind, catalog: Optional[Iterable[TaskDefinition]] = None) -> TaskDefinition:
    """Look up a catalog entry by rule kind."""
    for definition in (CATALOG if catalog is None else catalog):
        if definition.kind == kind:
            return definition
    raise ValueError(f"No mission defined for {kind.name}")


def task_for(kind: RuleKind, rng=None, **overrides) -> ActiveTask:
    """
    Build a mission of a specific kind.

    Parameters not given in ``overrides`` are resolved at random as usual.
    """
    definition = get_definition(kind)
    specs = definition.param_specs()
    unknown = set(overrides) - set(specs)
    if unknown:
        raise ValueError(f"Unknown parameters for {kind.name}: {sorted(unknown)}")

    params = resolve_params(definition, rng)
    for name, value in overrides.items():
        if specs[name].style == ParamStyle.CONSTANT_LIST:
            value = tuple(value)
        params[name] = value
    return build_task(definition, params)


def evaluate(task: Optional[ActiveTask], hand: Sequence[Card]) -> bool:
    """Whether the hand completes the task. False until both exist."""
    if task is None or not hand:
        return False
    return check_rule(task.rule, hand)
