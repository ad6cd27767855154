"""
Card Scavenger Hunt engine components.
"""

from .deck import Card, Deck, Suit, RANKS, RANK_VALUES, build_deck, shuffle, deal_hand
from .missions import (
    RuleKind, ParamStyle, ParamSpec, TaskDefinition, ActiveTask, CATALOG,
    check_rule, evaluate, render_template, select_task, task_for,
)
from .game import GameConfig, RoundState, request_new_hand, request_new_task, is_complete
from .history import SessionHistory, SessionEvent
