"""
Card Scavenger Hunt
"""

from .engine.deck import Card, Deck, Suit, build_deck, shuffle, deal_hand
from .engine.missions import RuleKind, ActiveTask, CATALOG, evaluate, select_task, task_for
from .engine.game import GameConfig, RoundState, request_new_hand, request_new_task, is_complete
from .engine.history import SessionHistory
from .simulator import Simulator, BatchResult

__version__ = "0.1.0"
