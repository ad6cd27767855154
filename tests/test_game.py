import random

import pytest

from scavenger_hunt.engine.deck import Card, Suit, joker
from scavenger_hunt.engine.game import (
    GameConfig, RoundState, is_complete, request_new_hand, request_new_task,
)
from scavenger_hunt.engine.history import SessionHistory
from scavenger_hunt.engine.missions import ActiveTask, RuleKind, task_for


def test_request_new_hand_size():
    rng = random.Random(9)
    for _ in range(100):
        assert 2 <= len(request_new_hand(rng=rng)) <= 5


def test_request_new_task_returns_resolved_task():
    task = request_new_task(random.Random(4))
    assert isinstance(task, ActiveTask)
    assert "{{" not in task.text


def test_is_complete_before_anything_exists():
    assert not is_complete(None, ())
    assert not RoundState().completed


def test_new_mission_clears_hand():
    rng = random.Random(1)
    state = RoundState().new_mission(rng).deal(rng=rng)
    assert state.hand

    next_state = state.new_mission(rng)
    assert next_state.hand == ()
    assert next_state.task is not None
    # Old state untouched
    assert state.hand


def test_deal_keeps_task():
    rng = random.Random(2)
    state = RoundState().new_mission(rng)
    dealt = state.deal(rng=rng)
    assert dealt.task is state.task
    assert 2 <= len(dealt.hand) <= 5


def test_completed_tracks_hand():
    task = task_for(RuleKind.JOKER_PRESENT)
    assert RoundState(hand=(Card("2", Suit.HEARTS), joker()), task=task).completed
    assert not RoundState(hand=(Card("2", Suit.HEARTS), Card("3", Suit.DIAMONDS)), task=task).completed


def test_deal_records_history():
    rng = random.Random(3)
    history = SessionHistory()
    state = RoundState().new_mission(rng, history)
    for _ in range(3):
        state = state.deal(rng=rng, history=history)

    summary = history.to_dict()["summary"]
    assert summary["missions"] == 1
    assert summary["deals"] == 3


def test_deal_without_task_is_not_recorded():
    history = SessionHistory()
    RoundState().deal(rng=random.Random(0), history=history)
    assert history.events == []


def test_config_validation():
    with pytest.raises(ValueError):
        GameConfig(min_hand_size=5, max_hand_size=2)
    with pytest.raises(ValueError):
        GameConfig(min_hand_size=0)
    with pytest.raises(ValueError):
        GameConfig(max_hand_size=60)


def test_config_overrides_ignore_unknown_keys():
    config = GameConfig().with_overrides({"max_hand_size": 3, "deal_delay": 0, "bogus": 1})
    assert config.max_hand_size == 3
    assert config.deal_delay == 0
    assert config.min_hand_size == 2


def test_round_state_is_hashable():
    task = task_for(RuleKind.PAIR_SUM, target=10)
    state = RoundState(hand=(Card("6", Suit.CLUBS), Card("4", Suit.DIAMONDS)), task=task)
    assert hash(state) == hash(RoundState(hand=state.hand, task=task))
    assert state.completed
