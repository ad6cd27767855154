import random
from collections import Counter

import pytest

from scavenger_hunt.engine.deck import (
    Card, Deck, Suit, DECK_SIZE, build_deck, deal_hand, joker, shuffle,
)
from scavenger_hunt.engine.game import GameConfig


def test_build_deck_has_54_cards_and_two_jokers():
    deck = build_deck()
    assert len(deck) == DECK_SIZE == 54

    jokers = [c for c in deck if c.is_joker]
    ranked = {(c.rank, c.suit) for c in deck if not c.is_joker}
    assert len(jokers) == 2
    assert len(ranked) == 52


def test_build_deck_is_suit_major_rank_minor():
    deck = build_deck()
    assert deck[0] == Card("2", Suit.HEARTS)
    assert deck[12] == Card("A", Suit.HEARTS)
    assert deck[13] == Card("2", Suit.DIAMONDS)
    assert deck[51] == Card("A", Suit.SPADES)
    assert deck[52].is_joker and deck[53].is_joker
    assert build_deck() == deck


def test_card_properties():
    assert Card("Q", Suit.DIAMONDS).color == "red"
    assert Card("J", Suit.SPADES).color == "black"
    assert joker().color == "purple"
    assert Card("A", Suit.CLUBS).value == 14
    assert Card("10", Suit.HEARTS).value == 10
    assert joker().value is None
    assert str(Card("10", Suit.HEARTS)) == "10♥"


def test_shuffle_is_permutation():
    deck = build_deck()
    shuffled = shuffle(list(deck), random.Random(42))
    assert len(shuffled) == len(deck)
    assert Counter(shuffled) == Counter(deck)
    assert shuffled != deck


def test_shuffle_is_reproducible_with_seed():
    a = shuffle(build_deck(), random.Random(7))
    b = shuffle(build_deck(), random.Random(7))
    assert a == b


def test_shuffle_moves_every_position():
    # Over many shuffles the first card should land everywhere
    rng = random.Random(1)
    seen = set()
    for _ in range(2000):
        deck = shuffle(build_deck(), rng)
        seen.add(deck.index(Card("2", Suit.HEARTS)))
    assert len(seen) == DECK_SIZE


def test_deal_hand_sizes_and_uniqueness():
    rng = random.Random(3)
    sizes = set()
    full_deck = set(build_deck())
    for _ in range(500):
        hand = deal_hand(rng=rng)
        sizes.add(len(hand))
        assert 2 <= len(hand) <= 5
        assert all(c in full_deck for c in hand)
        # Jokers are equal to each other; ranked cards must not repeat
        ranked = [c for c in hand if not c.is_joker]
        assert len(set(ranked)) == len(ranked)
    assert sizes == {2, 3, 4, 5}


def test_deal_hand_respects_config():
    rng = random.Random(5)
    config = GameConfig(min_hand_size=4, max_hand_size=4)
    for _ in range(20):
        assert len(deal_hand(config, rng)) == 4


def test_deck_draw_from_front():
    deck = Deck.standard_54()
    drawn = deck.draw(3)
    assert drawn == [Card("2", Suit.HEARTS), Card("3", Suit.HEARTS), Card("4", Suit.HEARTS)]
    assert deck.cards_remaining() == 51
    assert deck.cards[0] == Card("5", Suit.HEARTS)


def test_deck_draw_too_many_fails():
    deck = Deck.standard_54()
    deck.draw(50)
    with pytest.raises(ValueError):
        deck.draw(5)
