"""
Deck management for Card Scavenger Hunt.
Handles card creation, shuffling and dealing hands.
"""

import random
from dataclasses import dataclass, field
from typing import Optional
from enum import Enum


class Suit(Enum):
    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"
    SPADES = "♠"
    STAR = "★"  # Jokers only

    def __str__(self) -> str:
        return self.value


STANDARD_SUITS = [Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS, Suit.SPADES]
RED_SUITS = (Suit.HEARTS, Suit.DIAMONDS)
BLACK_SUITS = (Suit.CLUBS, Suit.SPADES)

RANKS = ["2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A"]
RANK_VALUES = {
    "2": 2, "3": 3, "4": 4, "5": 5, "6": 6, "7": 7, "8": 8, "9": 9, "10": 10,
    "J": 11, "Q": 12, "K": 13, "A": 14
}
JOKER_RANK = "Joker"
JOKER_COUNT = 2
DECK_SIZE = len(RANKS) * len(STANDARD_SUITS) + JOKER_COUNT  # 54


@dataclass(frozen=True)
class Card:
    rank: str
    suit: Suit

    @property
    def is_joker(self) -> bool:
        return self.rank == JOKER_RANK

    @property
    def value(self) -> Optional[int]:
        """Numeric rank value (2-14, ace high). Jokers have none."""
        if self.is_joker:
            return None
        return RANK_VALUES[self.rank]

    @property
    def color(self) -> str:
        if self.is_joker:
            return "purple"
        return "red" if self.suit in RED_SUITS else "black"

    def __str__(self) -> str:
        return f"{self.rank}{self.suit.value}"

    def __repr__(self) -> str:
        return self.__str__()


def joker() -> Card:
    return Card(JOKER_RANK, Suit.STAR)


def build_deck() -> list[Card]:
    """Build a fresh 54-card deck: suit-major, rank-minor, then two jokers."""
    cards = []
    for suit in STANDARD_SUITS:
        for rank in RANKS:
            cards.append(Card(rank=rank, suit=suit))
    for _ in range(JOKER_COUNT):
        cards.append(joker())
    return cards


def shuffle(deck: list[Card], rng: Optional[random.Random] = None) -> list[Card]:
    """
    Fisher-Yates shuffle.

    Walks from the last index down to 1, swapping each position with a
    uniformly chosen index in 0..i. The given list is permuted in place
    and returned.
    """
    rng = rng or random
    for i in range(len(deck) - 1, 0, -1):
        j = rng.randint(0, i)
        deck[i], deck[j] = deck[j], deck[i]
    return deck


def deal_hand(config=None, rng: Optional[random.Random] = None) -> tuple[Card, ...]:
    """Deal a random-sized hand from the front of a freshly shuffled deck."""
    rng = rng or random
    min_size = config.min_hand_size if config else 2
    max_size = config.max_hand_size if config else 5

    size = rng.randint(min_size, max_size)
    deck = Deck.standard_54()
    deck.shuffle(rng)
    # Rest of the deck is thrown away; every deal starts from a fresh one
    return tuple(deck.draw(size))


@dataclass
class Deck:
    cards: list[Card] = field(default_factory=list)

    @classmethod
    def standard_54(cls) -> "Deck":
        """Create a standard 52-card deck plus two jokers."""
        return cls(cards=build_deck())

    def shuffle(self, rng: Optional[random.Random] = None) -> None:
        """Shuffle the deck."""
        shuffle(self.cards, rng)

    def draw(self, n: int = 1) -> list[Card]:
        """Draw n cards from the front of the deck."""
        if n > len(self.cards):
            raise ValueError(f"Cannot draw {n} cards, only {len(self.cards)} remaining")
        drawn = self.cards[:n]
        self.cards = self.cards[n:]
        return drawn

    def cards_remaining(self) -> int:
        """Cards left to draw."""
        return len(self.cards)
