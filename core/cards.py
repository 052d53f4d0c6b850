"""Card and Deck classes - immutable card representations."""

import logging
from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterator

logger = logging.getLogger(__name__)


class Suit(Enum):
    """Card suits. Cosmetic only."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    def __str__(self) -> str:
        return _SUIT_SYMBOLS[self]


_SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}


class Rank(Enum):
    """Card ranks, Ace low (1) through King (13)."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        return _RANK_SYMBOLS[self]

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        if self == Rank.ACE:
            return 11
        return min(self.value, 10)

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE

    @property
    def is_ten_value(self) -> bool:
        """Check if this rank has a value of 10."""
        return self.value >= 10


_RANK_SYMBOLS = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the blackjack point value."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        return self.rank.is_ace

    @property
    def is_ten_value(self) -> bool:
        return self.rank.is_ten_value

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh' or '10d'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {symbol: rank for rank, symbol in _RANK_SYMBOLS.items()}
        rank_map["T"] = Rank.TEN

        suit_map = {symbol: suit for suit, symbol in _SUIT_SYMBOLS.items()}
        suit_map.update({"C": Suit.CLUBS, "D": Suit.DIAMONDS, "H": Suit.HEARTS, "S": Suit.SPADES})

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


class Deck:
    """A shoe of one or more shuffled 52-card decks.

    Drawing from an empty deck rebuilds and reshuffles the whole shoe first,
    so callers never see it run out.
    """

    def __init__(self, shoe: int = 1, rng: Random | None = None) -> None:
        """
        Initialize and shuffle a new shoe.

        Args:
            shoe: Number of 52-card decks (values below 1 are treated as 1)
            rng: Random number generator for shuffling; a fresh, OS-seeded
                generator is created when omitted
        """
        self._num_decks = max(1, shoe)
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self._reshuffle_count = 0
        self.reset()

    def reset(self) -> None:
        """Rebuild every card of the shoe and shuffle."""
        self._cards = [
            Card(rank, suit)
            for suit in Suit
            for rank in Rank
            for _ in range(self._num_decks)
        ]
        self.shuffle()

    def shuffle(self) -> None:
        """Shuffle the remaining cards in place.

        Fisher-Yates: each index from the last down to 1 is swapped with a
        uniformly chosen index at or below it.
        """
        for i in range(len(self._cards) - 1, 0, -1):
            j = self._rng.randint(0, i)
            self._cards[i], self._cards[j] = self._cards[j], self._cards[i]

    def draw(self) -> Card:
        """Draw a card from the top of the shoe, refilling it first if empty."""
        if not self._cards:
            self._reshuffle_count += 1
            logger.debug("Shoe exhausted, reshuffling %d cards", self.total_cards)
            self.reset()
        return self._cards.pop()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    @property
    def total_cards(self) -> int:
        """Return the total number of cards in a full shoe."""
        return self._num_decks * 52

    @property
    def num_decks(self) -> int:
        return self._num_decks

    @property
    def reshuffle_count(self) -> int:
        """Return how many times an empty shoe has been refilled on draw."""
        return self._reshuffle_count
