"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Deck, Rank, Suit
from core.hand import Hand, HandValue

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "Hand",
    "HandValue",
]
