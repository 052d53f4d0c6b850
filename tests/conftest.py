"""Pytest fixtures for MockJack tests."""

import pytest
from random import Random

from core.cards import Card, Deck
from core.hand import Hand
from core.game import BlackjackGame


def make_hand(*cards: str) -> Hand:
    """Build a hand from card strings like 'AS', '10H', 'K♣'."""
    return Hand(cards=[Card.from_string(card) for card in cards])


def stack_deck(deck: Deck, *cards: str) -> None:
    """Make the deck deal exactly ``cards`` in order, then run dry.

    Once the stacked cards are gone the deck refills itself as usual.
    """
    deck._cards = [Card.from_string(card) for card in reversed(cards)]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled single-deck shoe."""
    return Deck(shoe=1, rng=rng)


@pytest.fixture
def shoe(rng):
    """A shuffled 6-deck shoe."""
    return Deck(shoe=6, rng=rng)


@pytest.fixture
def empty_hand():
    """An empty player hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return make_hand("AS", "KH")


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return make_hand("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand("10S", "6H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return make_hand("10S", "6H", "KC")


@pytest.fixture
def game(rng):
    """A new single-deck game instance."""
    return BlackjackGame(num_decks=1, rng=rng)


@pytest.fixture
def events(game):
    """Every event the game emits, in order."""
    received = []
    game.subscribe(received.append)
    return received


@pytest.fixture
def hand_of():
    """Factory building a hand from card strings."""
    return make_hand


@pytest.fixture
def stacked():
    """Factory stacking a deck so it deals the given cards in order."""
    return stack_deck
