"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from typing import Iterator, NamedTuple

from core.cards import Card


class HandValue(NamedTuple):
    """Blackjack value of a hand."""

    best: int
    is_soft: bool


@dataclass
class Hand:
    """A blackjack hand with value calculation."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    def value(self) -> HandValue:
        """Return the best total and whether the hand is soft.

        The total may exceed 21; callers check for a bust separately.
        """
        return HandValue(self.total, self.is_soft)

    @property
    def total(self) -> int:
        """
        Calculate the best hand value.

        Returns the highest value that doesn't bust, or the lowest bust value.
        """
        total = 0
        aces = 0

        for card in self.cards:
            if card.is_ace:
                aces += 1
                total += 11
            else:
                total += card.value

        # Reduce aces from 11 to 1 as needed
        while total > 21 and aces > 0:
            total -= 10
            aces -= 1

        return total

    @property
    def is_soft(self) -> bool:
        """
        Check if the hand is soft (has an ace counted as 11).

        A hand is soft if it contains an ace that can be counted as 11
        without busting.
        """
        if not any(card.is_ace for card in self.cards):
            return False

        # Calculate value without any aces as 11
        total_hard = sum(1 if card.is_ace else card.value for card in self.cards)

        # If we can add 10 (making one ace worth 11) without busting, it's soft
        return total_hard + 10 <= 21

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural (21 with 2 cards)."""
        return len(self.cards) == 2 and self.total == 21

    @property
    def is_busted(self) -> bool:
        return self.total > 21

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        if not self.cards:
            return "<empty>"
        return " ".join(str(card) for card in self.cards)

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.total})"


def evaluate_hands(player_hand: Hand, dealer_hand: Hand) -> int:
    """
    Compare player and dealer hands.

    Returns:
        1 if player wins
        -1 if dealer wins
        0 if push (tie)
    """
    player_value = player_hand.total
    dealer_value = dealer_hand.total

    # Player busts always loses, even if the dealer busts too
    if player_value > 21:
        return -1

    if dealer_value > 21:
        return 1

    if player_value > dealer_value:
        return 1
    if dealer_value > player_value:
        return -1
    return 0
