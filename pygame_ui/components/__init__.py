"""UI components for the blackjack table."""

from pygame_ui.components.button import Button, ButtonState
from pygame_ui.components.card import CardView, draw_card_back, draw_hand

__all__ = [
    "Button",
    "ButtonState",
    "CardView",
    "draw_card_back",
    "draw_hand",
]
