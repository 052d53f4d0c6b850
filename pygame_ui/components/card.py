"""Card face rendering for the table."""

from typing import Optional

import pygame

from core.cards import Card, Suit
from core.hand import Hand
from pygame_ui.config import COLORS, DIMENSIONS

RED_SUITS = (Suit.HEARTS, Suit.DIAMONDS)

# Fonts with the suit glyphs; pygame falls back to its default font otherwise
SYMBOL_FONTS = "dejavusans,segoeuisymbol,arialunicodems,arial"


class CardView:
    """Draws a face-up card using the card's own display string."""

    def __init__(self, card: Card):
        self.card = card
        self._font: Optional[pygame.font.Font] = None

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont(SYMBOL_FONTS, 28)
        return self._font

    @property
    def color(self) -> tuple[int, int, int]:
        return COLORS.CARD_RED if self.card.suit in RED_SUITS else COLORS.CARD_BLACK

    def draw(self, surface: pygame.Surface, x: int, y: int) -> None:
        """Draw the card with its top-left corner at (x, y)."""
        rect = pygame.Rect(x, y, DIMENSIONS.CARD_WIDTH, DIMENSIONS.CARD_HEIGHT)
        radius = DIMENSIONS.CARD_CORNER_RADIUS
        pygame.draw.rect(surface, COLORS.CARD_WHITE, rect, border_radius=radius)
        pygame.draw.rect(surface, COLORS.CARD_BORDER, rect, width=2, border_radius=radius)

        label = self.font.render(str(self.card), True, self.color)
        surface.blit(label, label.get_rect(center=rect.center))


def draw_hand(
    surface: pygame.Surface,
    hand: Hand,
    center_x: int,
    y: int,
    hide_hole_card: bool = False,
) -> None:
    """Draw a hand's cards in a row centered on ``center_x``.

    With ``hide_hole_card`` every card after the first is drawn face down.
    """
    if not hand.cards:
        return
    row_width = DIMENSIONS.CARD_SPACING * (len(hand) - 1) + DIMENSIONS.CARD_WIDTH
    x = center_x - row_width // 2
    for i, card in enumerate(hand):
        if hide_hole_card and i > 0:
            draw_card_back(surface, x, y)
        else:
            CardView(card).draw(surface, x, y)
        x += DIMENSIONS.CARD_SPACING


def draw_card_back(surface: pygame.Surface, x: int, y: int) -> None:
    """Draw a face-down card with its top-left corner at (x, y)."""
    rect = pygame.Rect(x, y, DIMENSIONS.CARD_WIDTH, DIMENSIONS.CARD_HEIGHT)
    radius = DIMENSIONS.CARD_CORNER_RADIUS
    pygame.draw.rect(surface, COLORS.CARD_BACK, rect, border_radius=radius)
    pygame.draw.rect(surface, COLORS.CARD_BORDER, rect, width=2, border_radius=radius)
    pygame.draw.rect(surface, COLORS.CARD_BACK_PATTERN, rect.inflate(-14, -14), width=2, border_radius=radius)
