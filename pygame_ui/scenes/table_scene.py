"""Blackjack table scene - the only playable scene."""

import logging
from typing import List, Optional

import pygame

from core.game import BlackjackGame, EventType, GameEvent, GameState, Outcome
from pygame_ui.components.button import Button
from pygame_ui.components.card import draw_hand
from pygame_ui.config import COLORS, DIMENSIONS

logger = logging.getLogger(__name__)

RESULT_COLORS = {
    Outcome.PLAYER_WINS: COLORS.RESULT_WIN,
    Outcome.DEALER_WINS: COLORS.RESULT_LOSE,
    Outcome.PUSH: COLORS.RESULT_PUSH,
}


class TableScene:
    """Draws the dealer and player hands and maps input to engine actions.

    Keys: SPACE/ENTER deal, H hit, S stand, ESC quit.

    The scene manager calls ``on_enter`` when the table is shown and
    ``on_exit`` when it is replaced; the main loop drives ``handle_event``,
    ``update`` and ``draw`` in between.
    """

    def __init__(self, game: BlackjackGame):
        self.game = game
        self.shuffle_notice = 0.0
        self.buttons: List[Button] = []
        self._font: Optional[pygame.font.Font] = None
        self._small_font: Optional[pygame.font.Font] = None
        self._is_active = False

        self.game.subscribe(self._on_shuffle, EventType.SHOE_SHUFFLED)

    @property
    def is_active(self) -> bool:
        return self._is_active

    def on_enter(self) -> None:
        """Build the button row for the game's current state."""
        self._is_active = True
        self._setup_buttons()
        self._update_button_states()

    def on_exit(self) -> None:
        self._is_active = False
        self.shuffle_notice = 0.0

    def _setup_buttons(self) -> None:
        """Create the Deal/Hit/Stand row."""
        y = DIMENSIONS.BUTTON_ROW_Y
        spacing = DIMENSIONS.BUTTON_WIDTH + 20
        cx = DIMENSIONS.CENTER_X
        self.deal_button = Button(cx - spacing, y, "Deal", on_click=self._on_deal, hotkey="SPACE")
        self.hit_button = Button(cx, y, "Hit", on_click=self._on_hit, hotkey="H")
        self.stand_button = Button(cx + spacing, y, "Stand", on_click=self._on_stand, hotkey="S")
        self.buttons = [self.deal_button, self.hit_button, self.stand_button]

    def _update_button_states(self) -> None:
        self.deal_button.set_enabled(self.game.can_deal)
        self.hit_button.set_enabled(self.game.can_hit)
        self.stand_button.set_enabled(self.game.can_stand)

    def _on_deal(self) -> None:
        self.game.deal()
        self._update_button_states()

    def _on_hit(self) -> None:
        self.game.hit()
        self._update_button_states()

    def _on_stand(self) -> None:
        self.game.stand()
        self._update_button_states()

    def _on_shuffle(self, event: GameEvent) -> None:
        logger.info("Shoe reshuffled (%s cards)", event.data.get("total_cards"))
        self.shuffle_notice = 1.5

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Handle input events."""
        for button in self.buttons:
            if button.handle_event(event):
                return True

        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_SPACE, pygame.K_RETURN):
                self._on_deal()
                return True
            elif event.key == pygame.K_h:
                self._on_hit()
                return True
            elif event.key == pygame.K_s:
                self._on_stand()
                return True
            elif event.key == pygame.K_ESCAPE:
                pygame.event.post(pygame.event.Event(pygame.QUIT))
                return True

        return False

    def update(self, dt: float) -> None:
        self.shuffle_notice = max(0.0, self.shuffle_notice - dt)

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(None, 36)
        return self._font

    @property
    def small_font(self) -> pygame.font.Font:
        if self._small_font is None:
            self._small_font = pygame.font.Font(None, 24)
        return self._small_font

    def _blit_centered(
        self,
        surface: pygame.Surface,
        text: str,
        y: int,
        color,
        font: Optional[pygame.font.Font] = None,
    ) -> None:
        rendered = (font or self.font).render(text, True, color)
        surface.blit(rendered, rendered.get_rect(center=(DIMENSIONS.CENTER_X, y)))

    def draw(self, surface: pygame.Surface) -> None:
        """Draw all table elements."""
        surface.fill(COLORS.FELT_GREEN)
        for x in range(0, DIMENSIONS.SCREEN_WIDTH, 40):
            pygame.draw.line(surface, COLORS.FELT_DARK, (x, 0), (x, DIMENSIONS.SCREEN_HEIGHT), 1)

        state = self.game.state
        hide_hole = state == GameState.PLAYER_TURN

        # Dealer
        dealer_label = "DEALER"
        if state in (GameState.DEALER_TURN, GameState.ROUND_OVER):
            dealer_label = f"DEALER ({self.game.dealer.total})"
        self._blit_centered(surface, dealer_label, DIMENSIONS.DEALER_HAND_Y - 25, COLORS.GOLD)
        draw_hand(surface, self.game.dealer, DIMENSIONS.CENTER_X, DIMENSIONS.DEALER_HAND_Y, hide_hole)

        # Player
        player_label = "PLAYER"
        if self.game.player.cards:
            best, is_soft = self.game.player.value()
            player_label = f"PLAYER ({'soft ' if is_soft else ''}{best})"
        self._blit_centered(surface, player_label, DIMENSIONS.PLAYER_HAND_Y - 25, COLORS.GOLD)
        draw_hand(surface, self.game.player, DIMENSIONS.CENTER_X, DIMENSIONS.PLAYER_HAND_Y)

        # Result or prompt
        if self.game.result:
            color = RESULT_COLORS.get(self.game.outcome, COLORS.TEXT_WHITE)
            self._blit_centered(surface, self.game.result, 270, color)
        elif state == GameState.WAITING_DEAL:
            self._blit_centered(surface, "Press SPACE to deal", 270, COLORS.TEXT_WHITE)

        if self.shuffle_notice > 0:
            self._blit_centered(surface, "Shuffling...", 60, COLORS.TEXT_MUTED, self.small_font)

        # State indicator
        status = f"{state} | {self.game.deck.cards_remaining} cards in shoe"
        self._blit_centered(surface, status, 20, COLORS.TEXT_MUTED, self.small_font)

        for button in self.buttons:
            button.draw(surface)
