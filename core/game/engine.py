"""Blackjack round engine with state machine."""

import logging
from random import Random
from typing import Callable

from transitions import Machine

from core.cards import Card, Deck
from core.hand import Hand, evaluate_hands
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.state import GameState, Outcome

logger = logging.getLogger(__name__)


class BlackjackGame:
    """
    Single-player blackjack round engine using a state machine.

    This is the core game logic, completely UI-agnostic. The presentation
    layer calls deal/hit/stand and reads state, result and the two hands
    back. Actions attempted in the wrong state are silently ignored and
    return False; nothing here raises.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        # Dealing is allowed at any time, even mid-round
        {"trigger": "begin_round", "source": "*", "dest": "player_turn"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "end_round", "source": ["player_turn", "dealer_turn"], "dest": "round_over"},
    ]

    def __init__(
        self,
        num_decks: int = 1,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a new blackjack game.

        Args:
            num_decks: Number of 52-card decks in the shoe (minimum 1)
            rng: Random number generator for reproducible games
        """
        self.deck = Deck(shoe=num_decks, rng=rng)
        self.player = Hand()
        self.dealer = Hand()
        self.result = ""
        self.outcome: Outcome | None = None
        self.events = EventEmitter()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="waiting_deal",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def deal(self) -> bool:
        """
        Start a new round: two cards each, player first.

        A 21 in either hand ends the round immediately.
        """
        self.player.clear()
        self.dealer.clear()
        self.result = ""
        self.outcome = None
        self.begin_round()

        # Deal: player, dealer, player, dealer
        self._deal_card_to_hand(self.player)
        self._deal_card_to_hand(self.dealer)
        self._deal_card_to_hand(self.player)
        self._deal_card_to_hand(self.dealer)

        self.events.emit_new(
            EventType.ROUND_STARTED,
            player=str(self.player),
            dealer=str(self.dealer),
        )
        logger.info("Round started - Player: %s, Dealer: %s", self.player, self.dealer)

        player_natural = self.player.total == 21
        dealer_natural = self.dealer.total == 21
        if player_natural:
            self.events.emit_new(EventType.PLAYER_BLACKJACK)
        if dealer_natural:
            self.events.emit_new(EventType.DEALER_BLACKJACK)
        if player_natural or dealer_natural:
            self._finish_round()

        return True

    def hit(self) -> bool:
        """Player hits (takes another card)."""
        if self.state != GameState.PLAYER_TURN:
            logger.debug("Ignoring hit in state %s", self.state)
            return False

        self._deal_card_to_hand(self.player)
        self.events.emit_new(EventType.PLAYER_HIT, hand_value=self.player.total)

        if self.player.is_busted:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=self.player.total)
            self._finish_round()

        return True

    def stand(self) -> bool:
        """Player stands; the dealer plays out and the round is resolved."""
        if self.state != GameState.PLAYER_TURN:
            logger.debug("Ignoring stand in state %s", self.state)
            return False

        self.events.emit_new(EventType.PLAYER_STAND, hand_value=self.player.total)
        self.player_done()
        self._play_dealer()
        self._finish_round()
        return True

    @property
    def can_deal(self) -> bool:
        """Dealing is always allowed."""
        return True

    @property
    def can_hit(self) -> bool:
        return self.state == GameState.PLAYER_TURN

    @property
    def can_stand(self) -> bool:
        return self.state == GameState.PLAYER_TURN

    def _deal_card_to_hand(self, hand: Hand) -> Card:
        """Deal a card to a hand."""
        reshuffles = self.deck.reshuffle_count
        card = self.deck.draw()
        if self.deck.reshuffle_count != reshuffles:
            self.events.emit_new(EventType.SHOE_SHUFFLED, total_cards=self.deck.total_cards)

        hand.add_card(card)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card),
            hand="dealer" if hand is self.dealer else "player",
            hand_value=hand.total,
        )
        logger.debug("Dealt %s, %d cards left in shoe", card, len(self.deck))
        return card

    def _play_dealer(self) -> None:
        """Dealer draws to 17, hitting soft 17."""
        while self._dealer_should_hit():
            self._deal_card_to_hand(self.dealer)
            self.events.emit_new(EventType.DEALER_HITS, hand_value=self.dealer.total)

        if self.dealer.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=self.dealer.total)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer.total)

    def _dealer_should_hit(self) -> bool:
        """Determine if dealer should hit."""
        value, is_soft = self.dealer.value()
        if value < 17:
            return True
        return value == 17 and is_soft

    def _finish_round(self) -> None:
        """Resolve the round and build the result message."""
        self.end_round()

        player_value = self.player.total
        dealer_value = self.dealer.total

        if player_value > 21:
            self.result = f"Player busts ({player_value}). Dealer wins."
        elif dealer_value > 21:
            self.result = f"Dealer busts ({dealer_value}). Player wins!"
        elif player_value > dealer_value:
            self.result = f"Player wins! ({player_value} vs {dealer_value})"
        elif player_value < dealer_value:
            self.result = f"Dealer wins. ({dealer_value} vs {player_value})"
        else:
            self.result = f"Push. ({player_value} vs {dealer_value})"

        outcome = evaluate_hands(self.player, self.dealer)
        if outcome == 1:
            self.outcome = Outcome.PLAYER_WINS
            self.events.emit_new(EventType.PLAYER_WINS)
        elif outcome == -1:
            self.outcome = Outcome.DEALER_WINS
            self.events.emit_new(EventType.PLAYER_LOSES)
        else:
            self.outcome = Outcome.PUSH
            self.events.emit_new(EventType.PUSH)

        self.events.emit_new(
            EventType.ROUND_ENDED,
            result=self.result,
            player_value=player_value,
            dealer_value=dealer_value,
        )
        logger.info("Round over: %s", self.result)


def new_game(shoe_count: int = 1, rng: Random | None = None) -> BlackjackGame:
    """Create a game whose shoe holds ``shoe_count`` decks (at least one)."""
    return BlackjackGame(num_decks=shoe_count, rng=rng)
