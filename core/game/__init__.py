"""Game engine and state management."""

from core.game.events import EventEmitter, GameEvent, EventType
from core.game.state import GameState, Outcome
from core.game.engine import BlackjackGame, new_game

__all__ = [
    "EventEmitter",
    "GameEvent",
    "EventType",
    "GameState",
    "Outcome",
    "BlackjackGame",
    "new_game",
]
