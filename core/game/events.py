"""Round events published by the engine.

The table scene listens for these instead of diffing hands every frame, and
the tests read them back to check the order cards left the shoe.
"""

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    """Everything the engine announces during a round.

    The trailing comments list the keys each event carries in ``data``.
    """

    ROUND_STARTED = auto()  # player, dealer
    ROUND_ENDED = auto()  # result, player_value, dealer_value

    CARD_DEALT = auto()  # card, hand, hand_value
    SHOE_SHUFFLED = auto()  # total_cards

    PLAYER_HIT = auto()  # hand_value
    PLAYER_STAND = auto()  # hand_value
    PLAYER_BLACKJACK = auto()
    PLAYER_BUSTS = auto()  # hand_value

    DEALER_HITS = auto()  # hand_value
    DEALER_STANDS = auto()  # hand_value
    DEALER_BUSTS = auto()  # hand_value
    DEALER_BLACKJACK = auto()

    PLAYER_WINS = auto()
    PLAYER_LOSES = auto()
    PUSH = auto()


@dataclass(frozen=True)
class GameEvent:
    """One thing that happened at the table, with its details in ``data``."""

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


Listener = Callable[[GameEvent], None]


class EventEmitter:
    """Fans engine events out to listeners and keeps a log of them.

    A listener registered without an event type hears every event, after
    the listeners registered for that event's type.
    """

    def __init__(self) -> None:
        self._listeners: defaultdict[EventType | None, list[Listener]] = defaultdict(list)
        self._log: list[GameEvent] = []

    def subscribe(self, listener: Listener, event_type: EventType | None = None) -> None:
        self._listeners[event_type].append(listener)

    def emit(self, event: GameEvent) -> None:
        self._log.append(event)
        for key in (event.event_type, None):
            for listener in tuple(self._listeners.get(key, ())):
                listener(event)

    def emit_new(self, event_type: EventType, **data: Any) -> GameEvent:
        """Build an event from keyword data, emit it and hand it back."""
        event = GameEvent(event_type, data)
        self.emit(event)
        return event

    @property
    def history(self) -> list[GameEvent]:
        """Events emitted so far, oldest first. The list is a copy."""
        return list(self._log)
