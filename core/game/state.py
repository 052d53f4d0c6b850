"""Game state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Game state machine states.

    Flow: WAITING_DEAL → PLAYER_TURN → DEALER_TURN → ROUND_OVER → PLAYER_TURN ...

    WAITING_DEAL is only seen before the first deal. The transitions
    themselves live on the engine's state machine.
    """

    WAITING_DEAL = auto()
    PLAYER_TURN = auto()
    DEALER_TURN = auto()
    ROUND_OVER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


class Outcome(Enum):
    """Winner of a finished round."""

    PLAYER_WINS = auto()
    DEALER_WINS = auto()
    PUSH = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()
