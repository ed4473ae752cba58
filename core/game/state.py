"""Round state enumeration."""

from enum import Enum, auto


class RoundState(Enum):
    """
    Round state machine states.

    Flow: DEAL → PLAYER_TURN → DEALER_TURN → RESOLVED
    """

    # Deck built, nothing dealt yet
    DEAL = auto()

    # Player decides hit or stand
    PLAYER_TURN = auto()

    # Dealer draws by fixed rule
    DEALER_TURN = auto()

    # Outcome known
    RESOLVED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()
