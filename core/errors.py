"""Engine errors.

These signal broken sequencing inside a round, never bad user input.
"""


class BlackjackError(Exception):
    """Base class for engine invariant violations."""


class ExhaustedDeckError(BlackjackError, IndexError):
    """Raised when every card of the deck has already been drawn this round."""


class HandFullError(BlackjackError):
    """Raised when a participant would hold more cards than the hand bound."""


class InvalidActionError(BlackjackError):
    """Raised when a round action is attempted in the wrong state."""

    def __init__(self, action: str, state: str) -> None:
        super().__init__(f"Cannot {action} in state {state}")
        self.action = action
        self.state = state
