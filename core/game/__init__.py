"""Round controller and state management."""

from core.game.events import GameEvent, EventType, RoundLog
from core.game.state import RoundState
from core.game.outcome import Outcome, Result, resolve_outcome
from core.game.engine import RoundController

__all__ = [
    "GameEvent",
    "EventType",
    "RoundLog",
    "RoundState",
    "Outcome",
    "Result",
    "resolve_outcome",
    "RoundController",
]
