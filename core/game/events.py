"""Game events for the event system."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    """Types of round events."""

    # Round flow events
    ROUND_STARTED = auto()
    ROUND_ENDED = auto()

    # Card events
    DECK_SHUFFLED = auto()
    CARD_DEALT = auto()

    # Player events
    PLAYER_BLACKJACK = auto()
    PLAYER_HIT = auto()
    PLAYER_STAND = auto()
    PLAYER_BUSTS = auto()

    # Dealer events
    DEALER_HITS = auto()
    DEALER_STANDS = auto()
    DEALER_BUSTS = auto()

    # Outcome events
    PLAYER_WINS = auto()
    DEALER_WINS = auto()
    PUSH = auto()


@dataclass(frozen=True)
class GameEvent:
    """
    Immutable game event.

    Events are the primary communication mechanism between the core engine
    and the presentation layer.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


EventHandler = Callable[[GameEvent], None]


class RoundLog:
    """
    Ordered record of one round's events.

    Listeners registered for a type see only that type; listeners
    registered without one see everything, after the typed listeners.
    """

    def __init__(self) -> None:
        self._listeners: dict[EventType | None, list[EventHandler]] = {}
        self._events: list[GameEvent] = []

    def listen(self, handler: EventHandler, event_type: EventType | None = None) -> None:
        self._listeners.setdefault(event_type, []).append(handler)

    def record(self, event_type: EventType, **data: Any) -> GameEvent:
        """Append an event to the round and notify listeners."""
        event = GameEvent(event_type=event_type, data=data)
        self._events.append(event)

        for handler in self._listeners.get(event_type, []):
            handler(event)
        for handler in self._listeners.get(None, []):
            handler(event)
        return event

    @property
    def events(self) -> tuple[GameEvent, ...]:
        return tuple(self._events)

    def types(self) -> list[EventType]:
        """Return the event types in the order they happened."""
        return [event.event_type for event in self._events]
