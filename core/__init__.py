"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Deck, Face, Suit
from core.errors import BlackjackError, ExhaustedDeckError, HandFullError, InvalidActionError
from core.hand import HandEvaluation, HandType, Participant, Role, evaluate_hand

__all__ = [
    "Card",
    "Deck",
    "Face",
    "Suit",
    "BlackjackError",
    "ExhaustedDeckError",
    "HandFullError",
    "InvalidActionError",
    "HandEvaluation",
    "HandType",
    "Participant",
    "Role",
    "evaluate_hand",
]
