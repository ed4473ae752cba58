"""Pytest fixtures for blackjack engine tests."""

import pytest
from random import Random

from config import GameConfig
from core.cards import Card, Deck
from core.hand import Participant, Role
from core.game import RoundController


class StackedDeck(Deck):
    """Deck that deals a fixed sequence of cards instead of sampling."""

    def __init__(self, cards: list[Card]) -> None:
        self._script = list(cards)
        super().__init__(rng=Random(0))

    def build(self) -> None:
        super().build()
        self._queue = list(self._script)

    def draw_unique(self) -> Card:
        card = self._queue.pop(0)
        self._drawn.add(card)
        return card


def cards(*codes: str) -> list[Card]:
    """Build cards from short codes like "AS", "10H"."""
    return [Card.from_string(code) for code in codes]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A freshly built deck."""
    return Deck(rng=rng)


@pytest.fixture
def player():
    """An empty player."""
    return Participant(Role.PLAYER)


@pytest.fixture
def dealer():
    """An empty dealer."""
    return Participant(Role.DEALER)


@pytest.fixture
def make_participant():
    """Factory for a participant holding the given card codes."""

    def _make(role: Role, *codes: str) -> Participant:
        participant = Participant(role)
        for card in cards(*codes):
            participant.receive_card(card)
        return participant

    return _make


@pytest.fixture
def stacked_round():
    """
    Factory for a round dealing a fixed sequence.

    Order is player, player, dealer, dealer, then every later draw.
    """

    def _make(*codes: str, game_config: GameConfig | None = None) -> RoundController:
        return RoundController(deck=StackedDeck(cards(*codes)), game_config=game_config)

    return _make


@pytest.fixture
def round_controller(rng):
    """A new seeded round."""
    return RoundController(rng=rng)
