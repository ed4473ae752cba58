"""Card and Deck classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Iterator

from core.errors import ExhaustedDeckError

ACE_VALUE = 1
TEN_VALUE = 10
RANKS = range(1, 14)


class Suit(Enum):
    """Card suits, in canonical deck order."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]

    @property
    def label(self) -> str:
        """Return the suit name as shown to the player ("Clubs")."""
        return self.name.title()


class Face(Enum):
    """Face category of a ten-valued card."""

    NONE = 0
    JACK = 1
    QUEEN = 2
    KING = 3


@dataclass(frozen=True, slots=True)
class Card:
    """
    Immutable playing card.

    ``value`` is the blackjack point value with the ace stored as 1; every
    rank from ten to king collapses to 10 and keeps its identity through
    ``face``. The (value, face, suit) triple is the card's identity.
    """

    value: int
    suit: Suit
    face: Face = Face.NONE

    def __str__(self) -> str:
        if self.is_ace:
            rank = "A"
        elif self.face is not Face.NONE:
            rank = self.face.name[0]
        else:
            rank = str(self.value)
        return f"{rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank_name}, {self.suit.name})"

    @classmethod
    def from_rank(cls, rank: int, suit: Suit) -> "Card":
        """Create a card from a rank between 1 (ace) and 13 (king)."""
        if rank not in RANKS:
            raise ValueError(f"Invalid rank: {rank}")
        if rank < TEN_VALUE:
            return cls(rank, suit)
        return cls(TEN_VALUE, suit, Face(rank - TEN_VALUE))

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {str(n): n for n in range(2, 11)}
        rank_map.update({"A": 1, "T": 10, "J": 11, "Q": 12, "K": 13})

        suit_map = {
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls.from_rank(rank_map[rank_str], suit_map[suit_str])

    @property
    def rank(self) -> int:
        """Return the rank between 1 (ace) and 13 (king)."""
        return self.value + self.face.value

    @property
    def rank_name(self) -> str:
        """Return "Ace", "Jack", "Queen", "King" or the numeral."""
        if self.is_ace:
            return "Ace"
        if self.face is not Face.NONE:
            return self.face.name.title()
        return str(self.value)

    @property
    def name(self) -> str:
        """Return the long form, e.g. "Queen of Hearts"."""
        return f"{self.rank_name} of {self.suit.label}"

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.value == ACE_VALUE

    @property
    def is_ten_value(self) -> bool:
        """Check if this card has a value of 10."""
        return self.value == TEN_VALUE


class Deck:
    """
    A standard 52-card deck dealt by rejection sampling.

    Drawing never removes a card from the underlying array: a random slot is
    picked and re-rolled until it holds a card not yet drawn this round.
    """

    def __init__(self, rng: Random | None = None) -> None:
        """Initialize a new deck in canonical order."""
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self._drawn: set[Card] = set()
        self.build()

    def build(self) -> None:
        """Reset the deck to all 52 cards in order and forget drawn cards."""
        self._cards = [Card.from_rank(rank, suit) for suit in Suit for rank in RANKS]
        self._drawn = set()

    def shuffle(self, swaps: int) -> None:
        """
        Swap two distinct random positions ``swaps`` times.

        This is not a uniform permutation: with a small number of swaps most
        cards stay where ``build`` put them.

        Args:
            swaps: Number of pairwise swaps to perform
        """
        if swaps < 0:
            raise ValueError("swaps must not be negative")

        size = len(self._cards)
        for _ in range(swaps):
            first = self._rng.randrange(size)
            second = self._rng.randrange(size)
            while second == first:
                second = self._rng.randrange(size)
            self._cards[first], self._cards[second] = self._cards[second], self._cards[first]

    def draw_unique(self) -> Card:
        """Draw a random card that has not been drawn since the last build."""
        if len(self._drawn) >= len(self._cards):
            raise ExhaustedDeckError("Cannot draw from exhausted deck")

        while True:
            card = self._cards[self._rng.randrange(len(self._cards))]
            if card not in self._drawn:
                break

        self._drawn.add(card)
        return card

    def is_drawn(self, card: Card) -> bool:
        """Check if a card has been drawn this round."""
        return card in self._drawn

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    @property
    def drawn(self) -> frozenset[Card]:
        """Return the cards drawn since the last build."""
        return frozenset(self._drawn)

    @property
    def cards_drawn(self) -> int:
        """Return the number of cards drawn."""
        return len(self._drawn)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards not yet drawn."""
        return len(self._cards) - len(self._drawn)
