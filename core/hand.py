"""Hand evaluation and participant state for blackjack."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Iterator

from config import config
from core.cards import Card
from core.errors import HandFullError

SOFT_ACE_BONUS = 10


class HandType(Enum):
    """Hard hands count every ace as 1, soft hands count one ace as 11."""

    HARD = auto()
    SOFT = auto()

    def __str__(self) -> str:
        return self.name.lower()


class Role(Enum):
    """Which side of the table a participant plays."""

    PLAYER = auto()
    DEALER = auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class HandEvaluation:
    """Result of scoring a hand."""

    score: int
    hand_type: HandType
    busted: bool
    done: bool


def evaluate_hand(cards: Iterable[Card], blackjack: int = config.game.blackjack) -> HandEvaluation:
    """
    Score a hand.

    Aces count as 1, and at most one of them is upgraded to 11 when that
    does not bust the hand.

    Args:
        cards: Cards held, in any order
        blackjack: Target score

    Returns:
        Score, hand type, bust flag and whether the hand is finished
    """
    cards = list(cards)
    score = sum(card.value for card in cards)
    hand_type = HandType.HARD

    if any(card.is_ace for card in cards) and score + SOFT_ACE_BONUS <= blackjack:
        score += SOFT_ACE_BONUS
        hand_type = HandType.SOFT

    busted = score > blackjack
    return HandEvaluation(
        score=score,
        hand_type=hand_type,
        busted=busted,
        done=busted or score == blackjack,
    )


@dataclass
class Participant:
    """One side of the table during a round."""

    role: Role
    cards: list[Card] = field(default_factory=list)
    score: int = 0
    hand_type: HandType = HandType.HARD
    is_done: bool = False
    is_busted: bool = False
    max_cards: int = config.game.max_hand_cards
    blackjack: int = config.game.blackjack

    def reset(self, role: Role | None = None) -> None:
        """Empty the hand and clear score and flags for a new round."""
        if role is not None:
            self.role = role
        self.cards.clear()
        self.score = 0
        self.hand_type = HandType.HARD
        self.is_done = False
        self.is_busted = False

    def receive_card(self, card: Card) -> HandEvaluation:
        """
        Add a card to the hand and re-score it.

        Done and busted never revert to False once set.

        Raises:
            HandFullError: If the hand already holds ``max_cards`` cards
        """
        if len(self.cards) >= self.max_cards:
            raise HandFullError(
                f"{self.role} hand already holds {self.max_cards} cards"
            )

        self.cards.append(card)
        evaluation = evaluate_hand(self.cards, self.blackjack)
        self.score = evaluation.score
        self.hand_type = evaluation.hand_type
        self.is_busted = self.is_busted or evaluation.busted
        self.is_done = self.is_done or evaluation.done
        return evaluation

    @property
    def is_player(self) -> bool:
        return self.role is Role.PLAYER

    @property
    def is_soft(self) -> bool:
        return self.hand_type is HandType.SOFT

    @property
    def is_hard(self) -> bool:
        return self.hand_type is HandType.HARD

    @property
    def has_blackjack(self) -> bool:
        """Check if the hand scores exactly the target (21 by default)."""
        return self.score == self.blackjack

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        value_str = f"({self.score})"
        if self.is_soft:
            value_str = f"(soft {self.score})"
        if self.is_busted:
            value_str = "(BUST)"
        return f"{self.role}: {cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Participant({self.role.name}, {self.cards!r}, score={self.score})"
