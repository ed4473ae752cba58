"""Outcome resolution for a finished round."""

from dataclasses import dataclass
from enum import Enum, auto

from config import config
from core.hand import Participant


class Result(Enum):
    """Who won the round."""

    PLAYER_WINS = auto()
    DEALER_WINS = auto()
    PUSH = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass(frozen=True)
class Outcome:
    """Resolved round: result, final scores and the message shown to the player."""

    result: Result
    player_score: int
    dealer_score: int
    message: str

    def __str__(self) -> str:
        return self.message


def resolve_outcome(
    player: Participant,
    dealer: Participant,
    blackjack: int = config.game.blackjack,
) -> Outcome:
    """
    Compare two finished participants.

    Busts are checked before scores, player first, so a player bust loses
    even if the dealer would also have busted.
    """
    p_score = player.score
    d_score = dealer.score

    if player.is_busted:
        result, message = Result.DEALER_WINS, "Player has busted! The dealer won!"
    elif dealer.is_busted:
        result, message = Result.PLAYER_WINS, "Dealer has busted! The player won!"
    elif p_score == d_score:
        result = Result.PUSH
        if p_score == blackjack:
            message = "Player and dealer both hit a blackjack! It's a push!"
        else:
            message = f"Player score is {p_score}. Dealer score is {d_score}. It's a push!"
    elif p_score > d_score:
        result = Result.PLAYER_WINS
        if p_score == blackjack:
            message = "Player hit the blackjack! Player won!"
        else:
            message = f"Player score is {p_score}. Player won!"
    else:
        result = Result.DEALER_WINS
        if d_score == blackjack:
            message = "Dealer hit the blackjack! Dealer won!"
        else:
            message = f"Dealer score is {d_score}. Dealer won!"

    return Outcome(result=result, player_score=p_score, dealer_score=d_score, message=message)
