"""Text rendering of hands and outcomes."""

from core.cards import Card
from core.game.outcome import Outcome
from core.hand import HandType, Participant

RULE = "*" * 25


def describe_card(card: Card) -> str:
    """Return e.g. "Ace of Spades.", "10 of Hearts." or "King of Clubs."."""
    return f"{card.name}."


def describe_hand_type(hand_type: HandType) -> str:
    return f"You have a {hand_type} hand."


def render_participant(participant: Participant) -> str:
    """Render a participant's cards, score and hand type as a block of text."""
    header = "Your info: " if participant.is_player else "Dealer's info: "
    lines = [header, RULE]
    lines.extend(describe_card(card) for card in participant.cards)
    lines += [
        "",
        f"Current score: {participant.score}",
        "",
        describe_hand_type(participant.hand_type),
        RULE,
        "",
    ]
    return "\n".join(lines)


def render_outcome(outcome: Outcome) -> str:
    return f"{outcome.message}\n"
