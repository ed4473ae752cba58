"""Round controller with state machine."""

import logging
from random import Random
from typing import Callable

from transitions import Machine

from config import GameConfig, config
from core.cards import Card, Deck
from core.errors import InvalidActionError
from core.game.events import EventType, GameEvent, RoundLog
from core.game.outcome import Outcome, Result, resolve_outcome
from core.game.state import RoundState
from core.hand import Participant, Role

logger = logging.getLogger(__name__)

HitDecision = Callable[[Participant], bool]
ParticipantCallback = Callable[[Participant], None]

_OUTCOME_EVENTS = {
    Result.PLAYER_WINS: EventType.PLAYER_WINS,
    Result.DEALER_WINS: EventType.DEALER_WINS,
    Result.PUSH: EventType.PUSH,
}


class RoundController:
    """
    One round of blackjack against the dealer, driven by a state machine.

    The controller owns its deck and both participants for the lifetime of
    the round; a new round uses a new controller. It is UI-agnostic: the
    player's hit/stand decision comes in through method calls (or the
    ``ask_hit`` callback of ``play``) and everything else goes out through
    events and return values.
    """

    # State machine states
    STATES = [s.name.lower() for s in RoundState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "start_player_turn", "source": "deal", "dest": "player_turn"},
        {"trigger": "skip_player_turn", "source": "deal", "dest": "dealer_turn"},
        {"trigger": "continue_player_turn", "source": "player_turn", "dest": "player_turn"},
        {"trigger": "end_player_turn", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "player_bust", "source": "player_turn", "dest": "resolved"},
        {"trigger": "end_dealer_turn", "source": "dealer_turn", "dest": "resolved"},
    ]

    def __init__(
        self,
        rng: Random | None = None,
        deck: Deck | None = None,
        game_config: GameConfig | None = None,
    ) -> None:
        """
        Initialize a new round.

        Args:
            rng: Random number generator for reproducible rounds
            deck: Deck to deal from (a new one seeded from ``rng`` if omitted)
            game_config: Table constants (uses the global config if omitted)
        """
        self.settings = game_config or config.game
        self.deck = deck or Deck(rng=rng)
        self.player = Participant(
            Role.PLAYER,
            max_cards=self.settings.max_hand_cards,
            blackjack=self.settings.blackjack,
        )
        self.dealer = Participant(
            Role.DEALER,
            max_cards=self.settings.max_hand_cards,
            blackjack=self.settings.blackjack,
        )
        self.log = RoundLog()
        self.outcome: Outcome | None = None

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="deal",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    @property
    def finished(self) -> bool:
        return self.state is RoundState.RESOLVED

    @property
    def history(self) -> tuple[GameEvent, ...]:
        """Events recorded so far this round, oldest first."""
        return self.log.events

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to round events."""
        self.log.listen(handler, event_type)

    def _require(self, state: RoundState, action: str) -> None:
        if self.state is not state:
            raise InvalidActionError(action, self.state.name)

    def deal(self) -> None:
        """Build and shuffle the deck, then deal two cards to the player and two to the dealer."""
        self._require(RoundState.DEAL, "deal")

        self.player.reset(Role.PLAYER)
        self.dealer.reset(Role.DEALER)

        self.deck.build()
        self.deck.shuffle(self.settings.shuffle_swaps)
        self.log.record(EventType.DECK_SHUFFLED, swaps=self.settings.shuffle_swaps)

        for participant in (self.player, self.dealer):
            for _ in range(2):
                self._deal_card_to(participant)

        logger.debug("Dealt player=%s dealer=%s", self.player, self.dealer)
        self.log.record(
            EventType.ROUND_STARTED,
            player_score=self.player.score,
            dealer_score=self.dealer.score,
        )

        if self.player.is_done:
            self.log.record(EventType.PLAYER_BLACKJACK, score=self.player.score)
            self.skip_player_turn()
        else:
            self.start_player_turn()

    def _deal_card_to(self, participant: Participant) -> Card:
        """Draw an unseen card into a participant's hand."""
        card = self.deck.draw_unique()
        participant.receive_card(card)
        self.log.record(
            EventType.CARD_DEALT,
            card=str(card),
            name=card.name,
            hand=str(participant.role),
            hand_value=participant.score,
        )
        return card

    def hit(self) -> Card:
        """
        Player takes another card.

        Ends the player turn when the hand reaches 21 or busts; a bust
        resolves the round without a dealer turn.
        """
        self._require(RoundState.PLAYER_TURN, "hit")

        card = self._deal_card_to(self.player)
        self.log.record(EventType.PLAYER_HIT, hand_value=self.player.score)
        logger.debug("Player hit %s, now %s", card, self.player.score)

        if self.player.is_busted:
            self.log.record(EventType.PLAYER_BUSTS, hand_value=self.player.score)
            self.player_bust()
            self._resolve()
        elif self.player.is_done:
            self.end_player_turn()
        else:
            self.continue_player_turn()
        return card

    def stand(self) -> None:
        """Player keeps the current hand."""
        self._require(RoundState.PLAYER_TURN, "stand")

        self.player.is_done = True
        self.log.record(EventType.PLAYER_STAND, hand_value=self.player.score)
        self.end_player_turn()

    def play_dealer(self) -> Outcome:
        """
        Dealer draws until holding a hard total of at least 17, or busts.

        Soft totals never stop the dealer, soft 17 through soft 21 included.
        """
        self._require(RoundState.DEALER_TURN, "play dealer turn")

        while True:
            self.dealer.is_done = (
                self.dealer.score >= self.settings.dealer_min and self.dealer.is_hard
            )
            if self.dealer.is_done:
                self.log.record(EventType.DEALER_STANDS, hand_value=self.dealer.score)
                break

            self._deal_card_to(self.dealer)
            self.log.record(EventType.DEALER_HITS, hand_value=self.dealer.score)

            if self.dealer.is_busted:
                self.log.record(EventType.DEALER_BUSTS, hand_value=self.dealer.score)
                break

        logger.debug("Dealer finished with %s", self.dealer)
        self.end_dealer_turn()
        return self._resolve()

    def _resolve(self) -> Outcome:
        """Compare the final hands and record the outcome."""
        self.outcome = resolve_outcome(self.player, self.dealer, self.settings.blackjack)
        self.log.record(_OUTCOME_EVENTS[self.outcome.result], message=self.outcome.message)
        self.log.record(
            EventType.ROUND_ENDED,
            result=self.outcome.result.name,
            player_score=self.outcome.player_score,
            dealer_score=self.outcome.dealer_score,
        )
        logger.info(
            "Round resolved: %s (player %d, dealer %d)",
            self.outcome.result.name,
            self.outcome.player_score,
            self.outcome.dealer_score,
        )
        return self.outcome

    def play(
        self,
        ask_hit: HitDecision,
        on_player_update: ParticipantCallback | None = None,
    ) -> Outcome:
        """
        Play a whole round.

        Args:
            ask_hit: Asked with the player's state at every decision point;
                returns True to take another card
            on_player_update: Called with the player after the deal and after
                every hit

        Returns:
            The resolved outcome
        """
        self.deal()
        if on_player_update:
            on_player_update(self.player)

        while self.state is RoundState.PLAYER_TURN:
            if ask_hit(self.player):
                self.hit()
                if on_player_update:
                    on_player_update(self.player)
            else:
                self.stand()

        if self.state is RoundState.DEALER_TURN:
            return self.play_dealer()

        assert self.outcome is not None
        return self.outcome

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return self.state is RoundState.PLAYER_TURN

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self.state is RoundState.PLAYER_TURN
