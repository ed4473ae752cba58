"""Terminal entry point: play rounds against the dealer until the player quits."""

import logging
import sys
from random import Random

from config import AppConfig, config
from cli.prompts import ReadFunc, WriteFunc, want_to_hit, want_to_play_again
from cli.render import render_outcome, render_participant
from core.errors import BlackjackError
from core.game import Outcome, RoundController
from core.logging_utils import setup_logging

logger = logging.getLogger(__name__)


def play_round(rng: Random, read: ReadFunc = input, write: WriteFunc = print) -> Outcome:
    """Play one round, showing the player's hand as it changes and the dealer's at the end."""
    controller = RoundController(rng=rng)
    controller.subscribe(lambda event: logger.debug("Round event %s", event))
    outcome = controller.play(
        ask_hit=lambda _player: want_to_hit(read, write),
        on_player_update=lambda player: write(render_participant(player)),
    )
    write(render_participant(controller.dealer))
    write(render_outcome(outcome))
    return outcome


def run(
    app_config: AppConfig = config,
    read: ReadFunc = input,
    write: WriteFunc = print,
) -> int:
    """
    Loop rounds until the player declines to play again.

    Returns:
        Process exit code
    """
    rng = Random(app_config.seed)
    rounds = 0
    try:
        while True:
            play_round(rng, read, write)
            rounds += 1
            if not want_to_play_again(read, write):
                break
    except BlackjackError:
        logger.exception("Round aborted")
        return 1

    logger.info("Session ended after %d round(s)", rounds)
    return 0


def main() -> None:
    setup_logging("DEBUG" if config.debug else config.log_level)
    sys.exit(run())


if __name__ == "__main__":
    main()
