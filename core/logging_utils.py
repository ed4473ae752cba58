"""Logging setup shared by the engine and the CLI."""

import logging

from config import config


def setup_logging(level: str | None = None) -> None:
    """Call once at program start (cli/main.py)."""
    level = (level or config.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
