"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED environment variable."""
    seed = os.getenv("BLACKJACK_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class GameConfig:
    """Table constants for a single-deck round against the dealer."""

    shuffle_swaps: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_SHUFFLE_SWAPS", "40"))
    )
    dealer_min: int = 17
    blackjack: int = 21
    max_hand_cards: int = 9

    def __post_init__(self) -> None:
        """Validate settings."""
        if self.shuffle_swaps < 0:
            raise ValueError("shuffle_swaps must not be negative")
        if self.max_hand_cards < 2:
            raise ValueError("max_hand_cards must allow the initial deal")


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())
    seed: int | None = field(default_factory=_parse_seed)

    game: GameConfig = field(default_factory=GameConfig)


# Global configuration instance
config = AppConfig()
