"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_optional_int(name: str) -> int | None:
    """Parse an optional integer environment variable."""
    raw = os.getenv(name, "").strip()
    return int(raw) if raw else None


@dataclass(frozen=True)
class GameConfig:
    """Game configuration."""

    num_decks: int = field(default_factory=lambda: int(os.getenv("MOCKJACK_DECKS", "1")))
    # Fixed seed for reproducible sessions; unset means OS-seeded shuffles
    seed: int | None = field(default_factory=lambda: _parse_optional_int("MOCKJACK_SEED"))


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())
    window_title: str = "MockJack"

    game: GameConfig = field(default_factory=GameConfig)

    @property
    def effective_log_level(self) -> str:
        """DEBUG mode always logs at DEBUG level."""
        return "DEBUG" if self.debug else self.log_level


# Global configuration instance
config = AppConfig()
