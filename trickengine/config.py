"""Engine configuration using Pydantic settings."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TRICKENGINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Root log level for scripts")

    # Deck
    default_n_decks: int = Field(default=1, ge=1, description="Deck copies per game")
    shuffle_seed: Optional[int] = Field(
        default=None, description="Seed for deck shuffles (None for system randomness)"
    )

    # Table
    default_min_players: int = Field(default=4, ge=0, description="Minimum seated players")
    default_max_players: int = Field(default=4, ge=0, description="Maximum seated players")
    default_hand_size: int = Field(default=13, ge=0, description="Cards dealt per player")


# Global settings instance
settings = Settings()
