"""
Dicer - Application Settings

Loads game constants and application settings from environment variables
using Pydantic Settings. Every field has a default, so an empty environment
plays the standard game: 3 lives, 9 ailments, 3 dice.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Game
    max_lives: int = Field(default=3, ge=1)
    num_ailments: int = Field(default=9, ge=1)
    num_dice: int = Field(default=3, ge=1, le=10)
    phase_stack_capacity: int = Field(default=20, ge=5)

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()
