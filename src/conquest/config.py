"""Lightweight configuration for the conquest simulator."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Board and runtime settings, read from ``CONQUEST_*`` variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="CONQUEST_", env_file=".env", env_file_encoding="utf-8"
    )

    board_width: int = Field(default=10, gt=0, description="Number of zone columns")
    board_height: int = Field(default=10, gt=0, description="Number of zone rows")
    num_players: int = Field(default=6, gt=0, description="Players seated at the board")
    theme: str = Field(default="rainbow", description="Name of the player identity theme")
    battle_rule: str = Field(default="ranked_dice", description="Battle rule used during play")
    reinforcement_rule: str = Field(
        default="random_border", description="Reinforcement rule used at end of turn"
    )
    bot: str = Field(default="random", description="Strategy given to every bot player")
    seed: int | None = Field(default=None, description="Seed for a reproducible game")
    human_players: list[int] = Field(
        default_factory=list, description="Seat indices controlled by people"
    )
    max_actions: int = Field(
        default=100_000,
        gt=0,
        description="Upper bound on bot actions a headless run may take",
    )
    log_level: str = Field(default="INFO", description="Logging level for the CLI")


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
