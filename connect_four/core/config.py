"""
Configuration management using pydantic-settings.

Loads settings from environment variables and .env file.
Provides type-safe access with validation.
"""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ─────────────────────────────────────────────────────────────
# MODE ENUMS
# ─────────────────────────────────────────────────────────────


class LogLevel(str, Enum):
    """Logging threshold."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# ─────────────────────────────────────────────────────────────
# NESTED SETTINGS
# ─────────────────────────────────────────────────────────────


class GameSettings(BaseSettings):
    """Board dimensions and rules."""

    model_config = SettingsConfigDict(env_prefix="GAME_", env_file=".env", extra="ignore")

    height: int = Field(default=6, ge=1, description="Number of rows")
    width: int = Field(default=7, ge=1, description="Number of columns")
    win_length: int = Field(default=4, ge=2, description="Pieces in a line to win")


class PlayerSettings(BaseSettings):
    """Default player colors offered at setup."""

    model_config = SettingsConfigDict(env_prefix="PLAYER_", env_file=".env", extra="ignore")

    p1_color: str = "#ff0000"
    p2_color: str = "#ffd700"


class UISettings(BaseSettings):
    """Dashboard appearance."""

    model_config = SettingsConfigDict(env_prefix="UI_", env_file=".env", extra="ignore")

    cell_size_rem: float = Field(default=2.5, gt=0)
    empty_color: str = "#ffffff"
    board_color: str = "#1f4fbf"


class LogSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_", env_file=".env", extra="ignore")

    level: LogLevel = LogLevel.INFO


# ─────────────────────────────────────────────────────────────
# MAIN SETTINGS
# ─────────────────────────────────────────────────────────────


class Settings(BaseSettings):
    """
    Main application settings.

    Loads from .env file and environment variables.
    Environment variables take precedence over .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )

    game: GameSettings = Field(default_factory=GameSettings)
    players: PlayerSettings = Field(default_factory=PlayerSettings)
    ui: UISettings = Field(default_factory=UISettings)
    log: LogSettings = Field(default_factory=LogSettings)


# ─────────────────────────────────────────────────────────────
# SINGLETON ACCESS
# ─────────────────────────────────────────────────────────────

_settings: Settings | None = None


def get_settings() -> Settings:
    """Get application settings (singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (for testing)."""
    global _settings
    _settings = None
