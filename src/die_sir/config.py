from __future__ import annotations

import logging
from typing import Any, Literal

from pydantic import PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_MAX_DICE = 10_000

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Roller settings, read from ``DIE_SIR_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="DIE_SIR_", frozen=True)

    log_level: LogLevel = "WARNING"
    max_dice: PositiveInt = DEFAULT_MAX_DICE

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


def load_settings() -> Settings:
    """Raises pydantic.ValidationError when a DIE_SIR_* variable is invalid."""
    return Settings()


def configure_logging(settings: Settings) -> None:
    # stderr only: stdout belongs to the REPL output and the MCP stdio transport.
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
