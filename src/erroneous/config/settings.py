# src/erroneous/config/settings.py
# Copyright (c) Arche.
# SPDX-License-Identifier: MIT
"""Erroneous Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated configuration for the library. Every field has a default
    that reproduces the documented behaviour, so no environment variable is
    required. Only the dependency wiring and logging setup read settings; the
    domain and application layers receive plain values.

Design:
    - Pydantic v2 BaseSettings with explicit ``validation_alias`` per field.
    - ``extra='ignore'``: a library must tolerate whatever the host process
      keeps in its environment.
    - Singleton accessor ``get_settings()`` with LRU cache.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from erroneous.domain.entities.error_builder import DEFAULT_CAPTURE_DEPTH

logger = logging.getLogger(__name__)

_LEVEL_NAMES = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """Typed library configuration."""

    capture_depth: int = Field(
        default=DEFAULT_CAPTURE_DEPTH,
        ge=0,
        le=64,
        description="Frames above the constructor skipped by automatic call-site capture.",
        validation_alias="ERRONEOUS_CAPTURE_DEPTH",
    )

    log_level: str = Field(
        default="WARNING",
        description="Level of the 'erroneous' logger installed by configure_logging().",
        validation_alias="ERRONEOUS_LOG_LEVEL",
    )

    log_json: bool = Field(
        default=True,
        description="Emit JSON log lines (true) or plain text (false).",
        validation_alias="ERRONEOUS_LOG_JSON",
    )

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> str:
        """Upper-case and validate the log level name.

        Raises:
            ValueError: If the name is not a standard logging level.
        """
        name = str(value).strip().upper()
        if name == "WARN":
            name = "WARNING"
        if name not in _LEVEL_NAMES:
            raise ValueError(f"Unknown log level {value!r}.")
        return name


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton `Settings` instance.

    Returns:
        Settings: Validated library settings.

    Raises:
        RuntimeError: If configuration is invalid.
    """
    try:
        settings = Settings()
    except ValidationError as exc:
        logger.exception("Invalid erroneous configuration")
        raise RuntimeError(f"Invalid configuration: {exc}") from exc
    logger.debug(
        "Settings initialized",
        extra={
            "capture_depth": settings.capture_depth,
            "log_level": settings.log_level,
            "log_json": settings.log_json,
        },
    )
    return settings
