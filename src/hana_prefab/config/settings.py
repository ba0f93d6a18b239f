"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for loading.

Usage:
    from hana_prefab.config import PrefabSettings, get_settings

    # Load from environment variables (HANA_PREFAB_*)
    settings = PrefabSettings()

    # Shared instance, read once per process
    settings = get_settings()

    # Or override with explicit values
    settings = PrefabSettings(strict_documents=True, failure_log_level="ERROR")
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PrefabSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for document building and room loading.

    Attributes:
        log_failures: Log every failed entry while loading a room.
        failure_log_level: Logging level name used for failed entries.
        strict_documents: Reject unknown keys and entries without ``fields``
            when building room documents.

    Environment Variables:
        HANA_PREFAB_LOG_FAILURES
        HANA_PREFAB_FAILURE_LOG_LEVEL
        HANA_PREFAB_STRICT_DOCUMENTS
    """

    model_config = SettingsConfigDict(
        env_prefix="HANA_PREFAB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_failures: bool = True
    failure_log_level: str = "WARNING"
    strict_documents: bool = False

    @field_validator("failure_log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown logging level {value!r}")
        return level

    @property
    def failure_level(self) -> int:
        """failure_log_level as a logging module constant."""
        return logging.getLevelName(self.failure_log_level)


@lru_cache(maxsize=1)
def get_settings() -> PrefabSettings:
    """Process-wide settings read once from the environment.

    Loaders without explicit settings use this. Call
    ``get_settings.cache_clear()`` to pick up environment changes.
    """
    return PrefabSettings()
