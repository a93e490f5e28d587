"""
Settings Module - Centralized Configuration Management
=======================================================

ARCHITECTURAL DECISION:
- All configuration is loaded from environment variables
- Settings are immutable dataclasses
- Single source of truth for all configurable values

EXTENSIBILITY:
- To move off SQLite: add a connection string to DatabaseSettings
- To run behind a proxy: add forwarded-header settings to ServerSettings
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from functools import lru_cache

from dotenv import load_dotenv

# Load .env file if present (development convenience)
load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class DatabaseSettings:
    """SQLite file locations and engine behaviour."""

    review_db_path: str = field(
        default_factory=lambda: os.getenv("REVIEW_DB_PATH", "./db/review.db")
    )
    dictionary_db_path: str = field(
        default_factory=lambda: os.getenv("DICTIONARY_DB_PATH", "./db/dictionary.db")
    )

    # Busy timeout: how long a writer waits for another writer's transaction
    timeout_seconds: float = field(
        default_factory=lambda: float(os.getenv("DB_TIMEOUT_SECONDS", "5.0"))
    )


@dataclass(frozen=True)
class ServerSettings:
    """HTTP listener settings."""

    host: str = field(default_factory=lambda: os.getenv("HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8080")))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "info").lower())
    reload: bool = field(default_factory=lambda: _env_bool("RELOAD"))


@dataclass(frozen=True)
class Settings:
    """
    Root settings container - Single source of truth for all configuration.

    Usage:
        from food_review.infrastructure.config import get_settings
        settings = get_settings()
        print(settings.database.review_db_path)
    """

    database: DatabaseSettings = field(default_factory=DatabaseSettings)
    server: ServerSettings = field(default_factory=ServerSettings)

    def validate(self) -> list[str]:
        """
        Validate settings and return list of warnings.
        Returns empty list if all settings are valid.
        """
        issues = []

        for label, path in (
            ("REVIEW_DB_PATH", self.database.review_db_path),
            ("DICTIONARY_DB_PATH", self.database.dictionary_db_path),
        ):
            parent = Path(path).parent
            if not parent.exists():
                issues.append(
                    f"WARNING: {label} directory does not exist: {parent}. "
                    "It will be created on startup."
                )

        if self.database.timeout_seconds <= 0:
            issues.append(
                "WARNING: DB_TIMEOUT_SECONDS must be positive. "
                "Concurrent edits will fail immediately on lock contention."
            )

        if not 0 < self.server.port < 65536:
            issues.append(f"WARNING: PORT out of range: {self.server.port}")

        if self.server.log_level not in ("critical", "error", "warning", "info", "debug"):
            issues.append(f"WARNING: unknown LOG_LEVEL '{self.server.log_level}', using info")

        return issues

    @property
    def logging_level(self) -> str:
        """Level name for the logging module."""
        level = self.server.log_level.upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            return "INFO"
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get singleton Settings instance.
    Cached to ensure consistent settings throughout application lifecycle.
    """
    return Settings()
