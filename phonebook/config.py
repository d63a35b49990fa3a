"""Configuration helpers for the phonebook CLI."""
from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_RECORDS_FILE = "records.json"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(RuntimeError):
    """Raised when configuration values cannot be used."""


@dataclass(slots=True)
class Settings:
    """Runtime configuration for the CLI."""

    records_file: Path
    autosave: bool = True
    log_level: str = "WARNING"

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)


def _parse_flag(var: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ConfigError(f"{var} must be 1 or 0, got {raw!r}.")


def load_settings(
    *,
    records_file: Optional[str] = None,
    dotenv: bool = True,
) -> Settings:
    """Load settings from environment variables (and a ``.env`` file).

    Args:
        records_file: Explicit records path; overrides ``PHONEBOOK_FILE``.
        dotenv: Whether to read a ``.env`` file before consulting the environment.

    Returns:
        Settings with the resolved values.

    Raises:
        ConfigError: if a value is present but unusable.
    """

    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    path = records_file or os.getenv("PHONEBOOK_FILE") or DEFAULT_RECORDS_FILE

    autosave = _parse_flag("PHONEBOOK_AUTOSAVE", os.getenv("PHONEBOOK_AUTOSAVE", "1"))

    log_level = os.getenv("PHONEBOOK_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in _LOG_LEVELS:
        raise ConfigError(
            f"PHONEBOOK_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {log_level!r}."
        )

    return Settings(
        records_file=Path(path.strip()),
        autosave=autosave,
        log_level=log_level,
    )
