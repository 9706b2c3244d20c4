"""Configuration loading for jugaad.

Reads optional settings from environment variables (with .env support via
python-dotenv).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from jugaad.exceptions import JugaadError


class ConfigError(JugaadError):
    """Raised when configuration is present but invalid."""


@dataclass(frozen=True)
class Settings:
    """Settings loaded from environment variables.

    Attributes:
        log_level: Logging level name (default ``"INFO"``).
        chat_encoding: Text encoding used to read chat export files
            (default ``"utf-8"``).
    """

    log_level: str = "INFO"
    chat_encoding: str = "utf-8"


def load_settings() -> Settings:
    """Load settings from the environment.

    Calls :func:`dotenv.load_dotenv` so a ``.env`` file in the working
    directory is picked up automatically.  Every setting is optional;
    blank values fall back to the dataclass defaults.

    Returns:
        A validated :class:`Settings` instance.

    Raises:
        ConfigError: If ``LOG_LEVEL`` is set to something that is not a
            standard logging level name.
    """
    load_dotenv()

    values: dict[str, str] = {}

    log_level = os.environ.get("LOG_LEVEL", "").strip()
    if log_level:
        if not isinstance(logging.getLevelName(log_level.upper()), int):
            raise ConfigError(f"Invalid LOG_LEVEL: {log_level!r}")
        values["log_level"] = log_level.upper()

    encoding = os.environ.get("JUGAAD_CHAT_ENCODING", "").strip()
    if encoding:
        values["chat_encoding"] = encoding

    return Settings(**values)
