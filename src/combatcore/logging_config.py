"""Logging setup for applications embedding combatcore."""
from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV_VAR = "COMBATCORE_LOG_LEVEL"


def resolve_log_level(default_level: int = logging.WARNING, level_name: str | None = None) -> int:
    """Return the level from COMBATCORE_LOG_LEVEL, then ``level_name``, then ``default_level``."""
    for candidate in (os.getenv(LOG_LEVEL_ENV_VAR), level_name):
        if candidate:
            level = logging.getLevelName(candidate.upper())
            if isinstance(level, int):
                return level
    return default_level


def configure_logging(default_level: int = logging.WARNING, level_name: str | None = None) -> None:
    """Configure the root logger with a plain format.

    Library modules never call this; it is for applications and scripts.
    ``level_name`` is usually the ``log_level`` entry of the loaded config.
    """
    logging.basicConfig(
        level=resolve_log_level(default_level, level_name),
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
    )
