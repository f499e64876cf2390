from __future__ import annotations

import logging
from enum import IntEnum

from can_i_connect.domain.errors import InvalidLogLevel


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = 10
    INFO = 20
    SUCCESS = 25
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 60


# names accepted by --log-level
_CLI_LEVELS = {
    "off": LogLevel.OFF,
    "error": LogLevel.ERROR,
    "warn": LogLevel.WARNING,
    "info": LogLevel.INFO,
    "debug": LogLevel.DEBUG,
    "trace": LogLevel.TRACE,
}


def register_levels() -> None:
    if logging.getLevelName(LogLevel.TRACE) == "Level 5":
        logging.addLevelName(LogLevel.TRACE, "TRACE")
    if logging.getLevelName(LogLevel.SUCCESS) == "Level 25":
        logging.addLevelName(LogLevel.SUCCESS, "SUCCESS")


def parse_log_level(value: str) -> int:
    """Parse a --log-level value, case-insensitively."""
    level = _CLI_LEVELS.get(value.strip().lower())
    if level is None:
        raise InvalidLogLevel(value)
    return int(level)
