import logging
from enum import IntEnum
from typing import Union


class LogLevel(IntEnum):
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


def coerce_log_level(level: Union["LogLevel", str, int]) -> LogLevel:
    """Map an enum member, a level name ("debug", "WARNING") or a numeric level to a LogLevel."""
    if isinstance(level, LogLevel):
        return level
    if isinstance(level, str):
        name = level.strip().upper()
        if name.isdigit():
            return coerce_log_level(int(name))
        try:
            return LogLevel[name]
        except KeyError as exc:
            raise ValueError(f"Unsupported log level: {level}") from exc
    if isinstance(level, int) and not isinstance(level, bool):
        try:
            return LogLevel(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level value: {level}") from exc
    raise TypeError(f"Cannot coerce {level!r} to LogLevel")
