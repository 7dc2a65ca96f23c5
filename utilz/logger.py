"""A small in-memory logger shared across the whole process."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar


class LogLevel(Enum):
    """Severity of a log record."""

    ERROR = "Error"
    DEBUG = "Debug"
    INFO = "Info"
    WARN = "Warn"

    @property
    def priority(self) -> int:
        """Lower numbers are more severe."""
        return _PRIORITIES[self]


_PRIORITIES = {
    LogLevel.ERROR: 1,
    LogLevel.WARN: 2,
    LogLevel.INFO: 3,
    LogLevel.DEBUG: 4,
}


@dataclass(frozen=True)
class _Record:
    message: str
    level: LogLevel
    timestamp: float = field(default_factory=time.time)

    def render(self) -> str:
        seconds = max(int(self.timestamp), 0)
        return f"[{self.level.value}] @ {seconds}s \u2192 {self.message}"


class Log:
    """Process-wide log store with a configurable threshold level."""

    _lock: ClassVar[threading.RLock] = threading.RLock()
    _records: ClassVar[list[_Record]] = []
    _level: ClassVar[LogLevel] = LogLevel.DEBUG

    @classmethod
    def set_up_logger(cls, level: LogLevel | str) -> None:
        """Set the threshold; records less severe than it are dropped."""
        new_level = LogLevel(level)
        with cls._lock:
            cls._level = new_level

    @classmethod
    def log_with_level(cls, level: LogLevel | str, message: str) -> None:
        """Store `message` at `level` if it passes the threshold."""
        level = LogLevel(level)
        with cls._lock:
            if level.priority <= cls._level.priority:
                cls._records.append(_Record(str(message), level))

    @classmethod
    def log(cls, message: str) -> None:
        """Store `message` at the current threshold level."""
        with cls._lock:
            cls.log_with_level(cls._level, message)

    @classmethod
    def log_info(cls, message: str) -> None:
        cls.log_with_level(LogLevel.INFO, message)

    @classmethod
    def log_debug(cls, message: str) -> None:
        cls.log_with_level(LogLevel.DEBUG, message)

    @classmethod
    def log_error(cls, message: str) -> None:
        cls.log_with_level(LogLevel.ERROR, message)

    @classmethod
    def log_warn(cls, message: str) -> None:
        cls.log_with_level(LogLevel.WARN, message)

    @classmethod
    def get_logs(cls) -> list[str]:
        """Return every stored record formatted as a line of text."""
        with cls._lock:
            return [record.render() for record in cls._records]

    @classmethod
    def print_logs(cls) -> None:
        """Print every stored record to standard output."""
        for line in cls.get_logs():
            print(line)

    @classmethod
    def clear(cls) -> None:
        """Remove all stored records."""
        with cls._lock:
            cls._records.clear()