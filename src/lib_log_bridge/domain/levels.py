"""Severity enums for both sides of the bridge.

Purpose
-------
Model the two level schemes the bridge translates between: the
``java.util.logging`` style scheme carried by incoming records and the log4j
style scheme carried by outgoing events.

Contents
--------
* :class:`JulLevel` - source severities with their JUL numeric weights.
* :class:`Log4jLevel` - destination severities with their log4j weights and a
  stdlib :mod:`logging` projection.

System Role
-----------
Pure domain values. The mapping policy between them lives in
:mod:`lib_log_bridge.adapters.level_converter`; these enums only know how to
name and order themselves.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TypeVar

_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)

_L = TypeVar("_L", bound="_OrderedLevel")


class _OrderedLevel(Enum):
    """Shared helpers for numeric, ordered severity enums."""

    @property
    def severity(self) -> str:
        """Return the lowercase severity name for structured payloads."""

        return self.name.lower()

    def __lt__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.value < other.value  # type: ignore[attr-defined]

    def __le__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.value <= other.value  # type: ignore[attr-defined]

    def __gt__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.value > other.value  # type: ignore[attr-defined]

    def __ge__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return self.value >= other.value  # type: ignore[attr-defined]

    @classmethod
    def from_name(cls: type[_L], name: str) -> _L:
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_numeric(cls: type[_L], level: int) -> _L:
        """Return the member whose weight equals ``level``."""
        try:
            return cls(level)
        except ValueError as exc:
            raise ValueError(f"Unsupported log level numeric: {level}") from exc


class JulLevel(_OrderedLevel):
    """Severities of the ``java.util.logging`` record model."""

    OFF = _INT_MAX
    SEVERE = 1000
    WARNING = 900
    INFO = 800
    CONFIG = 700
    FINE = 500
    FINER = 400
    FINEST = 300
    ALL = _INT_MIN


class Log4jLevel(_OrderedLevel):
    """Severities of the log4j event model."""

    OFF = _INT_MAX
    FATAL = 50000
    ERROR = 40000
    WARN = 30000
    INFO = 20000
    DEBUG = 10000
    TRACE = 5000
    ALL = _INT_MIN

    def to_python_level(self) -> int:
        """Return the :mod:`logging` integer closest to this level."""

        return _PYTHON_LEVELS[self]


_PYTHON_LEVELS = {
    Log4jLevel.OFF: logging.CRITICAL + 10,
    Log4jLevel.FATAL: logging.CRITICAL,
    Log4jLevel.ERROR: logging.ERROR,
    Log4jLevel.WARN: logging.WARNING,
    Log4jLevel.INFO: logging.INFO,
    Log4jLevel.DEBUG: logging.DEBUG,
    Log4jLevel.TRACE: 5,
    Log4jLevel.ALL: logging.NOTSET,
}
# stdlib has no TRACE or OFF; 5 and CRITICAL+10 sit just outside its range.


__all__ = ["JulLevel", "Log4jLevel"]
