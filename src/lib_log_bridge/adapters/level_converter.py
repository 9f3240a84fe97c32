"""Default severity policy between ``java.util.logging`` and log4j levels.

Purpose
-------
Implement :class:`~lib_log_bridge.application.ports.LevelConverterPort` with
the canonical best-effort mapping. Several source levels collapse onto one
destination level, so converting there and back is lossy:

    SOURCE   | DESTINATION | BACK TO SOURCE
    ---------+-------------+---------------
    FINEST   | TRACE       | FINEST
    FINER    | DEBUG       | FINER
    FINE     | DEBUG       | FINER
    CONFIG   | DEBUG       | FINER
    INFO     | INFO        | INFO
    WARNING  | WARN        | WARNING
    SEVERE   | ERROR       | SEVERE
    ALL      | ALL         | ALL
    OFF      | OFF         | OFF

Destination ``FATAL`` maps back to ``SEVERE``. Values outside the tables fall
back to ``DEBUG`` (forward) and ``FINE`` (reverse).
"""

from __future__ import annotations

from typing import Any, Mapping, TypeVar

from lib_log_bridge.domain.levels import JulLevel, Log4jLevel

_T = TypeVar("_T")

_TO_DESTINATION: dict[JulLevel, Log4jLevel] = {
    JulLevel.FINEST: Log4jLevel.TRACE,
    JulLevel.FINER: Log4jLevel.DEBUG,
    JulLevel.FINE: Log4jLevel.DEBUG,
    JulLevel.INFO: Log4jLevel.INFO,
    JulLevel.WARNING: Log4jLevel.WARN,
    JulLevel.SEVERE: Log4jLevel.ERROR,
    JulLevel.ALL: Log4jLevel.ALL,
    JulLevel.OFF: Log4jLevel.OFF,
}

_TO_SOURCE: dict[Log4jLevel, JulLevel] = {
    Log4jLevel.TRACE: JulLevel.FINEST,
    Log4jLevel.DEBUG: JulLevel.FINER,
    Log4jLevel.INFO: JulLevel.INFO,
    Log4jLevel.WARN: JulLevel.WARNING,
    Log4jLevel.ERROR: JulLevel.SEVERE,
    Log4jLevel.FATAL: JulLevel.SEVERE,
    Log4jLevel.ALL: JulLevel.ALL,
    Log4jLevel.OFF: JulLevel.OFF,
}

DEFAULT_DESTINATION_LEVEL = Log4jLevel.DEBUG
DEFAULT_SOURCE_LEVEL = JulLevel.FINE


class DefaultLevelConverter:
    """Table-driven level policy with fixed fallbacks."""

    __slots__ = ()

    def to_destination(self, level: JulLevel) -> Log4jLevel:
        """Return the log4j level for ``level``, ``DEBUG`` when unmapped."""

        return _lookup(_TO_DESTINATION, level, DEFAULT_DESTINATION_LEVEL)

    def to_source(self, level: Log4jLevel) -> JulLevel:
        """Return the JUL level for ``level``, ``FINE`` when unmapped."""

        return _lookup(_TO_SOURCE, level, DEFAULT_SOURCE_LEVEL)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _lookup(table: Mapping[Any, _T], level: object, default: _T) -> _T:
    # Unhashable foreign values must fall back instead of raising.
    try:
        return table.get(level, default)
    except TypeError:
        return default


DEFAULT_LEVEL_CONVERTER = DefaultLevelConverter()


__all__ = [
    "DEFAULT_DESTINATION_LEVEL",
    "DEFAULT_LEVEL_CONVERTER",
    "DEFAULT_SOURCE_LEVEL",
    "DefaultLevelConverter",
]
