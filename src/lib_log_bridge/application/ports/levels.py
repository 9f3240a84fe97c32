"""Level conversion port.

Purpose
-------
Describe the two-way severity policy the event converter depends on, so an
alternate mapping can be swapped in without touching the converter.

Contents
--------
* :class:`LevelConverterPort` - runtime-checkable protocol with
  ``to_destination`` and ``to_source``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from lib_log_bridge.domain.levels import JulLevel, Log4jLevel


@runtime_checkable
class LevelConverterPort(Protocol):
    """Translate severities between the source and destination schemes."""

    def to_destination(self, level: JulLevel) -> Log4jLevel:
        """Return the destination level for source ``level``."""

    def to_source(self, level: Log4jLevel) -> JulLevel:
        """Return the source level for destination ``level``."""


__all__ = ["LevelConverterPort"]
