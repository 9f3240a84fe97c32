"""Logger repository adapters.

Purpose
-------
Provide concrete :class:`~lib_log_bridge.application.ports.LoggerRepositoryPort`
implementations: a self-contained in-memory registry and a thin wrapper over
the stdlib :mod:`logging` manager, which is the process-wide registry in
Python.

Contents
--------
* :class:`InMemoryLoggerRepository` - lock-guarded dict of
  :class:`~lib_log_bridge.domain.LoggerHandle` values.
* :class:`StdlibLoggerRepository` - delegates to :func:`logging.getLogger`.
"""

from __future__ import annotations

import logging
from threading import RLock

from lib_log_bridge.domain.events import LoggerHandle


class InMemoryLoggerRepository:
    """Name-keyed registry creating :class:`LoggerHandle` values on demand."""

    def __init__(self) -> None:
        self._loggers: dict[str, LoggerHandle] = {}
        self._lock = RLock()

    def get_logger(self, name: str) -> LoggerHandle:
        """Return the handle for ``name``, creating it on first lookup."""

        with self._lock:
            handle = self._loggers.get(name)
            if handle is None:
                handle = LoggerHandle(name)
                self._loggers[name] = handle
            return handle

    def exists(self, name: str) -> bool:
        with self._lock:
            return name in self._loggers

    def current_loggers(self) -> tuple[LoggerHandle, ...]:
        """Return a snapshot of the registered handles in creation order."""

        with self._lock:
            return tuple(self._loggers.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._loggers)


class StdlibLoggerRepository:
    """Repository backed by the stdlib :mod:`logging` manager."""

    __slots__ = ()

    def get_logger(self, name: str) -> logging.Logger:
        return logging.getLogger(name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = ["InMemoryLoggerRepository", "StdlibLoggerRepository"]
