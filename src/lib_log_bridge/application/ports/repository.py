"""Logger repository port consumed by the event converter."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LoggerRepositoryPort(Protocol):
    """Name-keyed store of logger handles, populated lazily."""

    def get_logger(self, name: str) -> Any:
        """Return the handle for ``name``, creating it on first use."""


__all__ = ["LoggerRepositoryPort"]
