"""Concrete implementations of the application ports."""

from __future__ import annotations

from .level_converter import DEFAULT_LEVEL_CONVERTER, DefaultLevelConverter
from .repository import InMemoryLoggerRepository, StdlibLoggerRepository

__all__ = [
    "DEFAULT_LEVEL_CONVERTER",
    "DefaultLevelConverter",
    "InMemoryLoggerRepository",
    "StdlibLoggerRepository",
]
