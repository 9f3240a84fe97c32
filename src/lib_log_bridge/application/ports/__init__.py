"""Protocols the application layer depends on."""

from __future__ import annotations

from .levels import LevelConverterPort
from .repository import LoggerRepositoryPort

__all__ = ["LevelConverterPort", "LoggerRepositoryPort"]
