"""Use cases orchestrating domain objects through ports."""

from __future__ import annotations

from .convert_event import UNKNOWN_LOGGER_NAME, EventConverter

__all__ = ["EventConverter", "UNKNOWN_LOGGER_NAME"]
