"""Domain value objects for both sides of the logging bridge."""

from __future__ import annotations

from .events import LocationInfo, LoggerHandle, LoggingEvent, ThrowableInformation
from .levels import JulLevel, Log4jLevel
from .records import JulRecord

__all__ = [
    "JulLevel",
    "JulRecord",
    "LocationInfo",
    "Log4jLevel",
    "LoggerHandle",
    "LoggingEvent",
    "ThrowableInformation",
]
