"""Public package surface of the logging bridge.

``import lib_log_bridge`` exposes the converter, both level enums, the record
and event value objects, and the ready-wired helpers from
:mod:`lib_log_bridge.lib_log_bridge`.
"""

from __future__ import annotations

from .adapters import (
    DEFAULT_LEVEL_CONVERTER,
    DefaultLevelConverter,
    InMemoryLoggerRepository,
    StdlibLoggerRepository,
)
from .application.ports import LevelConverterPort, LoggerRepositoryPort
from .application.use_cases import UNKNOWN_LOGGER_NAME, EventConverter
from .domain import (
    JulLevel,
    JulRecord,
    LocationInfo,
    Log4jLevel,
    LoggerHandle,
    LoggingEvent,
    ThrowableInformation,
)
from .lib_log_bridge import convert, convert_level, get_converter, reset_converter, summary_info

__all__ = [
    "DEFAULT_LEVEL_CONVERTER",
    "DefaultLevelConverter",
    "EventConverter",
    "InMemoryLoggerRepository",
    "JulLevel",
    "JulRecord",
    "LevelConverterPort",
    "LocationInfo",
    "Log4jLevel",
    "LoggerHandle",
    "LoggerRepositoryPort",
    "LoggingEvent",
    "StdlibLoggerRepository",
    "ThrowableInformation",
    "UNKNOWN_LOGGER_NAME",
    "convert",
    "convert_level",
    "get_converter",
    "reset_converter",
    "summary_info",
]
