"""Destination-side event model mirroring the log4j ``LoggingEvent``.

Purpose
-------
Provide immutable value objects for converted events together with their
location and error payloads.

Contents
--------
* :class:`LocationInfo` - caller location with ``"?"`` placeholders.
* :class:`ThrowableInformation` - wrapper around an attached exception.
* :class:`LoggerHandle` - lightweight logger reference handed out by the
  in-memory repository.
* :class:`LoggingEvent` - the converted event with serialisation helpers.

System Role
-----------
Sits in the domain layer; the event converter builds these objects and hosts
consume them. No rendering or transport happens here.
"""

from __future__ import annotations

import json
import traceback
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, ClassVar, Mapping

from .levels import Log4jLevel


@dataclass(slots=True, frozen=True)
class LocationInfo:
    """Origin of a log call; unknown parts hold :attr:`NA`."""

    NA: ClassVar[str] = "?"

    file_name: str | None = None
    class_name: str | None = None
    method_name: str | None = None
    line_number: str | None = None

    def __post_init__(self) -> None:
        for name in ("file_name", "class_name", "method_name", "line_number"):
            if getattr(self, name) is None:
                object.__setattr__(self, name, self.NA)

    @property
    def full_info(self) -> str:
        """Render ``class.method(file:line)``."""

        return f"{self.class_name}.{self.method_name}({self.file_name}:{self.line_number})"

    def to_dict(self) -> dict[str, str]:
        return {
            "file_name": str(self.file_name),
            "class_name": str(self.class_name),
            "method_name": str(self.method_name),
            "line_number": str(self.line_number),
        }


@dataclass(slots=True, frozen=True)
class ThrowableInformation:
    """Exception attached to an event, kept exactly as it was raised."""

    throwable: BaseException

    @property
    def rendered(self) -> tuple[str, ...]:
        """Return the formatted stack trace, one entry per line."""

        chunks = traceback.format_exception(type(self.throwable), self.throwable, self.throwable.__traceback__)
        return tuple(line for chunk in chunks for line in chunk.rstrip("\n").split("\n"))


@dataclass(slots=True, frozen=True)
class LoggerHandle:
    """Named logger reference created lazily by a repository."""

    name: str


@dataclass(slots=True, frozen=True)
class LoggingEvent:
    """Immutable event produced by :class:`~lib_log_bridge.EventConverter`.

    Attributes
    ----------
    logger_name:
        Resolved logger name, never empty.
    logger:
        Handle returned by the logger repository for ``logger_name``.
    timestamp:
        Milliseconds since the epoch, copied from the source record.
    level:
        Converted :class:`Log4jLevel`.
    message:
        Raw message text, unformatted.
    thread_name:
        Thread identity as text.
    throwable_info:
        Wrapped exception or ``None``.
    ndc:
        Nested diagnostic context; the bridge leaves it empty.
    location_info:
        :class:`LocationInfo` of the originating call.
    properties:
        Read-only auxiliary key/value pairs.
    """

    logger_name: str
    logger: Any
    timestamp: int
    level: Log4jLevel
    message: str | None
    thread_name: str
    throwable_info: ThrowableInformation | None
    ndc: str | None
    location_info: LocationInfo
    properties: Mapping[str, str] = field(default_factory=dict)

    # properties is a read-only mapping, so events compare by value but do not hash.
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def get_property(self, key: str) -> str | None:
        return self.properties.get(key)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the event into plain data; the logger handle is omitted."""

        data: dict[str, Any] = {
            "logger_name": self.logger_name,
            "timestamp": self.timestamp,
            "level": self.level.name,
            "message": self.message,
            "thread_name": self.thread_name,
            "location_info": self.location_info.to_dict(),
            "properties": dict(self.properties),
        }
        if self.ndc is not None:
            data["ndc"] = self.ndc
        if self.throwable_info is not None:
            data["throwable"] = list(self.throwable_info.rendered)
        return data

    def to_json(self) -> str:
        """Serialize the event to JSON with sorted keys for deterministic output."""

        return json.dumps(self.to_dict(), sort_keys=True)

    def replace(self, **changes: Any) -> "LoggingEvent":
        """Return a copied event with ``changes`` applied."""

        return replace(self, **changes)


__all__ = ["LocationInfo", "LoggerHandle", "LoggingEvent", "ThrowableInformation"]
