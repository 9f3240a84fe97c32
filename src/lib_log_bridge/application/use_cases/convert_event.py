"""Use case turning a source record into a destination event.

Purpose
-------
Copy a :class:`~lib_log_bridge.domain.JulRecord` field by field into a
:class:`~lib_log_bridge.domain.LoggingEvent`, resolving the logger handle
through the injected repository and the severity through the injected level
policy.

Contents
--------
* :data:`UNKNOWN_LOGGER_NAME` - substitute for anonymous loggers.
* :class:`EventConverter` - immutable converter wired at construction.

System Role
-----------
Application-layer orchestrator. It owns no state beyond its two
collaborators, so one instance may be shared across threads; the repository
is responsible for its own locking.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from lib_log_bridge.adapters.level_converter import DEFAULT_LEVEL_CONVERTER
from lib_log_bridge.adapters.repository import StdlibLoggerRepository
from lib_log_bridge.application.ports import LevelConverterPort, LoggerRepositoryPort
from lib_log_bridge.domain import JulRecord, LocationInfo, LoggingEvent, ThrowableInformation

logger = logging.getLogger(__name__)

UNKNOWN_LOGGER_NAME = "unknown.jul.logger"


class EventConverter:
    """Convert :class:`JulRecord` instances into :class:`LoggingEvent` values.

    Parameters
    ----------
    repository:
        Logger repository consulted for every conversion. Defaults to the
        stdlib :mod:`logging` manager.
    level_converter:
        Severity policy. Defaults to
        :data:`~lib_log_bridge.adapters.level_converter.DEFAULT_LEVEL_CONVERTER`.

    Examples
    --------
    >>> from lib_log_bridge.adapters import InMemoryLoggerRepository
    >>> from lib_log_bridge.domain import JulLevel
    >>> converter = EventConverter(InMemoryLoggerRepository())
    >>> event = converter.convert(JulRecord("app.Foo", JulLevel.SEVERE, "boom", 1000, 7))
    >>> (event.logger_name, event.level.name, event.thread_name)
    ('app.Foo', 'ERROR', '7')
    """

    __slots__ = ("_repository", "_level_converter")

    def __init__(
        self,
        repository: LoggerRepositoryPort | None = None,
        level_converter: LevelConverterPort | None = None,
    ) -> None:
        if repository is None:
            repository = StdlibLoggerRepository()
        if level_converter is None:
            level_converter = DEFAULT_LEVEL_CONVERTER
        self._repository = repository
        self._level_converter = level_converter
        logger.debug(
            "event converter wired",
            extra={"repository": repr(repository), "level_converter": repr(level_converter)},
        )

    @property
    def repository(self) -> LoggerRepositoryPort:
        return self._repository

    @property
    def level_converter(self) -> LevelConverterPort:
        return self._level_converter

    def convert(self, record: JulRecord) -> LoggingEvent:
        """Return the event equivalent to ``record``.

        The message is copied raw; no parameter substitution happens. The
        thread name is the decimal thread id, not the real thread name.
        Errors raised by the repository propagate unchanged.
        """

        logger_name = record.logger_name or UNKNOWN_LOGGER_NAME
        handle = self._repository.get_logger(logger_name)
        location = LocationInfo(LocationInfo.NA, record.source_class_name, record.source_method_name, LocationInfo.NA)
        throwable_info = None if record.thrown is None else ThrowableInformation(record.thrown)
        return LoggingEvent(
            logger_name=logger_name,
            logger=handle,
            timestamp=record.millis,
            level=self._level_converter.to_destination(record.level),
            message=record.message,
            thread_name=str(record.thread_id),
            throwable_info=throwable_info,
            ndc=None,
            location_info=location,
            properties={},
        )

    def convert_many(self, records: Iterable[JulRecord]) -> Iterator[LoggingEvent]:
        """Yield one converted event per record, preserving order."""

        for record in records:
            yield self.convert(record)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(repository={self._repository!r}, level_converter={self._level_converter!r})"


__all__ = ["EventConverter", "UNKNOWN_LOGGER_NAME"]
