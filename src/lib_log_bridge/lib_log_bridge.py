"""Bridge façade exposing ready-wired converters.

Purpose
-------
Give host applications a one-call API for the common case (stdlib logger
registry plus the default level policy) while keeping :class:`EventConverter`
available for explicit wiring.

Contents
--------
* :func:`get_converter` / :func:`reset_converter` - shared default converter.
* :func:`convert` - convert one record with the shared converter.
* :func:`convert_level` - map a level name in either direction.
* :func:`summary_info` - metadata banner used by the CLI.

System Role
-----------
Composition point between the application layer and the adapters; nothing
here carries policy of its own.
"""

from __future__ import annotations

from threading import RLock

from .adapters import DEFAULT_LEVEL_CONVERTER, StdlibLoggerRepository
from .application.ports import LevelConverterPort
from .application.use_cases import EventConverter
from .domain import JulLevel, JulRecord, Log4jLevel, LoggingEvent

_DEFAULT_CONVERTER: EventConverter | None = None
_CONVERTER_LOCK = RLock()


def get_converter() -> EventConverter:
    """Return the process-wide converter, creating it on first use.

    Examples
    --------
    >>> get_converter() is get_converter()
    True
    """

    global _DEFAULT_CONVERTER
    with _CONVERTER_LOCK:
        if _DEFAULT_CONVERTER is None:
            _DEFAULT_CONVERTER = EventConverter(StdlibLoggerRepository(), DEFAULT_LEVEL_CONVERTER)
        return _DEFAULT_CONVERTER


def reset_converter() -> None:
    """Drop the shared converter so the next :func:`get_converter` rebuilds it."""

    global _DEFAULT_CONVERTER
    with _CONVERTER_LOCK:
        _DEFAULT_CONVERTER = None


def convert(record: JulRecord) -> LoggingEvent:
    """Convert ``record`` with the shared converter."""

    return get_converter().convert(record)


def convert_level(
    level: str | JulLevel | Log4jLevel,
    *,
    reverse: bool = False,
    policy: LevelConverterPort = DEFAULT_LEVEL_CONVERTER,
) -> JulLevel | Log4jLevel:
    """Map ``level`` to the other scheme.

    ``level`` names a :class:`JulLevel` unless ``reverse`` is set, in which
    case it names a :class:`Log4jLevel`. Unknown names raise ``ValueError``.

    Examples
    --------
    >>> convert_level("fine").name
    'DEBUG'
    >>> convert_level("DEBUG", reverse=True).name
    'FINER'
    """

    if reverse:
        target = level if isinstance(level, Log4jLevel) else Log4jLevel.from_name(str(level))
        return policy.to_source(target)
    source = level if isinstance(level, JulLevel) else JulLevel.from_name(str(level))
    return policy.to_destination(source)


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """
    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


__all__ = ["convert", "convert_level", "get_converter", "reset_converter", "summary_info"]
