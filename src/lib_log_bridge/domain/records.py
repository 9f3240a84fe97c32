"""Source-side log record as produced by ``java.util.logging`` style loggers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .levels import JulLevel


@dataclass(slots=True, frozen=True)
class JulRecord:
    """Immutable record handed to the bridge by the source framework.

    Attributes
    ----------
    logger_name:
        Name of the emitting logger; ``None`` for anonymous loggers.
    level:
        :class:`JulLevel` attached by the caller.
    message:
        Raw, unformatted message text. Placeholders are left untouched.
    millis:
        Event time in milliseconds since the epoch.
    thread_id:
        Numeric identifier of the emitting thread.
    source_class_name / source_method_name:
        Optional caller location reported by the source framework.
    thrown:
        Optional exception attached to the record.
    sequence_number:
        Monotonic sequence assigned by the source framework.
    parameters:
        Positional message parameters. Kept on the record only.
    resource_bundle_name:
        Localisation bundle name, if any.
    """

    logger_name: str | None
    level: JulLevel
    message: str | None
    millis: int
    thread_id: int
    source_class_name: str | None = None
    source_method_name: str | None = None
    thrown: BaseException | None = None
    sequence_number: int = 0
    parameters: tuple[Any, ...] = field(default_factory=tuple)
    resource_bundle_name: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "parameters", tuple(self.parameters))


__all__ = ["JulRecord"]
