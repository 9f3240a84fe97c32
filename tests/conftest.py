from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

import pytest

from lib_log_bridge import lib_log_bridge as bridge
from lib_log_bridge.adapters import InMemoryLoggerRepository
from lib_log_bridge.application.use_cases import EventConverter
from lib_log_bridge.domain import JulLevel, JulRecord


@pytest.fixture
def repository() -> InMemoryLoggerRepository:
    return InMemoryLoggerRepository()


@pytest.fixture
def converter(repository: InMemoryLoggerRepository) -> EventConverter:
    return EventConverter(repository)


@pytest.fixture
def make_record() -> Callable[..., JulRecord]:
    """Return a factory producing records with sensible defaults."""

    def _make(**overrides: Any) -> JulRecord:
        fields: dict[str, Any] = {
            "logger_name": "app.Foo",
            "level": JulLevel.INFO,
            "message": "hello",
            "millis": 1000,
            "thread_id": 7,
        }
        fields.update(overrides)
        return JulRecord(**fields)

    return _make


@pytest.fixture(autouse=True)
def _reset_shared_converter() -> Iterator[None]:
    bridge.reset_converter()
    yield
    bridge.reset_converter()
