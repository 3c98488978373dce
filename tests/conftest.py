"""
app-platform-spec: shared test fixtures

File: tests/conftest.py
Last updated: 2026-10-18

Purpose
- Provide in-memory stand-ins for deferred values and resolution backends.

What this file should cover
- ``FakeDeferred``: satisfies the deferred-value protocol without Pulumi.
- ``RecordingBackend``: resolves deferred values and records each batch.
- ``no_backend`` / ``installed_backend``: control backend lookup in the serializer.

Functional requirements
- Tests never import Pulumi or touch the network.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import pytest

from app_platform_spec.serialization import serializer


class FakeDeferred:
    """Exposes the same surface the pipeline looks for on a Pulumi ``Output``."""

    def __init__(self, value: object, *, secret: bool = False) -> None:
        self.value = value
        self._secret = secret

    def is_secret(self) -> bool:
        return self._secret

    def apply(self, func: Callable[[Any], Any]) -> FakeDeferred:
        return FakeDeferred(func(self.value), secret=self._secret)

    def __repr__(self) -> str:
        return f"FakeDeferred({self.value!r})"


class RecordingBackend:
    """Resolves ``FakeDeferred`` values and remembers every batch it was given."""

    def __init__(self) -> None:
        self.calls: list[list[object]] = []

    async def __call__(self, values: Sequence[Any]) -> Sequence[object]:
        self.calls.append(list(values))
        return [value.value for value in values]


@pytest.fixture
def deferred() -> type[FakeDeferred]:
    return FakeDeferred


@pytest.fixture
def recording_backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def no_backend(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(serializer, "load_resolution_backend", lambda module_name: None)


@pytest.fixture
def installed_backend(
    monkeypatch: pytest.MonkeyPatch, recording_backend: RecordingBackend
) -> RecordingBackend:
    monkeypatch.setattr(
        serializer, "load_resolution_backend", lambda module_name: recording_backend
    )
    return recording_backend
