"""Structural interfaces shared by components, resources and the serializer."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from typing import Any, Protocol, runtime_checkable


class Serializable(Protocol):
    def to_dict(self) -> dict[str, Any]: ...


@runtime_checkable
class DeferredValue(Protocol):
    """A value that is only known after asynchronous resolution.

    Conformance is structural: anything exposing a secrecy marker and an
    ``apply`` continuation hook qualifies (Pulumi ``Output`` does).
    """

    def is_secret(self) -> Any: ...

    def apply(self, func: Callable[[Any], Any]) -> Any: ...


ResolutionBackend = Callable[[Sequence[DeferredValue]], Awaitable[Sequence[object]]]
"""Batch resolver: values in, resolved values out, same order."""


__all__ = [
    "DeferredValue",
    "ResolutionBackend",
    "Serializable",
]
