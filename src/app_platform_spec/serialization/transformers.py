"""Pure tree transforms applied to a JSON projection before it is printed."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from app_platform_spec.protocols import DeferredValue
from app_platform_spec.validation.errors import MISSING

_UPPER = re.compile(r"[A-Z]")


def camel_to_snake(key: str) -> str:
    """``instanceSizeSlug`` -> ``instance_size_slug``.

    Every capital expands on its own, so ``HTTPPath`` becomes ``_h_t_t_p_path``.
    """

    return _UPPER.sub(lambda match: f"_{match.group(0).lower()}", key)


def transform_keys(tree: object) -> Any:
    """Rename mapping keys recursively; leaves pass through unchanged."""

    if isinstance(tree, Mapping):
        return {
            camel_to_snake(key) if isinstance(key, str) else key: transform_keys(value)
            for key, value in tree.items()
        }
    if isinstance(tree, (list, tuple)):
        return [transform_keys(item) for item in tree]
    return tree


def _is_absent(value: object) -> bool:
    return value is None or value is MISSING


def remove_empty(tree: object) -> Any:
    """Drop absent values and containers that end up empty; return ``None`` if nothing is left.

    ``0``, ``False`` and ``""`` are values, not absences.
    """

    if _is_absent(tree):
        return None
    if isinstance(tree, Mapping):
        kept: dict[Any, Any] = {}
        for key, value in tree.items():
            cleaned = remove_empty(value)
            if cleaned is not None:
                kept[key] = cleaned
        return kept or None
    if isinstance(tree, (list, tuple)):
        items = [cleaned for cleaned in map(remove_empty, tree) if cleaned is not None]
        return items or None
    return tree


def is_deferred_value(value: object) -> bool:
    if isinstance(value, (str, bytes, Mapping, list, tuple)):
        return False
    return isinstance(value, DeferredValue)


def collect_deferred(tree: object, path: str = "") -> list[tuple[str, DeferredValue]]:
    """Every deferred value in ``tree`` with its field path, in document order."""

    found: list[tuple[str, DeferredValue]] = []
    _collect(tree, path, found)
    return found


def _collect(tree: object, path: str, found: list[tuple[str, DeferredValue]]) -> None:
    if is_deferred_value(tree):
        found.append((path, tree))  # type: ignore[arg-type]
    elif isinstance(tree, Mapping):
        for key, value in tree.items():
            _collect(value, f"{path}.{key}" if path else str(key), found)
    elif isinstance(tree, (list, tuple)):
        for index, item in enumerate(tree):
            _collect(item, f"{path}[{index}]", found)


def substitute_deferred(tree: object, resolved: Mapping[int, object]) -> Any:
    """Replace deferred values by identity; values missing from ``resolved`` stay as they are."""

    if is_deferred_value(tree):
        return resolved.get(id(tree), tree)
    if isinstance(tree, Mapping):
        return {key: substitute_deferred(value, resolved) for key, value in tree.items()}
    if isinstance(tree, (list, tuple)):
        return [substitute_deferred(item, resolved) for item in tree]
    return tree


__all__ = [
    "camel_to_snake",
    "collect_deferred",
    "is_deferred_value",
    "remove_empty",
    "substitute_deferred",
    "transform_keys",
]
