"""Reusable field rules for the declarative schemas.

A rule is a callable ``(value, path) -> normalized`` that either returns the
normalized value or raises :class:`ValidationError` naming ``path``.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from enum import Enum
from typing import TypeVar

from app_platform_spec.constants import MAX_PORT, MIN_PORT
from app_platform_spec.validation.errors import ValidationError

Rule = Callable[[object, str], object]
TEnum = TypeVar("TEnum", bound=Enum)


def _type_name(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def _expect_str(value: object, path: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(path, value, f"Expected string, received {_type_name(value)}")
    return value


def string() -> Rule:
    """Any string, including empty."""

    def rule(value: object, path: str) -> object:
        return _expect_str(value, path)

    return rule


def non_empty_str(constraint: str) -> Rule:
    """A string that is not empty once surrounding whitespace is trimmed."""

    def rule(value: object, path: str) -> object:
        text = _expect_str(value, path)
        if not text.strip():
            raise ValidationError(path, value, constraint)
        return text

    return rule


def min_length(length: int, constraint: str) -> Rule:
    def rule(value: object, path: str) -> object:
        text = _expect_str(value, path)
        if len(text) < length:
            raise ValidationError(path, value, constraint)
        return text

    return rule


def matches(pattern: re.Pattern[str], constraint: str) -> Rule:
    def rule(value: object, path: str) -> object:
        text = _expect_str(value, path)
        if not pattern.fullmatch(text):
            raise ValidationError(path, value, constraint)
        return text

    return rule


def starts_with(prefix: str, constraint: str) -> Rule:
    def rule(value: object, path: str) -> object:
        text = _expect_str(value, path)
        if not text.startswith(prefix):
            raise ValidationError(path, value, constraint)
        return text

    return rule


def boolean() -> Rule:
    def rule(value: object, path: str) -> object:
        if not isinstance(value, bool):
            raise ValidationError(path, value, f"Expected boolean, received {_type_name(value)}")
        return value

    return rule


def integer(
    *,
    minimum: int | None = None,
    maximum: int | None = None,
    constraint: str | None = None,
) -> Rule:
    """An integral number within ``[minimum, maximum]``.

    Integral floats (``8080.0``) are normalized to ``int``. Non-numbers,
    non-integral numbers and out-of-range integers are reported with distinct
    constraint texts. ``constraint`` overrides the range text only.
    """

    def rule(value: object, path: str) -> object:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValidationError(path, value, f"Expected number, received {_type_name(value)}")
        if isinstance(value, float):
            if not value.is_integer():
                raise ValidationError(path, value, "Expected integer, received float")
            value = int(value)
        if minimum is not None and value < minimum:
            raise ValidationError(
                path, value, constraint or f"Number must be greater than or equal to {minimum}"
            )
        if maximum is not None and value > maximum:
            raise ValidationError(
                path, value, constraint or f"Number must be less than or equal to {maximum}"
            )
        return value

    return rule


def port(constraint: str = f"Port must be between {MIN_PORT} and {MAX_PORT}") -> Rule:
    return integer(minimum=MIN_PORT, maximum=MAX_PORT, constraint=constraint)


def one_of(enum_type: type[TEnum]) -> Rule:
    """Exact, case-sensitive match against the enum's values; returns the member."""

    allowed = tuple(str(member.value) for member in enum_type)

    def rule(value: object, path: str) -> object:
        if isinstance(value, enum_type):
            return value
        if isinstance(value, str) and value in allowed:
            return enum_type(value)
        rendered = " | ".join(f"'{item}'" for item in allowed)
        raise ValidationError(
            path, value, f"Invalid enum value. Expected {rendered}, received {value!r}"
        )

    return rule


def present(constraint: str) -> Rule:
    """Any value other than ``None``."""

    def rule(value: object, path: str) -> object:
        if value is None:
            raise ValidationError(path, value, constraint)
        return value

    return rule


def array() -> Rule:
    """Array shape only; items are not inspected."""

    def rule(value: object, path: str) -> object:
        if not isinstance(value, (list, tuple)):
            raise ValidationError(path, value, f"Expected array, received {_type_name(value)}")
        return list(value)

    return rule


def array_of(item_rule: Rule) -> Rule:
    def rule(value: object, path: str) -> object:
        if not isinstance(value, (list, tuple)):
            raise ValidationError(path, value, f"Expected array, received {_type_name(value)}")
        return tuple(item_rule(item, f"{path}[{index}]") for index, item in enumerate(value))

    return rule


__all__ = [
    "Rule",
    "array",
    "array_of",
    "boolean",
    "integer",
    "matches",
    "min_length",
    "non_empty_str",
    "one_of",
    "port",
    "present",
    "starts_with",
    "string",
]
