"""Structured validation failure shared by every schema, component and resource."""

from __future__ import annotations

import json
from typing import Final


class _Missing:
    """Marker for a field that was omitted entirely (distinct from ``None``)."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


MISSING: Final = _Missing()


class ValidationError(ValueError):
    """Raised when a configuration value violates a declared rule.

    Attributes
    ----------
    field:
        Dotted path of the offending field, e.g. ``"healthCheck.port"``.
    value:
        The rejected input. ``MISSING`` when the field was omitted.
    constraint:
        Human-readable description of the violated rule.
    """

    def __init__(self, field: str, value: object, constraint: str) -> None:
        super().__init__(f'Validation failed for field "{field}": {constraint}')
        self.field = field
        self.value = value
        self.constraint = constraint

    def describe(self) -> str:
        return (
            f'ValidationError: Field "{self.field}" with value '
            f"{_value_literal(self.value)} - {self.constraint}"
        )

    def with_prefix(self, prefix: str) -> ValidationError:
        """Return a copy whose field path is nested under ``prefix``."""

        if not prefix:
            return ValidationError(self.field, self.value, self.constraint)
        return ValidationError(f"{prefix}.{self.field}", self.value, self.constraint)


def _value_literal(value: object) -> str:
    if value is MISSING:
        return "undefined"
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(value)


__all__ = ["MISSING", "ValidationError"]
