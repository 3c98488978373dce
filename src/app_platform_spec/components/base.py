"""Shared construction path for immutable configuration components."""

from __future__ import annotations

import abc
from collections.abc import Mapping
from typing import Any, ClassVar, TypeVar

from app_platform_spec.validation.errors import ValidationError
from app_platform_spec.validation.schema import Schema


def merge_record(
    schema: Schema,
    config: Mapping[str, object] | None,
    fields: Mapping[str, object],
) -> dict[str, object]:
    """Combine a positional record and keyword fields; keywords win."""

    if config is None:
        return dict(fields)
    if not isinstance(config, Mapping):
        raise ValidationError(
            schema.name, config, f"Expected object, received {type(config).__name__}"
        )
    return {**config, **fields}


class Component(abc.ABC):
    """Validate a field-named record against ``schema`` and freeze the result.

    Subclasses are ``@dataclass(frozen=True, slots=True, init=False)`` whose
    attributes are the snake_case names of the schema fields. Optional fields
    that were omitted are stored as ``None``.
    """

    __slots__ = ()

    schema: ClassVar[Schema]

    def __init__(self, config: Mapping[str, object] | None = None, /, **fields: object) -> None:
        data = self.schema.parse(merge_record(self.schema, config, fields))
        for item in self.schema.fields:
            object.__setattr__(self, item.attr, data.get(item.key))

    @abc.abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Record-named projection in field declaration order."""


TComponent = TypeVar("TComponent", bound=Component)


def coerce_component(component_type: type[TComponent], value: object, path: str) -> TComponent:
    """Keep a component instance by reference or build one from a field-named record.

    Failures raised while building are re-raised with ``path`` prefixed.
    """

    if isinstance(value, component_type):
        return value
    if not isinstance(value, Mapping):
        raise ValidationError(
            path,
            value,
            f"Expected {component_type.__name__}, received {type(value).__name__}",
        )
    try:
        return component_type(value)
    except ValidationError as exc:
        raise exc.with_prefix(path) from exc
