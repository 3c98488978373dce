"""Construction helpers and env-list delegation shared by Service, Job and Worker."""

from __future__ import annotations

import abc
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar, cast

from app_platform_spec.components.base import Component, coerce_component, merge_record
from app_platform_spec.components.environment_variable import EnvironmentVariable
from app_platform_spec.components.source import Source, coerce_source
from app_platform_spec.resources.env_list import EnvironmentList
from app_platform_spec.serialization import serializer
from app_platform_spec.validation import rules
from app_platform_spec.validation.errors import MISSING
from app_platform_spec.validation.schema import RESOURCE_BASE_SCHEMA, Schema, lookup

if TYPE_CHECKING:
    from app_platform_spec.protocols import ResolutionBackend
    from app_platform_spec.settings import SerializerSettings

TComponent = TypeVar("TComponent", bound=Component)

_ARRAY = rules.array()


def parse_resource(
    schema: Schema,
    config: Mapping[str, object] | None,
    fields: Mapping[str, object],
) -> tuple[dict[str, object], dict[str, object], EnvironmentList]:
    """Validate shared base fields, then ``schema``'s own primitive fields.

    Returns the merged raw record, the normalized record and the env list.
    Nested components are left in the raw record for the caller to coerce.
    """

    record = merge_record(schema, config, fields)
    base = RESOURCE_BASE_SCHEMA.parse(record)
    data = schema.parse(record)
    data["name"] = base["name"]
    envs = EnvironmentList.from_records(
        cast(list[object], base["envs"]), owner=str(base["name"])
    )
    return record, data, envs


def optional_component(
    record: Mapping[str, object], key: str, component_type: type[TComponent]
) -> TComponent | None:
    raw = lookup(record, key)
    if raw is MISSING:
        return None
    return coerce_component(component_type, raw, key)


def optional_components(
    record: Mapping[str, object], key: str, component_type: type[TComponent]
) -> tuple[TComponent, ...] | None:
    raw = lookup(record, key)
    if raw is MISSING:
        return None
    items = cast(list[object], _ARRAY(raw, key))
    return tuple(
        coerce_component(component_type, item, f"{key}[{index}]")
        for index, item in enumerate(items)
    )


def optional_source(record: Mapping[str, object], key: str = "source") -> Source | None:
    raw = lookup(record, key)
    if raw is MISSING:
        return None
    return coerce_source(raw, key)


def freeze(instance: object, values: Mapping[str, object]) -> None:
    """Assign attributes on a frozen dataclass instance."""

    for name, value in values.items():
        object.__setattr__(instance, name, value)


class EnvironmentMixin(abc.ABC):
    """Env-var operations and YAML rendering delegated to the held ``_envs`` list."""

    __slots__ = ()

    _envs: EnvironmentList

    def add_env(self, env: EnvironmentVariable | Mapping[str, object]) -> None:
        """Append ``env``; raise ``ValidationError`` on field ``key`` if the key exists."""

        self._envs.add(env)

    def remove_env(self, key: str) -> bool:
        return self._envs.remove(key)

    def get_env(self, key: str) -> EnvironmentVariable | None:
        return self._envs.get(key)

    def list_envs(self) -> list[EnvironmentVariable]:
        """Snapshot copy; mutating it leaves the resource unchanged."""

        return self._envs.snapshot()

    @abc.abstractmethod
    def to_dict(self) -> dict[str, Any]: ...

    async def to_yaml(
        self,
        *,
        settings: SerializerSettings | None = None,
        backend: ResolutionBackend | None = None,
    ) -> str:
        return await serializer.to_yaml(self.to_dict(), settings=settings, backend=backend)

    def to_yaml_sync(self, *, settings: SerializerSettings | None = None) -> str:
        return serializer.to_yaml_sync(self.to_dict(), settings=settings)


__all__ = [
    "EnvironmentMixin",
    "freeze",
    "optional_component",
    "optional_components",
    "optional_source",
    "parse_resource",
]
