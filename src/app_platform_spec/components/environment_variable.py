"""Environment variable attached to a resource."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from app_platform_spec.components.base import Component
from app_platform_spec.enums import EnvVarScope, EnvVarType
from app_platform_spec.validation.schema import ENVIRONMENT_VARIABLE_SCHEMA, Schema


@dataclass(frozen=True, slots=True, init=False)
class EnvironmentVariable(Component):
    """``value`` may be a plain string or a deferred value resolved at render time."""

    schema: ClassVar[Schema] = ENVIRONMENT_VARIABLE_SCHEMA

    key: str
    value: Any
    type: EnvVarType
    scope: EnvVarScope

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "value": self.value,
            "type": self.type.value,
            "scope": self.scope.value,
        }
