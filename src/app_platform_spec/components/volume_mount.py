"""Persistent volume mounted into a service or worker."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from app_platform_spec.components.base import Component
from app_platform_spec.validation.schema import VOLUME_MOUNT_SCHEMA, Schema


@dataclass(frozen=True, slots=True, init=False)
class VolumeMount(Component):
    schema: ClassVar[Schema] = VOLUME_MOUNT_SCHEMA

    name: str
    mount_path: str
    size: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "mountPath": self.mount_path, "size": self.size}
