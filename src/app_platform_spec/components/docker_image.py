"""Prebuilt container image source (Docker Hub, DOCR or GHCR)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from app_platform_spec.components.base import Component
from app_platform_spec.enums import DockerRegistryType, SourceKind
from app_platform_spec.validation.schema import DOCKER_IMAGE_SCHEMA, Schema


@dataclass(frozen=True, slots=True, init=False)
class DockerImage(Component):
    """Image reference. ``registry`` is mandatory for DOCR and optional otherwise."""

    schema: ClassVar[Schema] = DOCKER_IMAGE_SCHEMA
    source_kind: ClassVar[SourceKind] = SourceKind.DOCKER_IMAGE

    registry_type: DockerRegistryType
    registry: str | None
    repository: str
    tag: str

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "registryType": self.registry_type.value,
            "repository": self.repository,
            "tag": self.tag,
        }
        if self.registry is not None:
            payload["registry"] = self.registry
        return payload
