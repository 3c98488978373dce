"""Background worker with no public HTTP endpoint."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from app_platform_spec.components.source import Source
from app_platform_spec.components.volume_mount import VolumeMount
from app_platform_spec.enums import InstanceSizeSlug
from app_platform_spec.resources.base import (
    EnvironmentMixin,
    freeze,
    optional_components,
    optional_source,
    parse_resource,
)
from app_platform_spec.resources.env_list import EnvironmentList
from app_platform_spec.validation.schema import WORKER_SCHEMA


@dataclass(frozen=True, slots=True, init=False, eq=False)
class Worker(EnvironmentMixin):
    name: str
    instance_size_slug: InstanceSizeSlug
    instance_count: int
    internal_ports: tuple[int, ...] | None
    run_command: str | None
    volumes: tuple[VolumeMount, ...] | None
    source: Source | None
    _envs: EnvironmentList = field(repr=False)

    def __init__(self, config: Mapping[str, object] | None = None, /, **fields: object) -> None:
        record, data, envs = parse_resource(WORKER_SCHEMA, config, fields)
        freeze(
            self,
            {
                "name": data["name"],
                "instance_size_slug": data["instanceSizeSlug"],
                "instance_count": data["instanceCount"],
                "internal_ports": data.get("internalPorts"),
                "run_command": data.get("runCommand"),
                "volumes": optional_components(record, "volumes", VolumeMount),
                "source": optional_source(record),
                "_envs": envs,
            },
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": self.name,
            "instanceSizeSlug": self.instance_size_slug.value,
            "instanceCount": self.instance_count,
            "envs": self._envs.to_dicts(),
        }
        if self.internal_ports is not None:
            payload["internalPorts"] = list(self.internal_ports)
        if self.run_command is not None:
            payload["runCommand"] = self.run_command
        if self.volumes:
            payload["volumes"] = [volume.to_dict() for volume in self.volumes]
        if self.source is not None:
            payload["source"] = self.source.to_dict()
        return payload


__all__ = ["Worker"]
