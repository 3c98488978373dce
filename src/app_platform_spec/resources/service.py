"""Long-running web service that receives HTTP traffic."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from app_platform_spec.components.health_check import HealthCheck
from app_platform_spec.components.source import Source
from app_platform_spec.components.volume_mount import VolumeMount
from app_platform_spec.enums import InstanceSizeSlug
from app_platform_spec.resources.base import (
    EnvironmentMixin,
    freeze,
    optional_component,
    optional_components,
    optional_source,
    parse_resource,
)
from app_platform_spec.resources.env_list import EnvironmentList
from app_platform_spec.validation.schema import SERVICE_SCHEMA


@dataclass(frozen=True, slots=True, init=False, eq=False)
class Service(EnvironmentMixin):
    """App Platform service.

    Nested components may be passed as instances (kept by reference) or as
    field-named records. Only the env list changes after construction, through
    ``add_env`` and ``remove_env``.
    """

    name: str
    instance_size_slug: InstanceSizeSlug
    instance_count: int
    http_port: int | None
    internal_ports: tuple[int, ...] | None
    health_check: HealthCheck | None
    run_command: str | None
    volumes: tuple[VolumeMount, ...] | None
    source: Source | None
    _envs: EnvironmentList = field(repr=False)

    def __init__(self, config: Mapping[str, object] | None = None, /, **fields: object) -> None:
        record, data, envs = parse_resource(SERVICE_SCHEMA, config, fields)
        freeze(
            self,
            {
                "name": data["name"],
                "instance_size_slug": data["instanceSizeSlug"],
                "instance_count": data["instanceCount"],
                "http_port": data.get("httpPort"),
                "internal_ports": data.get("internalPorts"),
                "health_check": optional_component(record, "healthCheck", HealthCheck),
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
        if self.http_port is not None:
            payload["httpPort"] = self.http_port
        if self.internal_ports is not None:
            payload["internalPorts"] = list(self.internal_ports)
        if self.health_check is not None:
            payload["healthCheck"] = self.health_check.to_dict()
        if self.run_command is not None:
            payload["runCommand"] = self.run_command
        if self.volumes:
            payload["volumes"] = [volume.to_dict() for volume in self.volumes]
        if self.source is not None:
            payload["source"] = self.source.to_dict()
        return payload


__all__ = ["Service"]
