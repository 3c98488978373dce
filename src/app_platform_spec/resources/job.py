"""One-off job run before or after a deployment."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from app_platform_spec.components.source import Source
from app_platform_spec.enums import InstanceSizeSlug, JobKind
from app_platform_spec.resources.base import (
    EnvironmentMixin,
    freeze,
    optional_source,
    parse_resource,
)
from app_platform_spec.resources.env_list import EnvironmentList
from app_platform_spec.validation.schema import JOB_SCHEMA


@dataclass(frozen=True, slots=True, init=False, eq=False)
class Job(EnvironmentMixin):
    """``PRE_DEPLOY`` or ``POST_DEPLOY`` job; ``run_command`` is mandatory."""

    name: str
    kind: JobKind
    run_command: str
    instance_size_slug: InstanceSizeSlug | None
    instance_count: int | None
    source: Source | None
    _envs: EnvironmentList = field(repr=False)

    def __init__(self, config: Mapping[str, object] | None = None, /, **fields: object) -> None:
        record, data, envs = parse_resource(JOB_SCHEMA, config, fields)
        freeze(
            self,
            {
                "name": data["name"],
                "kind": data["kind"],
                "run_command": data["runCommand"],
                "instance_size_slug": data.get("instanceSizeSlug"),
                "instance_count": data.get("instanceCount"),
                "source": optional_source(record),
                "_envs": envs,
            },
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "name": self.name,
            "kind": self.kind.value,
            "runCommand": self.run_command,
            "envs": self._envs.to_dicts(),
        }
        if self.instance_size_slug is not None:
            payload["instanceSizeSlug"] = self.instance_size_slug.value
        if self.instance_count is not None:
            payload["instanceCount"] = self.instance_count
        if self.source is not None:
            payload["source"] = self.source.to_dict()
        return payload


__all__ = ["Job"]
