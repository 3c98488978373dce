"""Declarative rule sets for every component and resource.

Each :class:`Schema` parses a plain field-named record into a normalized
dictionary keyed by record names (``httpPath``, ``instanceSizeSlug``), with
defaults applied to omitted fields. Rules run in declaration order and the
first failure is raised; cross-field checks run only after every field passed.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Final

from app_platform_spec.constants import (
    DEFAULT_DOCKERFILE_PATH,
    DEFAULT_SOURCE_DIR,
    DEFAULT_VOLUME_SIZE,
    GITHUB_REPO_PATTERN,
    HEALTH_CHECK_DEFAULTS,
)
from app_platform_spec.enums import (
    DockerRegistryType,
    EnvVarScope,
    EnvVarType,
    InstanceSizeSlug,
    JobKind,
)
from app_platform_spec.validation import rules
from app_platform_spec.validation.errors import MISSING, ValidationError

Check = Callable[[Mapping[str, object]], None]

_CAMEL_BOUNDARY = re.compile(r"[A-Z]")
_REQUIRED: Final[str] = "Required"


@dataclass(frozen=True, slots=True)
class Field:
    """One named rule. ``default`` applies only when the field is omitted."""

    key: str
    rule: rules.Rule
    default: object = MISSING
    required: bool = True

    @property
    def attr(self) -> str:
        return attr_name(self.key)


@dataclass(frozen=True, slots=True)
class Schema:
    name: str
    fields: tuple[Field, ...]
    checks: tuple[Check, ...] = ()

    def parse(self, record: Mapping[str, object]) -> dict[str, object]:
        if not isinstance(record, Mapping):
            raise ValidationError(
                self.name, record, f"Expected object, received {type(record).__name__}"
            )

        out: dict[str, object] = {}
        for item in self.fields:
            raw = lookup(record, item)
            if raw is MISSING:
                if item.default is not MISSING:
                    out[item.key] = item.default
                elif item.required:
                    raise ValidationError(item.key, MISSING, _REQUIRED)
                continue
            out[item.key] = item.rule(raw, item.key)

        for check in self.checks:
            check(out)
        return out


def attr_name(key: str) -> str:
    return _CAMEL_BOUNDARY.sub(lambda match: f"_{match.group(0).lower()}", key)


def lookup(record: Mapping[str, object], item: Field | str) -> object:
    """Read a field by record name, falling back to its Python attribute name."""

    key = item.key if isinstance(item, Field) else item
    if key in record:
        return record[key]
    attr = attr_name(key)
    if attr != key and attr in record:
        return record[attr]
    return MISSING


def validate(schema: Schema, record: Mapping[str, object]) -> dict[str, object]:
    """Parse ``record`` with ``schema``; raise :class:`ValidationError` on the first failure."""

    return schema.parse(record)


def validate_with_prefix(
    schema: Schema, record: Mapping[str, object], prefix: str
) -> dict[str, object]:
    """Like :func:`validate`, with failure paths nested under ``prefix``."""

    try:
        return schema.parse(record)
    except ValidationError as exc:
        raise exc.with_prefix(prefix) from exc


def _require_docr_registry(data: Mapping[str, object]) -> None:
    if data.get("registryType") is not DockerRegistryType.DOCR:
        return
    registry = data.get("registry", MISSING)
    if not isinstance(registry, str) or not registry.strip():
        raise ValidationError(
            "registry", registry, "DOCR registry type requires non-empty registry field"
        )


ENVIRONMENT_VARIABLE_SCHEMA: Final[Schema] = Schema(
    name="EnvironmentVariable",
    fields=(
        Field("key", rules.non_empty_str("Key must be non-empty")),
        Field("value", rules.present("Value is required")),
        Field("type", rules.one_of(EnvVarType), default=EnvVarType.GENERAL),
        Field("scope", rules.one_of(EnvVarScope), default=EnvVarScope.RUN_TIME),
    ),
)

HEALTH_CHECK_SCHEMA: Final[Schema] = Schema(
    name="HealthCheck",
    fields=(
        Field("httpPath", rules.non_empty_str("HTTP path must be non-empty")),
        Field("port", rules.port()),
        Field(
            "initialDelaySeconds",
            rules.integer(minimum=0),
            default=HEALTH_CHECK_DEFAULTS["initialDelaySeconds"],
        ),
        Field(
            "periodSeconds",
            rules.integer(minimum=1),
            default=HEALTH_CHECK_DEFAULTS["periodSeconds"],
        ),
        Field(
            "timeoutSeconds",
            rules.integer(minimum=1),
            default=HEALTH_CHECK_DEFAULTS["timeoutSeconds"],
        ),
        Field(
            "successThreshold",
            rules.integer(minimum=1),
            default=HEALTH_CHECK_DEFAULTS["successThreshold"],
        ),
        Field(
            "failureThreshold",
            rules.integer(minimum=1),
            default=HEALTH_CHECK_DEFAULTS["failureThreshold"],
        ),
    ),
)

DOCKER_IMAGE_SCHEMA: Final[Schema] = Schema(
    name="DockerImage",
    fields=(
        Field("registryType", rules.one_of(DockerRegistryType)),
        Field(
            "registry",
            rules.non_empty_str("Registry must be non-empty when specified"),
            required=False,
        ),
        Field("repository", rules.non_empty_str("Repository must be non-empty")),
        Field("tag", rules.non_empty_str("Tag must be non-empty")),
    ),
    checks=(_require_docr_registry,),
)

GITHUB_SOURCE_SCHEMA: Final[Schema] = Schema(
    name="GitHubSource",
    fields=(
        Field("repo", rules.matches(GITHUB_REPO_PATTERN, 'Must be in format "owner/repo"')),
        Field("branch", rules.non_empty_str("Branch must be non-empty")),
        Field("sourceDir", rules.string(), default=DEFAULT_SOURCE_DIR),
        Field(
            "dockerfilePath",
            rules.non_empty_str("Dockerfile path must be non-empty"),
            default=DEFAULT_DOCKERFILE_PATH,
        ),
        Field("deployOnPush", rules.boolean(), default=False),
    ),
)

VOLUME_MOUNT_SCHEMA: Final[Schema] = Schema(
    name="VolumeMount",
    fields=(
        Field("name", rules.non_empty_str("Name must be non-empty")),
        Field(
            "mountPath",
            rules.starts_with("/", "Must be an absolute path (starting with /)"),
        ),
        Field("size", rules.min_length(1, "Size must be non-empty"), default=DEFAULT_VOLUME_SIZE),
    ),
)

# Shared by Service, Job and Worker; envs are checked for array shape only.
RESOURCE_BASE_SCHEMA: Final[Schema] = Schema(
    name="Resource",
    fields=(
        Field("name", rules.non_empty_str("Name must be non-empty")),
        Field("envs", rules.array(), default=()),
    ),
)

_INSTANCE_COUNT_REQUIRED = rules.integer(
    minimum=1, constraint="Instance count must be a positive integer"
)

SERVICE_SCHEMA: Final[Schema] = Schema(
    name="Service",
    fields=(
        Field("instanceSizeSlug", rules.one_of(InstanceSizeSlug)),
        Field("instanceCount", _INSTANCE_COUNT_REQUIRED),
        Field("httpPort", rules.port(), required=False),
        Field("internalPorts", rules.array_of(rules.port()), required=False),
        Field("runCommand", rules.string(), required=False),
    ),
)

JOB_SCHEMA: Final[Schema] = Schema(
    name="Job",
    fields=(
        Field("kind", rules.one_of(JobKind)),
        Field("runCommand", rules.non_empty_str("Run command must be non-empty")),
        Field("instanceSizeSlug", rules.one_of(InstanceSizeSlug), required=False),
        Field("instanceCount", rules.integer(minimum=1), required=False),
    ),
)

WORKER_SCHEMA: Final[Schema] = Schema(
    name="Worker",
    fields=(
        Field("instanceSizeSlug", rules.one_of(InstanceSizeSlug)),
        Field("instanceCount", _INSTANCE_COUNT_REQUIRED),
        Field("internalPorts", rules.array_of(rules.port()), required=False),
        Field("runCommand", rules.string(), required=False),
    ),
)


__all__ = [
    "DOCKER_IMAGE_SCHEMA",
    "ENVIRONMENT_VARIABLE_SCHEMA",
    "GITHUB_SOURCE_SCHEMA",
    "HEALTH_CHECK_SCHEMA",
    "JOB_SCHEMA",
    "RESOURCE_BASE_SCHEMA",
    "SERVICE_SCHEMA",
    "VOLUME_MOUNT_SCHEMA",
    "WORKER_SCHEMA",
    "Check",
    "Field",
    "Schema",
    "attr_name",
    "lookup",
    "validate",
    "validate_with_prefix",
]
