"""
app-platform-spec: package root.

File: src/app_platform_spec/__init__.py
Last updated: 2026-10-18

Purpose
- Typed, validated App Platform resources rendered to YAML manifests.

What should be included in this file
- Version export and the public API surface.

Functional requirements
- Must not have side effects at import time (no settings loading, no logging init).

Key interfaces / contracts to define here
- Components: EnvironmentVariable, HealthCheck, DockerImage, GitHubSource, VolumeMount.
- Resources: Service, Job, Worker.
- Serialization: to_yaml (async), to_yaml_sync.
"""

from app_platform_spec.components import (
    DockerImage,
    EnvironmentVariable,
    GitHubSource,
    HealthCheck,
    Source,
    VolumeMount,
)
from app_platform_spec.enums import (
    INSTANCE_SIZE_SLUGS,
    DockerRegistryType,
    EnvVarScope,
    EnvVarType,
    InstanceSizeSlug,
    JobKind,
    SourceKind,
)
from app_platform_spec.protocols import DeferredValue, Serializable
from app_platform_spec.resources import EnvironmentList, Job, Service, Worker
from app_platform_spec.serialization import (
    camel_to_snake,
    is_deferred_value,
    remove_empty,
    to_yaml,
    to_yaml_sync,
    transform_keys,
)
from app_platform_spec.settings import SerializerSettings, SettingsError, load_settings
from app_platform_spec.validation import MISSING, ValidationError, validate, validate_with_prefix

__version__ = "0.1.0"

__all__ = [
    "INSTANCE_SIZE_SLUGS",
    "MISSING",
    "DeferredValue",
    "DockerImage",
    "DockerRegistryType",
    "EnvVarScope",
    "EnvVarType",
    "EnvironmentList",
    "EnvironmentVariable",
    "GitHubSource",
    "HealthCheck",
    "InstanceSizeSlug",
    "Job",
    "JobKind",
    "SerializerSettings",
    "Serializable",
    "Service",
    "SettingsError",
    "Source",
    "SourceKind",
    "ValidationError",
    "VolumeMount",
    "Worker",
    "__version__",
    "camel_to_snake",
    "is_deferred_value",
    "load_settings",
    "remove_empty",
    "to_yaml",
    "to_yaml_sync",
    "transform_keys",
    "validate",
    "validate_with_prefix",
]
