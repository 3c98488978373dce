"""
app-platform-spec configuration components.

File: src/app_platform_spec/components/__init__.py
Last updated: 2026-10-18

Purpose
- Immutable value objects nested inside deployable resources.

What should be included in this file
- Re-exports of every component type and the source union helpers.

Functional requirements
- Components validate on construction and expose ``to_dict()`` projections keyed by
  record names (``httpPath``, ``registryType``).
"""

from app_platform_spec.components.base import Component, coerce_component
from app_platform_spec.components.docker_image import DockerImage
from app_platform_spec.components.environment_variable import EnvironmentVariable
from app_platform_spec.components.github_source import GitHubSource
from app_platform_spec.components.health_check import HealthCheck
from app_platform_spec.components.source import Source, coerce_source, source_kind_of
from app_platform_spec.components.volume_mount import VolumeMount

__all__ = [
    "Component",
    "DockerImage",
    "EnvironmentVariable",
    "GitHubSource",
    "HealthCheck",
    "Source",
    "VolumeMount",
    "coerce_component",
    "coerce_source",
    "source_kind_of",
]
