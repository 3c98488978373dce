"""Closed vocabularies accepted by the schema layer.

Values are the exact, case-sensitive tokens written to the manifest.
"""

from __future__ import annotations

from enum import StrEnum


class EnvVarType(StrEnum):
    GENERAL = "GENERAL"
    SECRET = "SECRET"


class EnvVarScope(StrEnum):
    RUN_TIME = "RUN_TIME"
    BUILD_TIME = "BUILD_TIME"
    DEPLOY_TIME = "DEPLOY_TIME"


class DockerRegistryType(StrEnum):
    DOCKER_HUB = "DOCKER_HUB"
    DOCR = "DOCR"
    GHCR = "GHCR"


class JobKind(StrEnum):
    PRE_DEPLOY = "PRE_DEPLOY"
    POST_DEPLOY = "POST_DEPLOY"


class InstanceSizeSlug(StrEnum):
    BASIC_XXS = "basic-xxs"
    BASIC_XS = "basic-xs"
    BASIC_S = "basic-s"
    BASIC_M = "basic-m"
    PROFESSIONAL_XS = "professional-xs"
    PROFESSIONAL_S = "professional-s"
    PROFESSIONAL_M = "professional-m"
    PROFESSIONAL_L = "professional-l"


INSTANCE_SIZE_SLUGS: tuple[str, ...] = tuple(item.value for item in InstanceSizeSlug)


class SourceKind(StrEnum):
    """Variant tag for the deployable source union."""

    DOCKER_IMAGE = "docker_image"
    GITHUB = "github"


__all__ = [
    "INSTANCE_SIZE_SLUGS",
    "DockerRegistryType",
    "EnvVarScope",
    "EnvVarType",
    "InstanceSizeSlug",
    "JobKind",
    "SourceKind",
]
