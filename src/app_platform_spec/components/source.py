"""The deployable source union: a prebuilt image or a GitHub repository."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeAlias

from app_platform_spec.components.docker_image import DockerImage
from app_platform_spec.components.github_source import GitHubSource
from app_platform_spec.enums import SourceKind
from app_platform_spec.validation.errors import ValidationError

Source: TypeAlias = DockerImage | GitHubSource

# Record field that tags each variant when a source arrives as a plain mapping.
_VARIANT_TAGS: dict[SourceKind, tuple[str, ...]] = {
    SourceKind.DOCKER_IMAGE: ("registryType", "registry_type"),
    SourceKind.GITHUB: ("repo",),
}


def source_kind_of(record: Mapping[str, object]) -> SourceKind | None:
    tagged = [
        kind for kind, tags in _VARIANT_TAGS.items() if any(tag in record for tag in tags)
    ]
    if len(tagged) != 1:
        return None
    return tagged[0]


def coerce_source(value: object, path: str = "source") -> Source:
    """Return ``value`` unchanged when it is a source, or build one from a record."""

    if isinstance(value, (DockerImage, GitHubSource)):
        return value
    if not isinstance(value, Mapping):
        raise ValidationError(
            path,
            value,
            f"Expected DockerImage or GitHubSource, received {type(value).__name__}",
        )

    kind = source_kind_of(value)
    try:
        if kind is SourceKind.DOCKER_IMAGE:
            return DockerImage(value)
        if kind is SourceKind.GITHUB:
            return GitHubSource(value)
    except ValidationError as exc:
        raise exc.with_prefix(path) from exc
    raise ValidationError(
        path, value, 'Source must carry exactly one of "registryType" or "repo"'
    )

