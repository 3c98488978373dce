"""Source built from a GitHub repository."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from app_platform_spec.components.base import Component
from app_platform_spec.enums import SourceKind
from app_platform_spec.validation.schema import GITHUB_SOURCE_SCHEMA, Schema


@dataclass(frozen=True, slots=True, init=False)
class GitHubSource(Component):
    schema: ClassVar[Schema] = GITHUB_SOURCE_SCHEMA
    source_kind: ClassVar[SourceKind] = SourceKind.GITHUB

    repo: str
    branch: str
    source_dir: str
    dockerfile_path: str
    deploy_on_push: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "repo": self.repo,
            "branch": self.branch,
            "sourceDir": self.source_dir,
            "dockerfilePath": self.dockerfile_path,
            "deployOnPush": self.deploy_on_push,
        }
