"""
app-platform-spec: unit tests for GitHubSource

File: tests/unit/components/test_github_source.py
Last updated: 2026-10-18

Purpose
- Validate GitHub sources and their default fields.

What this test file should cover
- Defaults for source dir, Dockerfile path and deploy-on-push.
- ``owner/repo`` format enforcement and blank branch rejection.
- Boolean typing of ``deployOnPush``.
"""

from __future__ import annotations

import pytest

from app_platform_spec.components import GitHubSource
from app_platform_spec.enums import SourceKind
from app_platform_spec.validation import ValidationError


@pytest.mark.unit
class TestGitHubSource:
    def test_defaults(self) -> None:
        source = GitHubSource(repo="acme/api", branch="main")

        assert source.source_dir == "/"
        assert source.dockerfile_path == "Dockerfile"
        assert source.deploy_on_push is False
        assert source.source_kind is SourceKind.GITHUB
        assert source.to_dict() == {
            "repo": "acme/api",
            "branch": "main",
            "sourceDir": "/",
            "dockerfilePath": "Dockerfile",
            "deployOnPush": False,
        }

    @pytest.mark.parametrize("repo", ["acme/api", "my_org/my-repo", "A1/b2"])
    def test_accepts_owner_repo(self, repo: str) -> None:
        assert GitHubSource(repo=repo, branch="main").repo == repo

    @pytest.mark.parametrize(
        "repo",
        ["acme", "acme/api/extra", "/acme/api", "acme/api/", "acme/", "/api", "", "acme/a.pi"],
    )
    def test_rejects_malformed_repo(self, repo: str) -> None:
        with pytest.raises(ValidationError) as excinfo:
            GitHubSource(repo=repo, branch="main")

        assert excinfo.value.field == "repo"
        assert excinfo.value.constraint == 'Must be in format "owner/repo"'

    def test_blank_branch(self) -> None:
        with pytest.raises(ValidationError) as excinfo:
            GitHubSource(repo="acme/api", branch="  ")

        assert excinfo.value.field == "branch"

    def test_empty_source_dir_is_allowed(self) -> None:
        assert GitHubSource(repo="acme/api", branch="main", sourceDir="").source_dir == ""

    def test_deploy_on_push_must_be_boolean(self) -> None:
        with pytest.raises(ValidationError) as excinfo:
            GitHubSource(repo="acme/api", branch="main", deployOnPush="yes")

        assert excinfo.value.field == "deployOnPush"

    def test_projection_reconstructs(self) -> None:
        source = GitHubSource(
            repo="acme/api", branch="release", sourceDir="/svc", deployOnPush=True
        )

        assert GitHubSource(source.to_dict()) == source
