"""
app-platform-spec: unit tests for the Job and Worker resources

File: tests/unit/resources/test_job_and_worker.py
Last updated: 2026-10-18

Purpose
- Validate job and worker construction and their ordered projections.

What this test file should cover
- Job: required kind and run command, optional sizing fields, env uniqueness.
- Worker: required sizing, optional run command, empty volumes omitted.
- Nested failures are prefixed with the owning field path.
"""

from __future__ import annotations

import pytest

from app_platform_spec.components import DockerImage, EnvironmentVariable, VolumeMount
from app_platform_spec.enums import JobKind
from app_platform_spec.resources import Job, Worker
from app_platform_spec.validation import ValidationError


@pytest.mark.unit
class TestJob:
    def test_minimal_projection_order(self) -> None:
        job = Job(name="migrate", kind="PRE_DEPLOY", runCommand="bin/migrate")

        assert job.kind is JobKind.PRE_DEPLOY
        assert job.to_dict() == {
            "name": "migrate",
            "kind": "PRE_DEPLOY",
            "runCommand": "bin/migrate",
            "envs": [],
        }
        assert list(job.to_dict()) == ["name", "kind", "runCommand", "envs"]

    def test_optional_fields(self) -> None:
        job = Job(
            name="seed",
            kind="POST_DEPLOY",
            runCommand="bin/seed",
            instanceSizeSlug="basic-xs",
            instanceCount=2,
            source=DockerImage(registryType="GHCR", repository="seed", tag="1"),
        )

        payload = job.to_dict()
        assert payload["instanceSizeSlug"] == "basic-xs"
        assert payload["instanceCount"] == 2
        assert payload["source"]["registryType"] == "GHCR"

    @pytest.mark.parametrize("command", ["", "  "])
    def test_run_command_must_be_non_empty(self, command: str) -> None:
        with pytest.raises(ValidationError) as excinfo:
            Job(name="migrate", kind="PRE_DEPLOY", runCommand=command)

        assert excinfo.value.field == "runCommand"
        assert excinfo.value.constraint == "Run command must be non-empty"

    def test_kind_is_required(self) -> None:
        with pytest.raises(ValidationError) as excinfo:
            Job(name="migrate", runCommand="bin/migrate")

        assert excinfo.value.field == "kind"

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValidationError) as excinfo:
            Job(name="migrate", kind="DURING_DEPLOY", runCommand="bin/migrate")

        assert excinfo.value.field == "kind"

    def test_optional_count_must_be_positive(self) -> None:
        with pytest.raises(ValidationError) as excinfo:
            Job(name="migrate", kind="PRE_DEPLOY", runCommand="x", instanceCount=0)

        assert excinfo.value.field == "instanceCount"

    def test_env_uniqueness(self) -> None:
        job = Job(name="migrate", kind="PRE_DEPLOY", runCommand="bin/migrate")
        job.add_env(EnvironmentVariable(key="DB", value="x"))

        with pytest.raises(ValidationError):
            job.add_env({"key": "DB", "value": "y"})

        assert [env.value for env in job.list_envs()] == ["x"]

    def test_projection_reconstructs(self) -> None:
        job = Job(
            name="migrate",
            kind="PRE_DEPLOY",
            runCommand="bin/migrate",
            envs=[{"key": "DB", "value": "x", "scope": "BUILD_TIME"}],
        )

        assert Job(job.to_dict()).to_dict() == job.to_dict()


@pytest.mark.unit
class TestWorker:
    def test_minimal_projection(self) -> None:
        worker = Worker(name="queue", instanceSizeSlug="basic-s", instanceCount=3)

        assert worker.to_dict() == {
            "name": "queue",
            "instanceSizeSlug": "basic-s",
            "instanceCount": 3,
            "envs": [],
        }

    @pytest.mark.parametrize("field", ["instanceSizeSlug", "instanceCount"])
    def test_size_and_count_are_required(self, field: str) -> None:
        record: dict[str, object] = {
            "name": "queue",
            "instanceSizeSlug": "basic-s",
            "instanceCount": 1,
        }
        del record[field]

        with pytest.raises(ValidationError) as excinfo:
            Worker(record)

        assert excinfo.value.field == field

    def test_run_command_is_optional(self) -> None:
        worker = Worker(name="queue", instanceSizeSlug="basic-s", instanceCount=1)

        assert worker.run_command is None
        assert "runCommand" not in worker.to_dict()

    def test_optional_fields_order(self) -> None:
        worker = Worker(
            name="queue",
            instanceSizeSlug="basic-s",
            instanceCount=1,
            internalPorts=[5555],
            runCommand="bin/work",
            volumes=[VolumeMount(name="spool", mountPath="/spool")],
            source={"repo": "acme/queue", "branch": "main"},
        )

        assert list(worker.to_dict()) == [
            "name",
            "instanceSizeSlug",
            "instanceCount",
            "envs",
            "internalPorts",
            "runCommand",
            "volumes",
            "source",
        ]

    def test_empty_volumes_are_omitted(self) -> None:
        worker = Worker(name="queue", instanceSizeSlug="basic-s", instanceCount=1, volumes=())

        assert worker.volumes == ()
        assert "volumes" not in worker.to_dict()

    def test_volume_failure_is_prefixed(self) -> None:
        with pytest.raises(ValidationError) as excinfo:
            Worker(
                name="queue",
                instanceSizeSlug="basic-s",
                instanceCount=1,
                volumes=[{"name": "", "mountPath": "/spool"}],
            )

        assert excinfo.value.field == "volumes[0].name"
