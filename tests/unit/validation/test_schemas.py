"""
app-platform-spec: unit tests for schemas

File: tests/unit/validation/test_schemas.py
Last updated: 2026-10-18

Purpose
- Validate schema parsing and the validate helpers.

What this test file should cover
- Defaults only for omitted fields; explicit null is not omission.
- Fail-fast in declaration order, cross-field checks after field rules.
- Unknown keys ignored, snake_case keys accepted.
- Prefixed failure paths from ``validate_with_prefix``.
"""

from __future__ import annotations

import pytest

from app_platform_spec.enums import DockerRegistryType, EnvVarScope, EnvVarType
from app_platform_spec.validation import (
    DOCKER_IMAGE_SCHEMA,
    ENVIRONMENT_VARIABLE_SCHEMA,
    HEALTH_CHECK_SCHEMA,
    MISSING,
    SERVICE_SCHEMA,
    ValidationError,
    validate,
    validate_with_prefix,
)
from app_platform_spec.validation.schema import attr_name


@pytest.mark.unit
def test_defaults_apply_only_to_omitted_fields() -> None:
    parsed = validate(ENVIRONMENT_VARIABLE_SCHEMA, {"key": "PORT", "value": "3000"})

    assert parsed == {
        "key": "PORT",
        "value": "3000",
        "type": EnvVarType.GENERAL,
        "scope": EnvVarScope.RUN_TIME,
    }


@pytest.mark.unit
def test_explicit_null_is_not_treated_as_omitted() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate(HEALTH_CHECK_SCHEMA, {"httpPath": "/", "port": 80, "periodSeconds": None})

    assert excinfo.value.field == "periodSeconds"
    assert excinfo.value.value is None


@pytest.mark.unit
def test_missing_required_field_reports_missing_marker() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate(HEALTH_CHECK_SCHEMA, {"httpPath": "/health"})

    assert excinfo.value.field == "port"
    assert excinfo.value.value is MISSING
    assert excinfo.value.constraint == "Required"


@pytest.mark.unit
def test_first_failure_in_declaration_order_wins() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate(SERVICE_SCHEMA, {"instanceSizeSlug": "huge", "instanceCount": 0})

    assert excinfo.value.field == "instanceSizeSlug"


@pytest.mark.unit
def test_cross_field_check_runs_after_field_rules() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate(DOCKER_IMAGE_SCHEMA, {"registryType": "DOCR", "repository": "app"})

    assert excinfo.value.field == "tag"


@pytest.mark.unit
def test_docr_registry_failure_is_attributed_to_registry() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate(DOCKER_IMAGE_SCHEMA, {"registryType": "DOCR", "repository": "app", "tag": "1"})

    assert excinfo.value.field == "registry"
    assert excinfo.value.constraint == "DOCR registry type requires non-empty registry field"


@pytest.mark.unit
def test_unknown_keys_are_ignored() -> None:
    parsed = validate(
        DOCKER_IMAGE_SCHEMA,
        {"registryType": "GHCR", "repository": "app", "tag": "1", "digest": "sha256:..."},
    )

    assert "digest" not in parsed
    assert parsed["registryType"] is DockerRegistryType.GHCR


@pytest.mark.unit
def test_snake_case_keys_are_accepted() -> None:
    parsed = validate(HEALTH_CHECK_SCHEMA, {"http_path": "/ready", "port": 8080})

    assert parsed["httpPath"] == "/ready"


@pytest.mark.unit
def test_non_mapping_record_is_rejected() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate(HEALTH_CHECK_SCHEMA, ["/", 80])  # type: ignore[arg-type]

    assert excinfo.value.field == "HealthCheck"


@pytest.mark.unit
def test_validate_with_prefix_nests_failure_path() -> None:
    with pytest.raises(ValidationError) as excinfo:
        validate_with_prefix(HEALTH_CHECK_SCHEMA, {"httpPath": "/", "port": 0}, "healthCheck")

    assert excinfo.value.field == "healthCheck.port"


@pytest.mark.unit
@pytest.mark.parametrize(
    ("key", "expected"),
    [("httpPath", "http_path"), ("instanceSizeSlug", "instance_size_slug"), ("tag", "tag")],
)
def test_attr_name(key: str, expected: str) -> None:
    assert attr_name(key) == expected
