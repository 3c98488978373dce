"""
app-platform-spec validation package public API.

File: src/app_platform_spec/validation/__init__.py
Last updated: 2026-10-18

Purpose
- Export the structured validation error, the rule builders and the per-entity schemas.

What should be included in this file
- Re-exports only; no rule definitions.

Functional requirements
- Every constructor in the package fails through ``ValidationError`` with a field path.

Non-functional requirements
- Validation is a pure function of input and rule set; no process-wide state.
"""

from app_platform_spec.validation.errors import MISSING, ValidationError
from app_platform_spec.validation.schema import (
    DOCKER_IMAGE_SCHEMA,
    ENVIRONMENT_VARIABLE_SCHEMA,
    GITHUB_SOURCE_SCHEMA,
    HEALTH_CHECK_SCHEMA,
    JOB_SCHEMA,
    RESOURCE_BASE_SCHEMA,
    SERVICE_SCHEMA,
    VOLUME_MOUNT_SCHEMA,
    WORKER_SCHEMA,
    Field,
    Schema,
    validate,
    validate_with_prefix,
)

__all__ = [
    "DOCKER_IMAGE_SCHEMA",
    "ENVIRONMENT_VARIABLE_SCHEMA",
    "GITHUB_SOURCE_SCHEMA",
    "HEALTH_CHECK_SCHEMA",
    "JOB_SCHEMA",
    "MISSING",
    "RESOURCE_BASE_SCHEMA",
    "SERVICE_SCHEMA",
    "VOLUME_MOUNT_SCHEMA",
    "WORKER_SCHEMA",
    "Field",
    "Schema",
    "ValidationError",
    "validate",
    "validate_with_prefix",
]
