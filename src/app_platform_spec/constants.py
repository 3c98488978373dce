"""Stable constants shared across validation, components and serialization."""

from __future__ import annotations

import re
from typing import Final


MIN_PORT: Final[int] = 1
MAX_PORT: Final[int] = 65535

HEALTH_CHECK_DEFAULTS: Final[dict[str, int]] = {
    "initialDelaySeconds": 0,
    "periodSeconds": 10,
    "timeoutSeconds": 1,
    "successThreshold": 1,
    "failureThreshold": 3,
}

# owner/repo, exactly one slash.
GITHUB_REPO_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[a-zA-Z0-9_-]+/[a-zA-Z0-9_-]+$")

DEFAULT_SOURCE_DIR: Final[str] = "/"
DEFAULT_DOCKERFILE_PATH: Final[str] = "Dockerfile"
DEFAULT_VOLUME_SIZE: Final[str] = "1GB"

# YAML printer options; fixed so manifests diff cleanly.
YAML_INDENT: Final[int] = 2

SETTINGS_ENV_PREFIX: Final[str] = "APP_PLATFORM_SPEC_"
DEFAULT_SETTINGS_FILE: Final[str] = "app_platform_spec.toml"

__all__ = [
    "DEFAULT_DOCKERFILE_PATH",
    "DEFAULT_SETTINGS_FILE",
    "DEFAULT_SOURCE_DIR",
    "DEFAULT_VOLUME_SIZE",
    "GITHUB_REPO_PATTERN",
    "HEALTH_CHECK_DEFAULTS",
    "MAX_PORT",
    "MIN_PORT",
    "SETTINGS_ENV_PREFIX",
    "YAML_INDENT",
]
