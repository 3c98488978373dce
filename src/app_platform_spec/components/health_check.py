"""HTTP health check for a service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from app_platform_spec.components.base import Component
from app_platform_spec.validation.schema import HEALTH_CHECK_SCHEMA, Schema


@dataclass(frozen=True, slots=True, init=False)
class HealthCheck(Component):
    schema: ClassVar[Schema] = HEALTH_CHECK_SCHEMA

    http_path: str
    port: int
    initial_delay_seconds: int
    period_seconds: int
    timeout_seconds: int
    success_threshold: int
    failure_threshold: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "httpPath": self.http_path,
            "port": self.port,
            "initialDelaySeconds": self.initial_delay_seconds,
            "periodSeconds": self.period_seconds,
            "timeoutSeconds": self.timeout_seconds,
            "successThreshold": self.success_threshold,
            "failureThreshold": self.failure_threshold,
        }
