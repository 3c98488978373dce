"""
app-platform-spec deployable resources.

File: src/app_platform_spec/resources/__init__.py
Last updated: 2026-10-18

Purpose
- Service, Job and Worker aggregates plus the env-var list they share.

What should be included in this file
- Re-exports only.

Functional requirements
- Each aggregate validates shared base fields first, then its own fields.
- Env keys are unique for every ``add_env`` call; ``list_envs`` returns a copy.
- ``to_yaml()`` is a coroutine; ``to_yaml_sync()`` refuses unresolved deferred values.
"""

from app_platform_spec.resources.base import EnvironmentMixin
from app_platform_spec.resources.env_list import EnvironmentList
from app_platform_spec.resources.job import Job
from app_platform_spec.resources.service import Service
from app_platform_spec.resources.worker import Worker

__all__ = ["EnvironmentList", "EnvironmentMixin", "Job", "Service", "Worker"]
