"""
app-platform-spec serialization pipeline.

File: src/app_platform_spec/serialization/__init__.py
Last updated: 2026-10-18

Purpose
- Turn a resource's JSON projection into App Platform YAML text.

What should be included in this file
- Re-exports of the tree transforms and the async/sync renderers.

Functional requirements
- Stage order is fixed: resolve deferred values, prune empties, rename keys, print.
- A missing resolution backend is not an error; the async path prints placeholders.
- The sync path raises ``ValidationError`` when any deferred value is present.
"""

from app_platform_spec.serialization.serializer import (
    ManifestDumper,
    load_resolution_backend,
    render,
    resolve_deferred,
    to_yaml,
    to_yaml_sync,
)
from app_platform_spec.serialization.transformers import (
    camel_to_snake,
    collect_deferred,
    is_deferred_value,
    remove_empty,
    substitute_deferred,
    transform_keys,
)

__all__ = [
    "ManifestDumper",
    "camel_to_snake",
    "collect_deferred",
    "is_deferred_value",
    "load_resolution_backend",
    "remove_empty",
    "render",
    "resolve_deferred",
    "substitute_deferred",
    "to_yaml",
    "to_yaml_sync",
    "transform_keys",
]
