"""JSON projection -> YAML manifest text.

Pipeline, in order: deferred-value resolution (async path only), emptiness
pruning, camelCase -> snake_case key renaming, and PyYAML rendering with
2-space indent, unbounded line width, no aliases and insertion-ordered keys.
"""

from __future__ import annotations

import importlib
from collections.abc import Mapping, Sequence
from enum import Enum
from functools import lru_cache
from typing import Any

import structlog
import yaml

from app_platform_spec.constants import YAML_INDENT
from app_platform_spec.protocols import DeferredValue, ResolutionBackend, Serializable
from app_platform_spec.serialization.transformers import (
    collect_deferred,
    is_deferred_value,
    remove_empty,
    substitute_deferred,
    transform_keys,
)
from app_platform_spec.settings import DEFAULT_SETTINGS, SerializerSettings
from app_platform_spec.validation.errors import ValidationError

logger = structlog.get_logger(__name__)


class ManifestDumper(yaml.SafeDumper):
    """Safe dumper that never emits anchors and prints unresolved deferred values."""

    deferred_placeholder = DEFAULT_SETTINGS.deferred_placeholder

    def ignore_aliases(self, data: Any) -> bool:
        return True


def _represent_fallback(dumper: ManifestDumper, data: Any) -> yaml.Node:
    if is_deferred_value(data):
        return dumper.represent_str(dumper.deferred_placeholder)
    if isinstance(data, Enum):
        return dumper.represent_data(data.value)
    raise yaml.representer.RepresenterError("cannot represent an object", data)


ManifestDumper.add_representer(None, _represent_fallback)


@lru_cache(maxsize=8)
def _dumper_for(placeholder: str) -> type[ManifestDumper]:
    if placeholder == ManifestDumper.deferred_placeholder:
        return ManifestDumper
    return type("ManifestDumper", (ManifestDumper,), {"deferred_placeholder": placeholder})


def render(tree: object, *, settings: SerializerSettings | None = None) -> str:
    """Prune, rename and print ``tree``; deferred values are printed as the placeholder."""

    effective = settings or DEFAULT_SETTINGS
    cleaned = remove_empty(tree)
    document = transform_keys(cleaned if cleaned is not None else {})
    return yaml.dump(
        document,
        Dumper=_dumper_for(effective.deferred_placeholder),
        indent=YAML_INDENT,
        width=float("inf"),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )


def load_resolution_backend(module_name: str) -> ResolutionBackend | None:
    """Locate a batch resolver in ``module_name``; ``None`` when it cannot be imported.

    The module must expose ``Output.all(*values)`` returning an object whose
    ``future()`` awaits to the resolved list, as Pulumi does.
    """

    try:
        module = importlib.import_module(module_name)
    except ImportError:
        logger.debug("app_platform_resolution_backend_unavailable", module=module_name)
        return None

    output_type = getattr(module, "Output", None)
    if output_type is None or not hasattr(output_type, "all"):
        logger.debug(
            "app_platform_resolution_backend_unavailable",
            module=module_name,
            reason="missing Output.all",
        )
        return None

    async def resolve(values: Sequence[DeferredValue]) -> Sequence[object]:
        combined = output_type.all(*values)
        resolved = await combined.future()
        if resolved is None:
            # Unknown inputs (e.g. during a preview); leave the values deferred.
            logger.debug(
                "app_platform_deferred_unknown", module=module_name, count=len(values)
            )
            return list(values)
        return list(resolved)

    return resolve


def _projection(obj: Mapping[str, Any] | Serializable) -> Mapping[str, Any]:
    if isinstance(obj, Mapping):
        return obj
    return obj.to_dict()


async def resolve_deferred(tree: object, backend: ResolutionBackend) -> Any:
    """Resolve every distinct deferred value in ``tree`` in one batch and substitute results."""

    found = collect_deferred(tree)
    if not found:
        return tree

    distinct = list({id(value): value for _, value in found}.values())
    results = await backend(distinct)
    resolved = {
        id(value): result for value, result in zip(distinct, results, strict=True)
    }
    logger.debug("app_platform_deferred_resolved", count=len(distinct))
    return substitute_deferred(tree, resolved)


async def to_yaml(
    obj: Mapping[str, Any] | Serializable,
    *,
    settings: SerializerSettings | None = None,
    backend: ResolutionBackend | None = None,
) -> str:
    """Render ``obj`` to YAML, resolving deferred values first when a backend is available.

    Without a backend the values stay in the tree and print as the configured
    placeholder. Errors raised by a located backend propagate.
    """

    effective = settings or DEFAULT_SETTINGS
    tree: Any = _projection(obj)

    if effective.resolve_deferred and collect_deferred(tree):
        active = backend or load_resolution_backend(effective.resolution_backend)
        if active is not None:
            tree = await resolve_deferred(tree, active)

    remaining = collect_deferred(tree)
    if remaining:
        logger.info("app_platform_deferred_unresolved", count=len(remaining))
    return render(tree, settings=effective)


def to_yaml_sync(
    obj: Mapping[str, Any] | Serializable,
    *,
    settings: SerializerSettings | None = None,
) -> str:
    """Render ``obj`` without resolution; fail if any deferred value is present."""

    tree = _projection(obj)
    found = collect_deferred(tree)
    if found:
        path, value = found[0]
        raise ValidationError(
            path,
            value,
            "Deferred values found. Use async to_yaml() instead to resolve them.",
        )
    return render(tree, settings=settings)


__all__ = [
    "ManifestDumper",
    "load_resolution_backend",
    "render",
    "resolve_deferred",
    "to_yaml",
    "to_yaml_sync",
]
