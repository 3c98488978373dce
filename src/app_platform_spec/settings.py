"""
app-platform-spec: serializer settings loader.

File: src/app_platform_spec/settings.py
Last updated: 2026-10-18

Purpose
- Load serializer behaviour from defaults, an optional TOML file and env vars.

What should be included in this file
- Precedence logic: env (APP_PLATFORM_SPEC_) > file ``[serializer]`` table > defaults.
- TOML loading via ``tomllib``.
- Deterministic environment variable mapping and coercion.

Functional requirements
- Reject unknown keys and values of the wrong type with ``SettingsError``.
- A missing explicit file is an error; the implicit default file is optional.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Final

from app_platform_spec.constants import DEFAULT_SETTINGS_FILE, SETTINGS_ENV_PREFIX

SETTINGS_TABLE: Final[str] = "serializer"

_BOOLEAN_TRUE: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_BOOLEAN_FALSE: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


class SettingsError(ValueError):
    """Raised when settings cannot be loaded or overrides cannot be coerced."""


@dataclass(frozen=True, slots=True)
class SerializerSettings:
    """Knobs for the YAML pipeline.

    ``resolve_deferred`` disables deferred-value resolution entirely when false.
    ``resolution_backend`` names the module searched for ``Output.all``.
    ``deferred_placeholder`` is printed for a deferred value left unresolved.
    """

    resolve_deferred: bool = True
    resolution_backend: str = "pulumi"
    deferred_placeholder: str = "<deferred>"


DEFAULT_SETTINGS: Final[SerializerSettings] = SerializerSettings()


def load_settings(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> SerializerSettings:
    """Load effective settings with deterministic precedence: env > file > defaults."""

    resolved_path = _resolve_settings_path(config_path)
    env_map = dict(os.environ if environ is None else environ)

    payload = _load_toml_file(resolved_path, required=config_path is not None)
    table = payload.get(SETTINGS_TABLE, {})
    if not isinstance(table, Mapping):
        raise SettingsError(f"[{SETTINGS_TABLE}] must be a table: {resolved_path}")

    settings = replace(DEFAULT_SETTINGS, **_coerce_table(table, source=str(resolved_path)))
    return replace(settings, **_collect_env_overrides(env_map))


def _resolve_settings_path(config_path: str | Path | None) -> Path:
    if config_path is None:
        return (Path.cwd() / DEFAULT_SETTINGS_FILE).resolve()
    return Path(config_path).expanduser().resolve()


def _load_toml_file(path: Path, *, required: bool) -> dict[str, Any]:
    if not path.exists():
        if required:
            raise SettingsError(f"settings file not found: {path}")
        return {}

    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise SettingsError(f"invalid TOML in {path}: {exc}") from exc
    except OSError as exc:
        raise SettingsError(f"unable to read settings file {path}: {exc}") from exc


def _field_types() -> dict[str, type]:
    return {
        item.name: type(getattr(DEFAULT_SETTINGS, item.name))
        for item in fields(SerializerSettings)
    }


def _coerce_table(table: Mapping[str, object], *, source: str) -> dict[str, Any]:
    known = _field_types()
    unknown = sorted(set(table) - set(known))
    if unknown:
        raise SettingsError(f"unknown [{SETTINGS_TABLE}] keys in {source}: {', '.join(unknown)}")

    values: dict[str, Any] = {}
    for name in sorted(table):
        value = table[name]
        if not isinstance(value, known[name]):
            raise SettingsError(
                f"[{SETTINGS_TABLE}].{name} in {source} must be {known[name].__name__}"
            )
        values[name] = value
    return values


def _collect_env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for name, value_type in sorted(_field_types().items()):
        env_name = f"{SETTINGS_ENV_PREFIX}{name.upper()}"
        raw = environ.get(env_name)
        if raw is None:
            continue
        overrides[name] = _coerce_env(raw, value_type, env_name)
    return overrides


def _coerce_env(raw: str, value_type: type, env_name: str) -> object:
    if value_type is bool:
        token = raw.strip().lower()
        if token in _BOOLEAN_TRUE:
            return True
        if token in _BOOLEAN_FALSE:
            return False
        raise SettingsError(f"{env_name} must be a boolean, got {raw!r}")
    return raw


__all__ = [
    "DEFAULT_SETTINGS",
    "SETTINGS_TABLE",
    "SerializerSettings",
    "SettingsError",
    "load_settings",
]
