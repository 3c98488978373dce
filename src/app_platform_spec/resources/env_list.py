"""Ordered environment-variable list with key uniqueness enforced on insert."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from app_platform_spec.components.base import coerce_component
from app_platform_spec.components.environment_variable import EnvironmentVariable
from app_platform_spec.validation.errors import ValidationError

logger = structlog.get_logger(__name__)


class EnvironmentList:
    """Environment variables owned by a single resource.

    The initial entries are accepted as given, duplicates included (a warning
    is logged). Every later :meth:`add` rejects a key that is already present.
    """

    __slots__ = ("_items", "_owner")

    def __init__(self, items: Iterable[EnvironmentVariable] = (), *, owner: str = "") -> None:
        self._items: list[EnvironmentVariable] = list(items)
        self._owner = owner

        duplicates = sorted(key for key, count in Counter(self.keys()).items() if count > 1)
        if duplicates:
            logger.warning(
                "app_platform_env_duplicate_keys",
                resource=owner,
                keys=duplicates,
            )

    @classmethod
    def from_records(
        cls,
        entries: Iterable[object],
        *,
        owner: str = "",
        path: str = "envs",
    ) -> EnvironmentList:
        """Build from instances or field-named records; failures carry ``envs[i]`` paths."""

        return cls(
            (
                coerce_component(EnvironmentVariable, entry, f"{path}[{index}]")
                for index, entry in enumerate(entries)
            ),
            owner=owner,
        )

    def add(self, env: EnvironmentVariable | Mapping[str, object]) -> None:
        item = coerce_component(EnvironmentVariable, env, "env")
        if self.get(item.key) is not None:
            raise ValidationError(
                "key",
                item.key,
                f'Environment variable with key "{item.key}" already exists',
            )
        self._items.append(item)
        logger.debug("app_platform_env_added", resource=self._owner, key=item.key)

    def remove(self, key: str) -> bool:
        """Remove the first entry for ``key``; report whether one was found."""

        for index, item in enumerate(self._items):
            if item.key == key:
                del self._items[index]
                logger.debug("app_platform_env_removed", resource=self._owner, key=key)
                return True
        return False

    def get(self, key: str) -> EnvironmentVariable | None:
        for item in self._items:
            if item.key == key:
                return item
        return None

    def keys(self) -> list[str]:
        return [item.key for item in self._items]

    def snapshot(self) -> list[EnvironmentVariable]:
        return list(self._items)

    def to_dicts(self) -> list[dict[str, Any]]:
        return [item.to_dict() for item in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"EnvironmentList({self.keys()!r})"


__all__ = ["EnvironmentList"]
