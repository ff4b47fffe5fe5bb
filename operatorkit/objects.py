"""Create-or-update of object manifests through a client."""

from __future__ import annotations

import copy
import difflib
import json
from enum import Enum
from typing import Any, Callable, MutableMapping, Optional, Protocol

DEBUG = False


class NotFoundError(LookupError):
    """The requested object does not exist."""


class OperationResult(str, Enum):
    """What create_or_update did to the object."""

    NONE = "unchanged"
    CREATED = "created"
    UPDATED = "updated"


class _Client(Protocol):
    def get(self, name: str, namespace: Optional[str]) -> MutableMapping[str, Any]:
        """Return the stored object or raise NotFoundError."""

    def create(self, obj: MutableMapping[str, Any]) -> None:
        """Store a new object."""

    def update(self, obj: MutableMapping[str, Any]) -> None:
        """Replace a stored object."""


def _key(obj: MutableMapping[str, Any]) -> tuple[Optional[str], Optional[str]]:
    metadata = obj.get("metadata") or {}
    return metadata.get("name"), metadata.get("namespace")


def _object_diff(original: Any, modified: Any) -> str:
    def render(value: Any) -> list[str]:
        return json.dumps(value, indent=2, sort_keys=True, default=str).splitlines(keepends=True)

    return "".join(difflib.unified_diff(render(original), render(modified), "original", "modified"))


def _apply(
    obj: MutableMapping[str, Any],
    mutate: Callable[[MutableMapping[str, Any]], None],
    key: tuple[Optional[str], Optional[str]],
) -> None:
    original = copy.deepcopy(obj)
    mutate(obj)
    if _key(obj) != key:
        raise ValueError("MutateFn cannot mutate object name and/or object namespace")
    if DEBUG:
        diff = _object_diff(original, obj)
        if diff:
            print(diff)


def create_or_update(
    client: _Client,
    obj: MutableMapping[str, Any],
    mutate: Callable[[MutableMapping[str, Any]], None],
) -> OperationResult:
    """Create ``obj`` or update the stored copy so that it reflects ``mutate``.

    The object is looked up by name and namespace. If it exists, ``obj`` is
    refreshed from the stored state before ``mutate`` is applied, and it is only
    written back when the mutation changed something.
    """
    key = _key(obj)
    try:
        current = client.get(*key)
    except NotFoundError:
        _apply(obj, mutate, key)
        client.create(obj)
        return OperationResult.CREATED

    obj.clear()
    obj.update(copy.deepcopy(current))
    existing = copy.deepcopy(obj)
    _apply(obj, mutate, key)
    if obj == existing:
        return OperationResult.NONE
    client.update(obj)
    return OperationResult.UPDATED