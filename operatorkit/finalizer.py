"""Finalizer helpers for object manifests."""

from __future__ import annotations

from typing import Any, MutableMapping


def _finalizers(obj: MutableMapping[str, Any]) -> list[str]:
    metadata = obj.get("metadata") or {}
    return list(metadata.get("finalizers") or [])


def _set_finalizers(obj: MutableMapping[str, Any], finalizers: list[str]) -> None:
    if obj.get("metadata") is None:
        obj["metadata"] = {}
    obj["metadata"]["finalizers"] = finalizers


def has_finalizer(obj: MutableMapping[str, Any], finalizer: str) -> bool:
    """Return True if the object carries the given finalizer."""
    return finalizer in _finalizers(obj)


def add_finalizer(obj: MutableMapping[str, Any], finalizer: str) -> None:
    """Add a finalizer; the resulting list is de-duplicated and sorted."""
    _set_finalizers(obj, sorted(set(_finalizers(obj)) | {finalizer}))


def delete_finalizer(obj: MutableMapping[str, Any], finalizer: str) -> None:
    """Remove a finalizer; the resulting list is de-duplicated and sorted."""
    _set_finalizers(obj, sorted(set(_finalizers(obj)) - {finalizer}))