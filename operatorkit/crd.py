"""Helpers for CustomResourceDefinition manifests."""

from __future__ import annotations

from typing import Any, Mapping

ESTABLISHED = "Established"
CONDITION_TRUE = "True"


def established(crd: Mapping[str, Any]) -> bool:
    """Return True if the CRD's Established condition is true.

    That means the definition is accepted and the API server serves the resource.
    """
    status = crd.get("status") or {}
    conditions = status.get("conditions") or []
    return any(
        condition.get("type") == ESTABLISHED and condition.get("status") == CONDITION_TRUE
        for condition in conditions
    )