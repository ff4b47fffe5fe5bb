"""Label maps and equality-based label selectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, MutableMapping, Optional


@dataclass(frozen=True)
class Selector:
    """A selector that matches label sets holding every required key and value."""

    requirements: tuple[tuple[str, str], ...] = ()

    def matches(self, labels: Optional[Mapping[str, str]]) -> bool:
        """Return True if ``labels`` satisfies every requirement."""
        labels = labels or {}
        return all(key in labels and labels[key] == value for key, value in self.requirements)

    def empty(self) -> bool:
        """Return True if the selector has no requirements and so matches everything."""
        return not self.requirements

    def __str__(self) -> str:
        return ",".join(f"{key}={value}" for key, value in self.requirements)


def selector_from_set(labels: Optional[Mapping[str, str]]) -> Selector:
    """Build a selector requiring every key/value pair in ``labels``."""
    return Selector(tuple(sorted((labels or {}).items())))


def add_label(
    labels: Optional[MutableMapping[str, str]], key: str, value: str
) -> Optional[MutableMapping[str, str]]:
    """Insert or update a label, creating the map if needed.

    An empty key leaves ``labels`` untouched and returns it as given.
    """
    if not key:
        return labels
    if labels is None:
        labels = {}
    labels[key] = value
    return labels


def get_label_selector(key: str, value: str) -> Selector:
    """Return a selector for ``key=value``, or an empty selector if the key is empty."""
    if not key:
        return selector_from_set({})
    return selector_from_set({key: value})