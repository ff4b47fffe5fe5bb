"""Allow and deny lists for filtering resources by name."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class Matcher(Protocol):
    """Decides whether a string passes a filter rule."""

    def passes(self, s: str) -> bool:
        """Return True if ``s`` passes the rule."""


@dataclass
class Allow:
    """Permits only the listed strings."""

    literal: list[str] = field(default_factory=list)

    def passes(self, s: str) -> bool:
        """Return True if ``s`` is listed."""
        return s in self.literal


@dataclass
class Deny:
    """Rejects the listed strings."""

    literal: list[str] = field(default_factory=list)

    def passes(self, s: str) -> bool:
        """Return True if ``s`` is not listed."""
        return s not in self.literal


@dataclass
class AllowDeny:
    """Allow and deny lists; when an allow list is set the deny list is ignored."""

    allow: Optional[Allow] = None
    deny: Optional[Deny] = None

    def passes(self, s: str) -> bool:
        """Return whether ``s`` is permitted; everything passes when neither list is set."""
        if self.allow is not None:
            return self.allow.passes(s)
        if self.deny is not None:
            return self.deny.passes(s)
        return True


def is_allowed(ad: Optional[AllowDeny], name: str) -> bool:
    """Return whether ``name`` passes ``ad``; no configuration allows nothing."""
    if ad is None:
        return False
    return ad.passes(name)