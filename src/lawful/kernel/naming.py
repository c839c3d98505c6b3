"""Naming conventions for capabilities and type metadata."""

from __future__ import annotations

from dataclasses import dataclass

FANTASY_LAND_PREFIX = "fantasy-land"
TAG_NAMESPACE = "lawful"

TYPE_TAG = "@@type"
IMPLEMENTS = "@@implements"


@dataclass(frozen=True)
class Naming:
    """Maps a capability name to the attribute name used to reach it.

    Attributes:
        prefix: Namespace placed before the capability name, or None for
            the direct convention.
    """

    prefix: str | None = None

    def __call__(self, name: str) -> str:
        if self.prefix is None:
            return name
        return f"{self.prefix}/{name}"

    def strip(self, attribute: str) -> str:
        """Recover the capability name from an attribute name."""
        if self.prefix is not None and attribute.startswith(f"{self.prefix}/"):
            return attribute[len(self.prefix) + 1:]
        return attribute


DIRECT = Naming()
FANTASY_LAND = Naming(FANTASY_LAND_PREFIX)
