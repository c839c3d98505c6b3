"""Type descriptors - per-kind metadata and the kind registry."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from lawful.kernel.naming import FANTASY_LAND

logger = logging.getLogger(__name__)

TAG_PATTERN = re.compile(r"^[\w.-]+/[A-Za-z_]\w*@\d+$")


class TypeDescriptor(BaseModel):
    """Static description of a container kind.

    Attributes:
        name: Kind name reported by ``type()``.
        tag: Stable tag in ``<namespace>/<Name>@<version>`` form.
        capabilities: Direct names of the capabilities the kind implements.
        empty: Zero-argument identity-element constructor, if any.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    tag: str
    capabilities: frozenset[str]
    empty: Callable[[], Any] | None = None

    @field_validator("tag")
    @classmethod
    def _check_tag(cls, value: str) -> str:
        if not TAG_PATTERN.match(value):
            raise ValueError(f"Type tag must look like namespace/Name@version, got {value!r}")
        return value

    def implements(self, name: str) -> bool:
        """Report whether the kind implements ``name`` under either convention."""
        return FANTASY_LAND.strip(name) in self.capabilities

    def kind_name(self) -> str:
        return self.name


class KindRegistry:
    """Registry of container kinds keyed by type tag."""

    def __init__(self) -> None:
        self._kinds: dict[str, TypeDescriptor] = {}

    def register(self, descriptor: TypeDescriptor) -> None:
        logger.debug("registering kind %s", descriptor.tag)
        self._kinds[descriptor.tag] = descriptor

    def get(self, tag: str) -> TypeDescriptor:
        if tag not in self._kinds:
            raise KeyError(f"Kind '{tag}' not found in registry")
        return self._kinds[tag]

    def __contains__(self, tag: object) -> bool:
        return tag in self._kinds

    def __iter__(self) -> Iterator[TypeDescriptor]:
        return iter(self._kinds.values())

    def __len__(self) -> int:
        return len(self._kinds)


registry = KindRegistry()
