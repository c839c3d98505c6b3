"""All - a monoid of booleans under logical AND."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lawful.kernel import capability, is_same_type, kind, truthy
from lawful.kernel.guards import UNSET, require_arity, require_non_function, require_same_kind


@kind("All")
@dataclass(frozen=True, eq=False, repr=False)
class All:
    """Accumulates truth with logical AND; ``All(True)`` is the identity.

    Any non-function value is accepted and reduced with ``truthy``, so
    ``All(None)`` holds True.
    """

    value: Any = UNSET

    def __new__(cls, *args: Any, **kwargs: Any) -> All:
        require_arity("All", args + tuple(kwargs.values()), 1, "Requires one argument")
        return super().__new__(cls)

    def __post_init__(self) -> None:
        require_non_function("All", self.value)
        object.__setattr__(self, "value", truthy(self.value))

    def inspect(self) -> str:
        return f"All {str(self.value).lower()}"

    __str__ = inspect
    __repr__ = inspect

    def __hash__(self) -> int:
        return hash((All.descriptor.tag, self.value))

    @capability
    def equals(self, method: str, other: Any) -> bool:
        return is_same_type(self, other) and self.value == other.value

    @capability
    def concat(self, method: str, other: All) -> All:
        require_same_kind(self, method, other)
        return All(self.value and other.value)

    @capability(static=True)
    def empty(cls, method: str) -> All:
        return cls(True)
