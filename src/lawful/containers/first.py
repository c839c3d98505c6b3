"""First - keeps the leftmost present value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lawful.containers.maybe import Maybe
from lawful.kernel import capability, is_same_type, kind, type_tag
from lawful.kernel.guards import UNSET, require_argument, require_arity, require_same_kind


@kind("First")
@dataclass(frozen=True, eq=False, repr=False)
class First:
    """Monoid over ``Maybe`` that keeps the first Just it sees.

    A Maybe argument is kept as-is, None becomes Nothing and any other
    value becomes Just. The identity is ``First(Maybe.Nothing())``.
    """

    value: Any = UNSET

    def __new__(cls, *args: Any, **kwargs: Any) -> First:
        require_arity("First", args + tuple(kwargs.values()), 1, "Requires one argument")
        return super().__new__(cls)

    def __post_init__(self) -> None:
        require_argument("First", self.value)
        object.__setattr__(self, "value", _to_maybe(self.value))

    def option(self, default: Any) -> Any:
        """Extract the held value, or ``default`` when there is none."""
        return self.value.option(default)

    def inspect(self) -> str:
        return f"First( {self.value.inspect()} )"

    __str__ = inspect
    __repr__ = inspect

    @capability
    def equals(self, method: str, other: Any) -> bool:
        return is_same_type(self, other) and self.value.equals(other.value)

    @capability
    def concat(self, method: str, other: First) -> First:
        require_same_kind(self, method, other)
        return self if self.value.is_just() else other

    @capability(static=True)
    def empty(cls, method: str) -> First:
        return cls(Maybe.Nothing())


def _to_maybe(value: Any) -> Maybe:
    if type_tag(value) == Maybe.descriptor.tag:
        return value
    if value is None:
        return Maybe.Nothing()
    return Maybe.Just(value)
