"""Unit - a container that carries no information."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from lawful.kernel import capability, is_same_type, kind
from lawful.kernel.guards import require_arity, require_function, require_same_kind


@kind("Unit")
@dataclass(frozen=True, eq=False, repr=False)
class Unit:
    """Placeholder monad: every capability yields a Unit.

    The construction argument is discarded. ``map`` and ``chain`` check
    that they were given a function but never call it, so chaining through
    a Unit has no side effects.
    """

    value: Any = None

    def __new__(cls, *args: Any, **kwargs: Any) -> Unit:
        require_arity("Unit", args + tuple(kwargs.values()), 1, "Accepts at most one argument")
        return super().__new__(cls)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", None)

    def inspect(self) -> str:
        return "()"

    __str__ = inspect
    __repr__ = inspect

    def __hash__(self) -> int:
        return hash(Unit.descriptor.tag)

    @capability
    def equals(self, method: str, other: Any) -> bool:
        return is_same_type(self, other)

    @capability
    def concat(self, method: str, other: Unit) -> Unit:
        require_same_kind(self, method, other)
        return Unit()

    @capability(static=True)
    def empty(cls, method: str) -> Unit:
        return cls()

    @capability
    def map(self, method: str, fn: Callable[[Any], Any]) -> Unit:
        require_function(self, method, fn)
        return Unit()

    @capability
    def ap(self, method: str, other: Unit) -> Unit:
        require_same_kind(self, method, other)
        return Unit()

    @capability
    def chain(self, method: str, fn: Callable[[Any], Unit]) -> Unit:
        require_function(self, method, fn)
        return Unit()

    @capability(static=True)
    def of(cls, method: str, value: Any = None) -> Unit:
        return cls()
