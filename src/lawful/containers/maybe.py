"""Maybe - an optional value, either Just a value or Nothing."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from lawful.kernel import capability, is_same_type, kind
from lawful.kernel.equality import equals as value_equals
from lawful.kernel.guards import require_function


@kind("Maybe")
@dataclass(frozen=True, eq=False, repr=False)
class Maybe:
    """Optional value. ``Maybe(x)`` is ``Just x``; use ``Maybe.Nothing()`` for absence."""

    value: Any = None
    present: bool = True

    def __post_init__(self) -> None:
        if not self.present:
            object.__setattr__(self, "value", None)

    @staticmethod
    def Just(value: Any) -> Maybe:
        return Maybe(value)

    @staticmethod
    def Nothing() -> Maybe:
        return Maybe(present=False)

    def is_just(self) -> bool:
        return self.present

    def is_nothing(self) -> bool:
        return not self.present

    def option(self, default: Any) -> Any:
        """Return the held value, or ``default`` when Nothing."""
        return self.value if self.present else default

    def inspect(self) -> str:
        return f"Just {self.value!r}" if self.present else "Nothing"

    __str__ = inspect
    __repr__ = inspect

    @capability
    def equals(self, method: str, other: Any) -> bool:
        if not is_same_type(self, other) or self.present != other.present:
            return False
        return value_equals(self.value, other.value)

    @capability
    def map(self, method: str, fn: Callable[[Any], Any]) -> Maybe:
        require_function(self, method, fn)
        return Maybe(fn(self.value)) if self.present else self

    @capability
    def chain(self, method: str, fn: Callable[[Any], Maybe]) -> Maybe:
        require_function(self, method, fn)
        return fn(self.value) if self.present else self

    @capability(static=True)
    def of(cls, method: str, value: Any) -> Maybe:
        return cls(value)
