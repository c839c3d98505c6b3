"""
Defining a new container kind and checking it with the law harness.

This example shows:
1. Marking capability implementations with @capability
2. Finishing the class with @kind (dual names, type tag, @@implements)
3. Running every applicable law under both naming conventions
4. What a guard failure looks like
"""

import logging
from dataclasses import dataclass
from typing import Any

from lawful import FANTASY_LAND, All, TypeMismatch, capability, equals, kind, verify
from lawful.kernel import is_same_type
from lawful.kernel.guards import require_same_kind

logging.basicConfig(level=logging.DEBUG)


# =============================================================================
# A Max monoid over numbers
# =============================================================================
@kind("Max", namespace="example")
@dataclass(frozen=True, eq=False, repr=False)
class Max:
    value: float = float("-inf")

    def inspect(self) -> str:
        return f"Max {self.value}"

    __str__ = inspect
    __repr__ = inspect

    @capability
    def equals(self, method: str, other: Any) -> bool:
        return is_same_type(self, other) and self.value == other.value

    @capability
    def concat(self, method: str, other: "Max") -> "Max":
        require_same_kind(self, method, other)
        return Max(max(self.value, other.value))

    @capability(static=True)
    def empty(cls, method: str) -> "Max":
        return cls()


def main() -> None:
    m, n, o = Max(3), Max(9), Max(1)
    print(m.concat(n).concat(o))
    print(getattr(m, FANTASY_LAND("concat"))(n))
    print("implements concat:", getattr(Max, "@@implements")("concat"))

    for naming in (None, FANTASY_LAND):
        kwargs = {"naming": naming} if naming else {}
        results = verify(equals, m, n, o, f=abs, g=abs, x=0, **kwargs)
        print(naming or "direct", results)

    try:
        m.concat(All(True))
    except TypeMismatch as err:
        print("guard:", err)


if __name__ == "__main__":
    main()
