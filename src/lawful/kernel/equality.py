"""Deep value equality used by containers and the law harness."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lawful.kernel.predicates import is_same_type, type_tag


def equals(a: Any, b: Any) -> bool:
    """Compare two values structurally.

    Conforming values defer to their own ``equals``. Mappings, lists and
    tuples are compared element by element; a pair of structures already
    being compared further up counts as equal, so cyclic values terminate.
    Never raises.
    """
    return _equals(a, b, frozenset())


def _equals(a: Any, b: Any, seen: frozenset[tuple[int, int]]) -> bool:
    if a is b:
        return True
    if not is_same_type(a, b):
        return False

    if type_tag(a) is not None:
        compare = getattr(a, "equals", None)
        if callable(compare):
            return bool(compare(b))

    if isinstance(a, (Mapping, list, tuple)):
        pair = (id(a), id(b))
        if pair in seen:
            return True
        seen = seen | {pair}

        if isinstance(a, Mapping):
            if a.keys() != b.keys():
                return False
            return all(_equals(a[key], b[key], seen) for key in a)

        if len(a) != len(b):
            return False
        return all(_equals(x, y, seen) for x, y in zip(a, b))

    try:
        return bool(a == b)
    except Exception:
        return False
