"""Boundary predicates used at construction and by the guards."""

from __future__ import annotations

import math
from numbers import Number
from typing import Any

from lawful.kernel.naming import TYPE_TAG


def is_function(value: Any) -> bool:
    return callable(value)


def type_tag(value: Any) -> str | None:
    """Return the ``@@type`` tag of a conforming instance, else None.

    Kind classes carry the tag too, but a class is never an instance of its
    kind, so it reports no tag here.
    """
    if isinstance(value, type):
        return None
    tag = getattr(value, TYPE_TAG, None)
    return tag if isinstance(tag, str) else None


def is_same_type(a: Any, b: Any) -> bool:
    """Kinds match by tag; untagged values match by Python type."""
    tag_a, tag_b = type_tag(a), type_tag(b)
    if tag_a is not None or tag_b is not None:
        return tag_a == tag_b
    return type(a) is type(b)


def truthy(value: Any) -> bool:
    """Explicit truthiness for boolean accumulation.

    None counts as true so that an absent value behaves like the identity.
    Only False, zero, NaN and empty strings or bytes are false; containers
    and other objects are always true, even when empty.
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return value
    if isinstance(value, Number):
        if isinstance(value, float) and math.isnan(value):
            return False
        return value != 0
    if isinstance(value, (str, bytes)):
        return len(value) > 0
    return True
