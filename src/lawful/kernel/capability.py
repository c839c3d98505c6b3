"""Capability dispatch - one implementation, two names.

A container marks its capability implementations with ``@capability`` and
is finished by the ``@kind`` class decorator, which installs each
implementation under its direct name (``concat``) and its namespaced name
(``fantasy-land/concat``). Both attributes delegate to the same function,
passing along the name the caller used so guard failures report it.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from lawful.kernel.descriptor import TypeDescriptor, registry
from lawful.kernel.naming import DIRECT, FANTASY_LAND, IMPLEMENTS, TAG_NAMESPACE, TYPE_TAG, Naming

T = TypeVar("T", bound=type)

CONVENTIONS: tuple[Naming, ...] = (DIRECT, FANTASY_LAND)


@dataclass(frozen=True)
class Capability:
    """A capability implementation awaiting installation by ``kind``.

    Attributes:
        impl: Function called as ``impl(receiver, method, *args)``.
        static: Whether the receiver is the class rather than the instance.
    """

    impl: Callable[..., Any]
    static: bool = False


def capability(
    impl: Callable[..., Any] | None = None, *, static: bool = False
) -> Any:
    """Mark a method as a capability implementation."""
    def mark(fn: Callable[..., Any]) -> Capability:
        return Capability(fn, static)

    if impl is not None:
        return mark(impl)
    return mark


def _dispatch(cap: Capability, method: str) -> Any:
    impl = cap.impl

    @functools.wraps(impl)
    def dispatch(receiver: Any, *args: Any) -> Any:
        return impl(receiver, method, *args)

    dispatch.__name__ = method
    if cap.static:
        return classmethod(dispatch)
    return dispatch


def _equals_dunder(self: Any, other: object) -> bool:
    return bool(self.equals(other))


def kind(name: str, *, version: int = 1, namespace: str = TAG_NAMESPACE) -> Callable[[T], T]:
    """Finish a container class: dual names, descriptor and type metadata."""
    def decorate(cls: T) -> T:
        marked = {
            attr: value for attr, value in vars(cls).items() if isinstance(value, Capability)
        }
        for cap_name, cap in marked.items():
            for naming in CONVENTIONS:
                setattr(cls, naming(cap_name), _dispatch(cap, naming(cap_name)))

        descriptor = TypeDescriptor(
            name=name,
            tag=f"{namespace}/{name}@{version}",
            capabilities=frozenset(marked),
            empty=getattr(cls, "empty", None) if "empty" in marked else None,
        )
        cls.descriptor = descriptor  # type: ignore[attr-defined]
        cls.type = staticmethod(descriptor.kind_name)  # type: ignore[attr-defined]
        setattr(cls, TYPE_TAG, descriptor.tag)
        setattr(cls, IMPLEMENTS, staticmethod(descriptor.implements))

        if "equals" in marked:
            cls.__eq__ = _equals_dunder  # type: ignore[assignment]
            if "__hash__" not in vars(cls):
                cls.__hash__ = None  # type: ignore[assignment]

        registry.register(descriptor)
        return cls

    return decorate


def implementation_of(cls: type, name: str) -> Callable[..., Any]:
    """Return the implementation shared by both names of a capability."""
    attr = inspect.getattr_static(cls, name)
    if isinstance(attr, (classmethod, staticmethod)):
        attr = attr.__func__
    wrapped = getattr(attr, "__wrapped__", None)
    if wrapped is None:
        raise AttributeError(f"'{cls.__name__}' has no capability '{name}'")
    return wrapped
