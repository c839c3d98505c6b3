"""Structural protocols for each algebraic class."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, Self, runtime_checkable


@runtime_checkable
class Setoid(Protocol):
    """Values with a lawful equality relation."""

    def equals(self, other: Any) -> bool: ...


@runtime_checkable
class Semigroup(Protocol):
    """Values with an associative combination."""

    def concat(self, other: Self) -> Self: ...


@runtime_checkable
class Monoid(Semigroup, Protocol):
    """A semigroup with an identity element."""

    @classmethod
    def empty(cls) -> Self: ...


@runtime_checkable
class Functor(Protocol):
    """Structure-preserving mapping."""

    def map(self, fn: Callable[[Any], Any]) -> Self: ...


@runtime_checkable
class Apply(Functor, Protocol):
    """A functor whose wrapped function applies to another wrapped value."""

    def ap(self, other: Self) -> Self: ...


@runtime_checkable
class Applicative(Apply, Protocol):
    """An apply with a lift."""

    @classmethod
    def of(cls, value: Any = None) -> Self: ...


@runtime_checkable
class Chain(Apply, Protocol):
    """Sequencing of container-producing computations."""

    def chain(self, fn: Callable[[Any], Any]) -> Self: ...


@runtime_checkable
class Monad(Applicative, Chain, Protocol):
    """A chain with a lift."""
