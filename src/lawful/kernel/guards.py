"""Guard layer - rejects invalid inputs before a capability body runs."""

from __future__ import annotations

import logging
from typing import Any

from lawful.kernel.errors import (
    ContractError,
    InvalidConstructionArgument,
    NotInvocable,
    TypeMismatch,
)
from lawful.kernel.predicates import is_function, is_same_type

logger = logging.getLogger(__name__)


class _Unset:
    """Marker for an argument that was not supplied."""

    def __repr__(self) -> str:
        return "<unset>"


UNSET: Any = _Unset()


def _reject(error: ContractError) -> None:
    logger.debug("rejected %s: %s", error.location, error.requirement)
    raise error


def _kind_of(receiver: Any) -> str:
    return receiver.type()


def require_argument(kind: str, value: Any) -> None:
    """Fail when a constructor that needs one argument received none."""
    if value is UNSET:
        _reject(InvalidConstructionArgument(kind, None, "Requires one argument"))


def require_non_function(kind: str, value: Any) -> None:
    """Fail unless a non-function value was supplied."""
    if value is UNSET or is_function(value):
        _reject(
            InvalidConstructionArgument(kind, None, "Non-function value required", value)
        )


def require_same_kind(receiver: Any, method: str, other: Any) -> None:
    """Fail unless ``other`` carries the receiver's type tag."""
    if not is_same_type(receiver, other):
        kind = _kind_of(receiver)
        _reject(TypeMismatch(kind, method, f"{kind} required", other))


def require_function(receiver: Any, method: str, fn: Any) -> None:
    """Fail unless ``fn`` can be called."""
    if not is_function(fn):
        _reject(NotInvocable(_kind_of(receiver), method, "Function required", fn))


def require_arity(kind: str, args: tuple[Any, ...], limit: int, requirement: str) -> None:
    """Fail when a constructor received more than ``limit`` arguments."""
    if len(args) > limit:
        _reject(InvalidConstructionArgument(kind, None, requirement, args))
