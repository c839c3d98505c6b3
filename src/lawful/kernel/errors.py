"""Classified failures raised by the guard layer."""

from __future__ import annotations

from typing import Any


class ContractError(TypeError):
    """A value or operand did not meet a capability's requirement.

    The message follows ``<Type>: <requirement>`` for construction and
    ``<Type>.<method>: <requirement>`` for capabilities, where ``method`` is
    the attribute name the caller used. The raw value is kept for debugging.
    """

    def __init__(
        self,
        kind: str,
        method: str | None,
        requirement: str,
        raw_value: Any = None,
    ) -> None:
        self.kind = kind
        self.method = method
        self.requirement = requirement
        self.raw_value = raw_value
        super().__init__(f"{self.location}: {requirement}")

    @property
    def location(self) -> str:
        if self.method is None:
            return self.kind
        return f"{self.kind}.{self.method}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r}, raw_value={self.raw_value!r})"


class InvalidConstructionArgument(ContractError):
    """Wrong arity or a disallowed value given to a constructor."""


class TypeMismatch(ContractError):
    """Operand of a binary capability is not the same kind."""


class NotInvocable(ContractError):
    """Argument that must be called is not callable."""
