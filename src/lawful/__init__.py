from .containers import All, First, Maybe, Unit
from .kernel import (
    DIRECT,
    FANTASY_LAND,
    ContractError,
    InvalidConstructionArgument,
    Naming,
    NotInvocable,
    TypeDescriptor,
    TypeMismatch,
    capability,
    equals,
    implementation_of,
    kind,
    registry,
)
from .laws import verify

__all__ = [
    # Containers
    "All",
    "First",
    "Maybe",
    "Unit",
    # Dispatch
    "capability",
    "kind",
    "implementation_of",
    "TypeDescriptor",
    "registry",
    # Naming
    "Naming",
    "DIRECT",
    "FANTASY_LAND",
    # Errors
    "ContractError",
    "InvalidConstructionArgument",
    "TypeMismatch",
    "NotInvocable",
    # Laws
    "equals",
    "verify",
]
