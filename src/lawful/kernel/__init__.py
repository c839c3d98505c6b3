"""Kernel layer - naming, guards, dispatch and metadata for containers."""

from lawful.kernel.capability import Capability, capability, implementation_of, kind
from lawful.kernel.descriptor import KindRegistry, TypeDescriptor, registry
from lawful.kernel.equality import equals
from lawful.kernel.errors import (
    ContractError,
    InvalidConstructionArgument,
    NotInvocable,
    TypeMismatch,
)
from lawful.kernel.guards import UNSET
from lawful.kernel.naming import DIRECT, FANTASY_LAND, Naming
from lawful.kernel.predicates import is_function, is_same_type, truthy, type_tag
from lawful.kernel.protocols import (
    Applicative,
    Apply,
    Chain,
    Functor,
    Monad,
    Monoid,
    Semigroup,
    Setoid,
)

__all__ = [
    # Dispatch
    "Capability",
    "capability",
    "kind",
    "implementation_of",
    # Metadata
    "TypeDescriptor",
    "KindRegistry",
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
    # Predicates
    "equals",
    "is_function",
    "is_same_type",
    "truthy",
    "type_tag",
    "UNSET",
    # Protocols
    "Setoid",
    "Semigroup",
    "Monoid",
    "Functor",
    "Apply",
    "Applicative",
    "Chain",
    "Monad",
]
