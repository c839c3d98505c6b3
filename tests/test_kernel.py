"""Tests for the kernel: naming, predicates, equality, guards, descriptors and dispatch."""

import math
from dataclasses import FrozenInstanceError

import pytest
from pydantic import ValidationError

from lawful import All, First, Maybe, Unit
from lawful.kernel import (
    DIRECT,
    FANTASY_LAND,
    ContractError,
    InvalidConstructionArgument,
    KindRegistry,
    Monad,
    Monoid,
    Naming,
    NotInvocable,
    Setoid,
    TypeDescriptor,
    TypeMismatch,
    equals,
    implementation_of,
    is_function,
    is_same_type,
    registry,
    truthy,
    type_tag,
)
from lawful.kernel.guards import (
    UNSET,
    require_argument,
    require_arity,
    require_function,
    require_non_function,
    require_same_kind,
)

from fakes import Box, Impostor

KINDS = [All, First, Maybe, Unit, Box]


class TestNaming:
    """Tests for naming conventions."""

    def test_direct(self):
        assert DIRECT("concat") == "concat"

    def test_fantasy_land(self):
        """The prefix is added and stripped."""
        assert FANTASY_LAND("concat") == "fantasy-land/concat"
        assert FANTASY_LAND.strip("fantasy-land/concat") == "concat"
        assert FANTASY_LAND.strip("concat") == "concat"

    def test_custom_prefix(self):
        assert Naming("static-land")("map") == "static-land/map"

    def test_is_immutable(self):
        with pytest.raises(FrozenInstanceError):
            FANTASY_LAND.prefix = "other"  # type: ignore[misc]


class TestPredicates:
    """Tests for boundary predicates."""

    def test_is_function(self):
        """Classes count as functions."""
        assert is_function(lambda: None)
        assert is_function(str)
        assert not is_function(All(True))
        assert not is_function(None)

    def test_type_tag(self):
        assert type_tag(All(True)) == "lawful/All@1"
        assert type_tag(Impostor()) is None
        assert type_tag(3) is None

    @pytest.mark.parametrize("cls", KINDS)
    def test_kind_class_has_no_instance_tag(self, cls):
        """A kind's class carries @@type but is not a value of the kind."""
        assert getattr(cls, "@@type")
        assert type_tag(cls) is None

    def test_is_same_type(self):
        assert is_same_type(All(True), All(False))
        assert not is_same_type(All(True), Unit())
        assert not is_same_type(All(True), Impostor())
        assert is_same_type(1, 2)
        assert not is_same_type(1, True)

    def test_class_is_not_same_type_as_instance(self):
        assert not is_same_type(All(True), All)
        assert not is_same_type(All, All(True))
        assert not is_same_type(First(1), First)

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, True),
            (False, False),
            (0, False),
            (0.0, False),
            (math.nan, False),
            (-1, True),
            ("", False),
            (b"", False),
            ("x", True),
            ([], True),
            ({}, True),
            (object(), True),
        ],
    )
    def test_truthy(self, value, expected):
        """Truthiness follows the explicit table, not bool()."""
        assert truthy(value) is expected


class TestEquals:
    """Tests for the deep equality predicate."""

    def test_primitives(self):
        assert equals(1, 1)
        assert not equals(1, 2)
        assert not equals(1, "1")
        assert not equals(1, True)

    def test_nested_structures(self):
        """Mappings and sequences compare element by element."""
        assert equals({"a": [1, {"b": (2, 3)}]}, {"a": [1, {"b": (2, 3)}]})
        assert not equals({"a": [1, 2]}, {"a": [1, 2, 3]})
        assert not equals({"a": 1}, {"b": 1})

    def test_containers_use_their_own_equality(self):
        assert equals(Unit(1), Unit(2))
        assert equals([First(1)], [First(1)])
        assert not equals(First(1), First(2))

    @pytest.mark.parametrize("cls", [All, First, Unit])
    def test_class_against_instance(self, cls):
        """A kind's class compares unequal to its values, in either order."""
        value = cls.empty()
        assert equals(cls, value) is False
        assert equals(value, cls) is False
        assert equals(cls, cls) is True

    def test_never_raises(self):
        class Angry:
            def __eq__(self, other):
                raise RuntimeError("no")

        assert equals(Angry(), Angry()) is False

    def test_cyclic_lists_terminate(self):
        """Self-referential structures compare without recursing forever."""
        a = [1]
        a.append(a)
        b = [1]
        b.append(b)
        assert equals(a, a) is True
        assert equals(a, b) is True

    def test_cyclic_mappings_terminate(self):
        a = {"x": 1}
        a["self"] = a
        b = {"x": 1}
        b["self"] = b
        c = {"x": 2}
        c["self"] = c
        assert equals(a, b) is True
        assert equals(a, c) is False

    def test_cyclic_mismatch_is_unequal(self):
        a = [1]
        a.append(a)
        b = [2]
        b.append(b)
        assert equals(a, b) is False


class TestGuards:
    """Tests for the guard layer."""

    def test_require_argument(self):
        require_argument("First", None)
        with pytest.raises(InvalidConstructionArgument, match="^First: Requires one argument$"):
            require_argument("First", UNSET)

    def test_require_non_function(self):
        require_non_function("All", 0)
        with pytest.raises(InvalidConstructionArgument):
            require_non_function("All", UNSET)
        with pytest.raises(InvalidConstructionArgument):
            require_non_function("All", print)

    def test_require_arity(self):
        """More arguments than the limit is a construction error."""
        require_arity("First", (), 1, "Requires one argument")
        require_arity("First", (1,), 1, "Requires one argument")
        with pytest.raises(InvalidConstructionArgument, match="^First: Requires one argument$") as info:
            require_arity("First", (1, 2), 1, "Requires one argument")
        assert info.value.method is None
        assert info.value.raw_value == (1, 2)

    def test_require_same_kind(self):
        require_same_kind(All(True), "concat", All(False))
        with pytest.raises(TypeMismatch) as info:
            require_same_kind(All(True), "concat", Impostor())
        assert info.value.kind == "All"
        assert info.value.method == "concat"
        assert info.value.location == "All.concat"

    @pytest.mark.parametrize("receiver", [All(True), First(1), Unit(), Box(1)])
    def test_require_same_kind_rejects_the_class(self, receiver):
        """The receiver's own class is not an operand of its kind."""
        with pytest.raises(TypeMismatch) as info:
            require_same_kind(receiver, "concat", type(receiver))
        assert info.value.raw_value is type(receiver)

    def test_require_function(self):
        require_function(Unit(), "map", len)
        with pytest.raises(NotInvocable) as info:
            require_function(Unit(), "fantasy-land/map", 1)
        assert str(info.value) == "Unit.fantasy-land/map: Function required"
        assert info.value.raw_value == 1

    def test_errors_are_type_errors(self):
        """Callers catching TypeError keep working."""
        for cls in (InvalidConstructionArgument, TypeMismatch, NotInvocable):
            assert issubclass(cls, ContractError)
            assert issubclass(cls, TypeError)

    def test_repr_keeps_raw_value(self):
        err = TypeMismatch("All", "concat", "All required", 3)
        assert "raw_value=3" in repr(err)


class TestDescriptor:
    """Tests for type descriptors and the kind registry."""

    def test_shipped_descriptors(self):
        assert All.descriptor.name == "All"
        assert All.descriptor.capabilities == frozenset({"equals", "concat", "empty"})
        assert Unit.descriptor.capabilities == frozenset(
            {"equals", "concat", "empty", "map", "ap", "chain", "of"}
        )
        assert Maybe.descriptor.empty is None

    def test_implements_without_instance(self):
        """Both naming conventions are understood."""
        assert All.descriptor.implements("concat")
        assert All.descriptor.implements("fantasy-land/concat")
        assert not All.descriptor.implements("map")

    def test_is_frozen(self):
        with pytest.raises(ValidationError):
            All.descriptor.name = "Other"  # type: ignore[misc]

    @pytest.mark.parametrize("tag", ["All", "lawful/All", "lawful/All@x", "/All@1"])
    def test_rejects_malformed_tags(self, tag):
        with pytest.raises(ValidationError):
            TypeDescriptor(name="All", tag=tag, capabilities=frozenset())

    def test_registry_holds_every_kind(self):
        for cls in KINDS:
            assert getattr(cls, "@@type") in registry
            assert registry.get(getattr(cls, "@@type")) is cls.descriptor

    def test_registry_lookup_miss(self):
        with pytest.raises(KeyError):
            KindRegistry().get("lawful/Nope@1")

    def test_registry_iteration(self):
        local = KindRegistry()
        local.register(All.descriptor)
        local.register(Unit.descriptor)
        assert len(local) == 2
        assert {d.name for d in local} == {"All", "Unit"}


class TestDispatch:
    """Tests for capability dispatch and protocols."""

    def test_implementation_of_unknown(self):
        with pytest.raises(AttributeError):
            implementation_of(All, "inspect")

    def test_kinds_defined_outside_the_library(self):
        """Dispatch works for a kind outside the library."""
        assert implementation_of(Box, "map") is implementation_of(Box, "fantasy-land/map")
        assert getattr(Box, "@@type") == "fakes/Box@1"
        assert Box(2).map(lambda x: x + 1).equals(Box(3))

    def test_protocols(self):
        assert isinstance(All(True), Setoid)
        assert isinstance(All(True), Monoid)
        assert not isinstance(All(True), Monad)
        assert isinstance(Unit(), Monad)
        assert isinstance(Box(()), Monad)
