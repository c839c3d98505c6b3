"""Law verification harness.

Laws are parameterised by capability names only. They never look inside a
container, so the same checks validate every conforming kind under either
naming convention:

    SemigroupLaws("concat").associativity(equals, a, b, c)
    SemigroupLaws.for_naming(FANTASY_LAND).associativity(equals, a, b, c)

Identity elements and lifts are read from ``type(m)``, the kind's class.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from lawful.kernel.naming import DIRECT, IMPLEMENTS, Naming

logger = logging.getLogger(__name__)

Equals = Callable[[Any, Any], bool]


def identity(x: Any) -> Any:
    return x


def compose(f: Callable[[Any], Any]) -> Callable[[Callable[[Any], Any]], Callable[[Any], Any]]:
    """Curried composition: ``compose(f)(g)(x) == f(g(x))``."""
    return lambda g: lambda x: f(g(x))


def _call(target: Any, name: str, *args: Any) -> Any:
    return getattr(target, name)(*args)


def _holds(law: str, result: Any) -> bool:
    if not result:
        logger.debug("law %s does not hold", law)
    return bool(result)


@dataclass(frozen=True)
class SetoidLaws:
    equals: str = "equals"

    @classmethod
    def for_naming(cls, naming: Naming) -> SetoidLaws:
        return cls(naming("equals"))

    def reflexivity(self, m: Any) -> bool:
        return _holds("Setoid.reflexivity", _call(m, self.equals, m))

    def symmetry(self, m: Any, n: Any) -> bool:
        return _holds(
            "Setoid.symmetry",
            _call(m, self.equals, n) == _call(n, self.equals, m),
        )

    def transitivity(self, m: Any, n: Any, o: Any) -> bool:
        if _call(m, self.equals, n) and _call(n, self.equals, o):
            return _holds("Setoid.transitivity", _call(m, self.equals, o))
        return True


@dataclass(frozen=True)
class SemigroupLaws:
    concat: str = "concat"

    @classmethod
    def for_naming(cls, naming: Naming) -> SemigroupLaws:
        return cls(naming("concat"))

    def associativity(self, equals: Equals, m: Any, n: Any, o: Any) -> bool:
        left = _call(_call(m, self.concat, n), self.concat, o)
        right = _call(m, self.concat, _call(n, self.concat, o))
        return _holds("Semigroup.associativity", equals(left, right))


@dataclass(frozen=True)
class MonoidLaws:
    empty: str = "empty"
    concat: str = "concat"

    @classmethod
    def for_naming(cls, naming: Naming) -> MonoidLaws:
        return cls(naming("empty"), naming("concat"))

    def left_identity(self, equals: Equals, m: Any) -> bool:
        unit = _call(type(m), self.empty)
        return _holds("Monoid.left_identity", equals(_call(unit, self.concat, m), m))

    def right_identity(self, equals: Equals, m: Any) -> bool:
        unit = _call(type(m), self.empty)
        return _holds("Monoid.right_identity", equals(_call(m, self.concat, unit), m))


@dataclass(frozen=True)
class FunctorLaws:
    map: str = "map"

    @classmethod
    def for_naming(cls, naming: Naming) -> FunctorLaws:
        return cls(naming("map"))

    def identity(self, equals: Equals, m: Any) -> bool:
        return _holds("Functor.identity", equals(_call(m, self.map, identity), m))

    def composition(
        self,
        equals: Equals,
        f: Callable[[Any], Any],
        g: Callable[[Any], Any],
        m: Any,
    ) -> bool:
        left = _call(m, self.map, lambda x: f(g(x)))
        right = _call(_call(m, self.map, g), self.map, f)
        return _holds("Functor.composition", equals(left, right))


@dataclass(frozen=True)
class ApplyLaws:
    ap: str = "ap"
    map: str = "map"

    @classmethod
    def for_naming(cls, naming: Naming) -> ApplyLaws:
        return cls(naming("ap"), naming("map"))

    def composition(self, equals: Equals, g: Any, f: Any, v: Any) -> bool:
        """``g`` and ``f`` hold functions, ``v`` holds a value."""
        left = _call(_call(_call(g, self.map, compose), self.ap, f), self.ap, v)
        right = _call(g, self.ap, _call(f, self.ap, v))
        return _holds("Apply.composition", equals(left, right))


@dataclass(frozen=True)
class ApplicativeLaws:
    of: str = "of"
    ap: str = "ap"

    @classmethod
    def for_naming(cls, naming: Naming) -> ApplicativeLaws:
        return cls(naming("of"), naming("ap"))

    def identity(self, equals: Equals, v: Any) -> bool:
        lifted = _call(type(v), self.of, identity)
        return _holds("Applicative.identity", equals(_call(lifted, self.ap, v), v))

    def homomorphism(
        self, equals: Equals, rep: type, f: Callable[[Any], Any], x: Any
    ) -> bool:
        left = _call(_call(rep, self.of, f), self.ap, _call(rep, self.of, x))
        return _holds("Applicative.homomorphism", equals(left, _call(rep, self.of, f(x))))

    def interchange(self, equals: Equals, u: Any, y: Any) -> bool:
        rep = type(u)
        left = _call(u, self.ap, _call(rep, self.of, y))
        right = _call(_call(rep, self.of, lambda fn: fn(y)), self.ap, u)
        return _holds("Applicative.interchange", equals(left, right))


@dataclass(frozen=True)
class ChainLaws:
    chain: str = "chain"

    @classmethod
    def for_naming(cls, naming: Naming) -> ChainLaws:
        return cls(naming("chain"))

    def associativity(
        self,
        equals: Equals,
        f: Callable[[Any], Any],
        g: Callable[[Any], Any],
        m: Any,
    ) -> bool:
        left = _call(_call(m, self.chain, f), self.chain, g)
        right = _call(m, self.chain, lambda x: _call(f(x), self.chain, g))
        return _holds("Chain.associativity", equals(left, right))


@dataclass(frozen=True)
class MonadLaws:
    of: str = "of"
    chain: str = "chain"

    @classmethod
    def for_naming(cls, naming: Naming) -> MonadLaws:
        return cls(naming("of"), naming("chain"))

    def left_identity(
        self, equals: Equals, rep: type, f: Callable[[Any], Any], x: Any
    ) -> bool:
        left = _call(_call(rep, self.of, x), self.chain, f)
        return _holds("Monad.left_identity", equals(left, f(x)))

    def right_identity(self, equals: Equals, m: Any) -> bool:
        lift = getattr(type(m), self.of)
        return _holds("Monad.right_identity", equals(_call(m, self.chain, lift), m))


def verify(
    equals: Equals,
    m: Any,
    n: Any,
    o: Any,
    *,
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    x: Any,
    naming: Naming = DIRECT,
) -> dict[str, bool]:
    """Check every law family the kind of ``m`` reports through ``@@implements``.

    Args:
        equals: Equality predicate used to compare results
        m, n, o: Instances of one kind
        f, g: Plain functions over the wrapped values
        x: A plain value to lift
        naming: Naming convention used to reach capabilities

    Returns:
        Mapping of ``"<Family>.<law>"`` to whether it holds
    """
    rep = type(m)
    implements = getattr(rep, IMPLEMENTS)
    results: dict[str, bool] = {}

    if implements("equals"):
        setoid = SetoidLaws.for_naming(naming)
        results["Setoid.reflexivity"] = setoid.reflexivity(m)
        results["Setoid.symmetry"] = setoid.symmetry(m, n)
        results["Setoid.transitivity"] = setoid.transitivity(m, n, o)

    if implements("concat"):
        semigroup = SemigroupLaws.for_naming(naming)
        results["Semigroup.associativity"] = semigroup.associativity(equals, m, n, o)

        if implements("empty"):
            monoid = MonoidLaws.for_naming(naming)
            results["Monoid.left_identity"] = monoid.left_identity(equals, m)
            results["Monoid.right_identity"] = monoid.right_identity(equals, m)

    if implements("map"):
        functor = FunctorLaws.for_naming(naming)
        results["Functor.identity"] = functor.identity(equals, m)
        results["Functor.composition"] = functor.composition(equals, f, g, m)

    if implements("of"):
        def lift(fn: Callable[[Any], Any]) -> Callable[[Any], Any]:
            return lambda value: _call(rep, naming("of"), fn(value))

        if implements("ap"):
            wrapped_f = _call(rep, naming("of"), f)
            wrapped_g = _call(rep, naming("of"), g)
            applicative = ApplicativeLaws.for_naming(naming)
            if implements("map"):
                results["Apply.composition"] = ApplyLaws.for_naming(naming).composition(
                    equals, wrapped_g, wrapped_f, m
                )
            results["Applicative.identity"] = applicative.identity(equals, m)
            results["Applicative.homomorphism"] = applicative.homomorphism(equals, rep, f, x)
            results["Applicative.interchange"] = applicative.interchange(equals, wrapped_f, x)

        if implements("chain"):
            monad = MonadLaws.for_naming(naming)
            results["Chain.associativity"] = ChainLaws.for_naming(naming).associativity(
                equals, lift(f), lift(g), m
            )
            results["Monad.left_identity"] = monad.left_identity(equals, rep, lift(f), x)
            results["Monad.right_identity"] = monad.right_identity(equals, m)

    failed = [law for law, held in results.items() if not held]
    if failed:
        logger.warning("%s violates %s", rep.type(), ", ".join(failed))
    else:
        logger.debug("%s satisfies %d laws", rep.type(), len(results))
    return results
