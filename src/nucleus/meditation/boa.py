"""Boa: the constraint factory.

``Boa`` groups one constructor per constraint so call sites read like a
type signature::

    from nucleus.meditation import Arguments, Boa

    Arguments.contain(
        Boa.func(),
        Boa.either(Boa.integer(), Boa.float()),
        Boa.maybe(Boa.string()),
    ).check(handler, 2.5, None)

Scalar and capability constraints hold no state and are shared.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

from nucleus.meditation.constraints import (
    AbstractConstraint,
    AnyConstraint,
    CallbackConstraint,
    Capability,
    CapabilityConstraint,
    EitherConstraint,
    InstanceOfConstraint,
    MaybeConstraint,
    PrimitiveTypeConstraint,
)
from nucleus.meditation.kinds import Kind

_PRIMITIVES: dict[Kind, PrimitiveTypeConstraint] = {
    kind: PrimitiveTypeConstraint(kind) for kind in Kind if kind is not Kind.ANY
}
_CAPABILITIES: dict[Capability, CapabilityConstraint] = {
    capability: CapabilityConstraint(capability) for capability in Capability
}
_ANY = AnyConstraint()


class Boa:
    """Static namespace of constraint constructors."""

    # ------------------------------------------------------------------
    # Scalar kinds
    # ------------------------------------------------------------------

    @staticmethod
    def string() -> PrimitiveTypeConstraint:
        return _PRIMITIVES[Kind.STRING]

    @staticmethod
    def integer() -> PrimitiveTypeConstraint:
        return _PRIMITIVES[Kind.INTEGER]

    @staticmethod
    def float() -> PrimitiveTypeConstraint:
        return _PRIMITIVES[Kind.FLOAT]

    @staticmethod
    def boolean() -> PrimitiveTypeConstraint:
        return _PRIMITIVES[Kind.BOOLEAN]

    @staticmethod
    def arr() -> PrimitiveTypeConstraint:
        """Built-in ``list``, ``tuple`` or ``dict``."""
        return _PRIMITIVES[Kind.ARRAY]

    @staticmethod
    def object() -> PrimitiveTypeConstraint:
        return _PRIMITIVES[Kind.OBJECT]

    @staticmethod
    def func() -> PrimitiveTypeConstraint:
        return _PRIMITIVES[Kind.CALLABLE]

    @staticmethod
    def null() -> PrimitiveTypeConstraint:
        return _PRIMITIVES[Kind.NULL]

    @staticmethod
    def any() -> AnyConstraint:
        return _ANY

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    @staticmethod
    def maybe(inner: AbstractConstraint) -> MaybeConstraint:
        return MaybeConstraint(inner)

    @staticmethod
    def either(one: AbstractConstraint, other: AbstractConstraint) -> EitherConstraint:
        return EitherConstraint(one, other)

    @staticmethod
    def union(*constraints: AbstractConstraint) -> EitherConstraint:
        """Chain two or more constraints into left-nested ``either`` nodes.

        ``Boa.union(a, b, c)`` is ``Boa.either(Boa.either(a, b), c)`` and
        renders as ``(a|b)|c``.
        """
        if len(constraints) < 2:
            raise ValueError("Boa.union() needs at least two constraints.")
        result = EitherConstraint(constraints[0], constraints[1])
        for constraint in constraints[2:]:
            result = EitherConstraint(result, constraint)
        return result

    # ------------------------------------------------------------------
    # Capabilities
    # ------------------------------------------------------------------

    @staticmethod
    def traversable() -> CapabilityConstraint:
        return _CAPABILITIES[Capability.TRAVERSABLE]

    @staticmethod
    def foldable() -> CapabilityConstraint:
        return _CAPABILITIES[Capability.FOLDABLE]

    @staticmethod
    def left_foldable() -> CapabilityConstraint:
        return _CAPABILITIES[Capability.LEFT_FOLDABLE]

    @staticmethod
    def lst() -> CapabilityConstraint:
        return _CAPABILITIES[Capability.LIST]

    @staticmethod
    def map() -> CapabilityConstraint:
        return _CAPABILITIES[Capability.MAP]

    @staticmethod
    def read_map() -> CapabilityConstraint:
        return _CAPABILITIES[Capability.READ_MAP]

    # ------------------------------------------------------------------
    # Custom
    # ------------------------------------------------------------------

    @staticmethod
    def instance(cls: type) -> InstanceOfConstraint:
        return InstanceOfConstraint(cls)

    @staticmethod
    def callback(
        predicate: Callable[[Any], bool],
        description: str = "callback",
    ) -> CallbackConstraint:
        return CallbackConstraint(predicate, description)
