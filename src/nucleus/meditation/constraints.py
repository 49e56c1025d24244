"""Constraint hierarchy: composable, introspectable predicates over values.

Every constraint answers three questions:

``check(value)``
    Does ``value`` satisfy the constraint?
``is_union()``
    Is the constraint an alternative between two others?  Used to decide
    when a nested union needs parentheses in its string form.
``to_string()``
    The canonical string form used in diagnostics, e.g. ``string``,
    ``maybe(integer)`` or ``(string|integer)|null``.

Constraints are immutable once built and hold no per-check state, so a
single instance may be shared freely.  Build them through the ``Boa``
factory rather than instantiating these classes directly.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping, Sequence
from enum import Enum
from typing import Any

from nucleus.meditation.kinds import Kind, classify


class AbstractConstraint(ABC):
    """Base class for all constraints."""

    @abstractmethod
    def check(self, value: Any) -> bool:
        """Return True if ``value`` satisfies this constraint."""

    def is_union(self) -> bool:
        """Return True if this constraint is an alternative between two others."""
        return False

    @abstractmethod
    def to_string(self) -> str:
        """Return the canonical string form of this constraint."""

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.to_string()!r}>"

    def __or__(self, other: "AbstractConstraint") -> "EitherConstraint":
        if not isinstance(other, AbstractConstraint):
            return NotImplemented
        return EitherConstraint(self, other)


class PrimitiveTypeConstraint(AbstractConstraint):
    """Matches values whose ``Kind`` is exactly ``kind``."""

    def __init__(self, kind: Kind) -> None:
        if kind is Kind.ANY:
            raise ValueError("Use AnyConstraint to accept every kind.")
        self._kind = kind

    @property
    def kind(self) -> Kind:
        return self._kind

    def check(self, value: Any) -> bool:
        return classify(value) is self._kind

    def to_string(self) -> str:
        return self._kind.value


class AnyConstraint(AbstractConstraint):
    """Matches every value."""

    def check(self, value: Any) -> bool:
        return True

    def to_string(self) -> str:
        return Kind.ANY.value


class MaybeConstraint(AbstractConstraint):
    """Matches ``None`` or anything the inner constraint matches."""

    def __init__(self, inner: AbstractConstraint) -> None:
        self._inner = inner

    @property
    def inner(self) -> AbstractConstraint:
        return self._inner

    def check(self, value: Any) -> bool:
        return value is None or self._inner.check(value)

    def to_string(self) -> str:
        return f"maybe({self._inner.to_string()})"


class EitherConstraint(AbstractConstraint):
    """Matches if either side matches.

    The left side is always evaluated first and the right side only when
    the left one fails.
    """

    def __init__(self, one: AbstractConstraint, other: AbstractConstraint) -> None:
        self._one = one
        self._other = other

    @property
    def one(self) -> AbstractConstraint:
        return self._one

    @property
    def other(self) -> AbstractConstraint:
        return self._other

    def check(self, value: Any) -> bool:
        return self._one.check(value) or self._other.check(value)

    def is_union(self) -> bool:
        return True

    def to_string(self) -> str:
        one = self._one.to_string()
        other = self._other.to_string()
        if self._one.is_union():
            one = f"({one})"
        if self._other.is_union():
            other = f"({other})"
        return f"{one}|{other}"


class Capability(Enum):
    """Structural capabilities a value may expose regardless of its kind."""

    TRAVERSABLE = "traversable"
    FOLDABLE = "foldable"
    LEFT_FOLDABLE = "leftFoldable"
    LIST = "list"
    MAP = "map"
    READ_MAP = "readMap"


_TEXT_TYPES: tuple[type, ...] = (str, bytes, bytearray)


def _has(value: Any, *names: str) -> bool:
    return all(callable(getattr(value, name, None)) for name in names)


def _is_traversable(value: Any) -> bool:
    return isinstance(value, Iterable) and not isinstance(value, _TEXT_TYPES)


def _is_list(value: Any) -> bool:
    if isinstance(value, _TEXT_TYPES) or isinstance(value, Mapping):
        return False
    if isinstance(value, Sequence):
        return True
    return _has(value, "to_list", "__getitem__", "__len__")


def _is_map(value: Any) -> bool:
    return isinstance(value, Mapping) or _has(value, "lookup", "member", "items")


def _is_read_map(value: Any) -> bool:
    if isinstance(value, Mapping):
        return True
    if isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES):
        return True
    return _has(value, "lookup", "member")


_CAPABILITY_CHECKS: dict[Capability, Callable[[Any], bool]] = {
    Capability.TRAVERSABLE: _is_traversable,
    Capability.FOLDABLE: lambda v: _has(v, "foldr") or _is_traversable(v),
    Capability.LEFT_FOLDABLE: lambda v: _has(v, "foldl") or _is_traversable(v),
    Capability.LIST: _is_list,
    Capability.MAP: _is_map,
    Capability.READ_MAP: _is_read_map,
}


class CapabilityConstraint(AbstractConstraint):
    """Matches values that structurally expose a ``Capability``.

    This is a shape test, not a nominal one: a value qualifies if it
    offers the required operations, whether or not it descends from any
    nucleus base class.

    ``TRAVERSABLE`` and the fold capabilities accept any non-text iterable,
    since ``ComplexFactory`` can convert one into a container.  They are
    wider than the ``Traversable`` interface, which only
    matches values that already produce ``(key, value)`` pairs.
    """

    def __init__(self, capability: Capability) -> None:
        self._capability = capability

    @property
    def capability(self) -> Capability:
        return self._capability

    def check(self, value: Any) -> bool:
        return _CAPABILITY_CHECKS[self._capability](value)

    def to_string(self) -> str:
        return self._capability.value


class InstanceOfConstraint(AbstractConstraint):
    """Matches instances of a given class (or its subclasses)."""

    def __init__(self, cls: type) -> None:
        self._cls = cls

    def check(self, value: Any) -> bool:
        return isinstance(value, self._cls)

    def to_string(self) -> str:
        return self._cls.__name__


class CallbackConstraint(AbstractConstraint):
    """Matches values for which a user-supplied predicate returns True.

    Parameters
    ----------
    predicate:
        A callable ``(value) -> bool``.  Exceptions it raises propagate.
    description:
        String form used in diagnostics.
    """

    def __init__(
        self,
        predicate: Callable[[Any], bool],
        description: str = "callback",
    ) -> None:
        self._predicate = predicate
        self._description = description

    def check(self, value: Any) -> bool:
        return bool(self._predicate(value))

    def to_string(self) -> str:
        return self._description
