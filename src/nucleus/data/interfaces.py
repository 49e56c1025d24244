"""Capability interfaces for nucleus containers.

Each interface names a minimal operation set.  Concrete containers
declare the capabilities they implement by inheriting from these ABCs.

``Traversable``, ``LeftFoldable``, ``Foldable`` and ``ReadMap`` also
recognise foreign classes structurally (via ``__subclasshook__``), the
same way ``collections.abc.Iterable`` recognises anything with an
``__iter__``.  ``Mappable``, ``Filterable`` and ``Semigroup`` are nominal
only: a plain ``list`` has an ``append`` method, but it mutates in place
and is not a semigroup in the sense used here.

The interfaces describe what a value already provides, while
``Boa.traversable()`` and friends describe what ``ComplexFactory`` can
turn into a container.  A plain ``list`` has no ``items()``, so it is not
a ``Traversable`` instance, yet it passes ``Boa.traversable()`` because
its pairs can be produced by position.

Callback conventions shared by every implementation:

- ``foldl`` calls ``function(accumulator, value)``, first to last.
- ``foldr`` calls ``function(value, accumulator)``, last to first.
- ``map`` and ``filter`` call ``function(value, key)``.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import Any


def _check_methods(cls: type, *methods: str) -> Any:
    mro = cls.__mro__
    for method in methods:
        for base in mro:
            if method in base.__dict__:
                if base.__dict__[method] is None:
                    return NotImplemented
                break
        else:
            return NotImplemented
    return True


class Traversable(ABC):
    """Produces a finite, restartable sequence of ``(key, value)`` pairs."""

    @abstractmethod
    def items(self) -> Iterable[tuple[Any, Any]]:
        """Return the ``(key, value)`` pairs in order."""

    @classmethod
    def __subclasshook__(cls, subclass: type) -> Any:
        if cls is Traversable:
            return _check_methods(subclass, "items", "__iter__")
        return NotImplemented


class LeftFoldable(ABC):
    """Can be reduced to a single value, first element to last."""

    @abstractmethod
    def foldl(self, function: Callable[[Any, Any], Any], initial: Any) -> Any:
        """Return ``function(...function(function(initial, x1), x2)..., xn)``."""

    @classmethod
    def __subclasshook__(cls, subclass: type) -> Any:
        if cls is LeftFoldable:
            return _check_methods(subclass, "foldl")
        return NotImplemented


class Foldable(ABC):
    """Can be reduced to a single value, last element to first."""

    @abstractmethod
    def foldr(self, function: Callable[[Any, Any], Any], initial: Any) -> Any:
        """Return ``function(x1, function(x2, ...function(xn, initial)))``."""

    @classmethod
    def __subclasshook__(cls, subclass: type) -> Any:
        if cls is Foldable:
            return _check_methods(subclass, "foldr")
        return NotImplemented


class Mappable(ABC):
    @abstractmethod
    def map(self, function: Callable[[Any, Any], Any]) -> "Mappable":
        """Return a new container of the same kind holding ``function(value, key)``."""


class Filterable(ABC):
    @abstractmethod
    def filter(self, predicate: Callable[[Any, Any], Any]) -> "Filterable":
        """Return a new container of the same kind with the entries that pass."""


class Semigroup(ABC):
    """Supports an associative ``append`` between two instances of the same type."""

    @abstractmethod
    def append(self, other: "Semigroup") -> "Semigroup":
        """Return a new instance combining ``self`` and ``other``."""


class ReadMap(ABC):
    """A read-only key lookup."""

    @abstractmethod
    def lookup(self, key: Any) -> Any:
        """Return the value stored under ``key``."""

    @abstractmethod
    def member(self, key: Any) -> bool:
        """Return True if ``key`` is present."""

    @classmethod
    def __subclasshook__(cls, subclass: type) -> Any:
        if cls is ReadMap:
            return _check_methods(subclass, "lookup", "member")
        return NotImplemented
