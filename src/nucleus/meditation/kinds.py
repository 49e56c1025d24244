"""Runtime kind detection for arbitrary Python values.

``TypeHound`` maps any value onto exactly one member of the closed
``Kind`` enum.  Classification looks only at the value's intrinsic
representation; no truthiness or coercive comparison is involved, so
``""``, ``"0"``, ``0``, ``False``, ``[]`` and ``None`` each land in a
different, predictable kind.

Usage
-----
::

    from nucleus.meditation.kinds import Kind, classify

    classify("0")      # Kind.STRING
    classify(False)    # Kind.BOOLEAN
    classify([])       # Kind.ARRAY
    classify(len)      # Kind.CALLABLE
"""
from __future__ import annotations

from enum import Enum
from typing import Any


class Kind(Enum):
    """Primary runtime classification of a value.

    ``ANY`` is never produced by ``classify``; it only names the kind
    accepted by ``Boa.any()``.
    """

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"
    CALLABLE = "callable"
    NULL = "null"
    ANY = "mixed"

    def __str__(self) -> str:
        return self.value


# Only the built-in literal containers count as array-like.  Anything else
# iterable is an OBJECT that may still satisfy a capability constraint.
_ARRAY_TYPES: tuple[type, ...] = (list, tuple, dict)


class TypeHound:
    """Classifies a single value into a ``Kind``.

    Parameters
    ----------
    value:
        The value to inspect.
    """

    def __init__(self, value: Any) -> None:
        self._value = value

    def resolve(self) -> Kind:
        """Return the ``Kind`` of the wrapped value."""
        value = self._value
        if value is None:
            return Kind.NULL
        # bool must be tested before int: bool subclasses int.
        if isinstance(value, bool):
            return Kind.BOOLEAN
        if isinstance(value, int):
            return Kind.INTEGER
        if isinstance(value, float):
            return Kind.FLOAT
        if isinstance(value, str):
            return Kind.STRING
        if isinstance(value, _ARRAY_TYPES):
            return Kind.ARRAY
        if callable(value):
            return Kind.CALLABLE
        return Kind.OBJECT

    @staticmethod
    def fetch(value: Any) -> Kind:
        """Shorthand for ``TypeHound(value).resolve()``."""
        return TypeHound(value).resolve()

    @staticmethod
    def same_kind(one: Any, other: Any) -> bool:
        """Return True if both values classify to the same ``Kind``."""
        return TypeHound.fetch(one) is TypeHound.fetch(other)

    def __repr__(self) -> str:
        return f"TypeHound({self._value!r})"


def classify(value: Any) -> Kind:
    """Return the primary ``Kind`` of ``value``."""
    return TypeHound(value).resolve()
