"""ArrayList: an immutable ordered sequence.

Construction always renumbers keys ``0..n-1``, even when built from a
mapping with arbitrary keys.  ``map`` and ``filter`` keep the keys they
were given, so a filtered list remembers where its survivors came from::

    >>> ArrayList([10, 20, 30, 40]).filter(lambda v, k: v > 15).to_array()
    {1: 20, 2: 30, 3: 40}

Operations that produce a new sequence (``append``, ``reverse``,
``tail``, ``init``, slicing) renumber again.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import TYPE_CHECKING, Any, overload

from nucleus.data.base import ArrayBacked
from nucleus.meditation.arguments import Arguments
from nucleus.meditation.boa import Boa

if TYPE_CHECKING:
    from nucleus.data.array_map import ArrayMap


class ArrayList(ArrayBacked, Sequence):
    """An ordered, immutable list of values.

    Parameters
    ----------
    initial:
        Any iterable of values.  A mapping contributes only its values;
        its keys are discarded.
    """

    _values: tuple[Any, ...]

    def __init__(self, initial: Iterable[Any] = ()) -> None:
        if isinstance(initial, Mapping):
            values = list(initial.values())
        else:
            values = list(initial)
        self._adopt(dict(enumerate(values)))

    def _adopt(self, data: dict[Any, Any]) -> None:
        super()._adopt(data)
        self._values = tuple(data.values())

    @classmethod
    def of(cls, value: Any) -> "ArrayList":
        """Build an ``ArrayList`` from any list-like input.

        Accepts another ``ArrayList`` (returned as is), anything exposing
        ``to_list()``, a mapping (values only), or any non-string iterable.

        Raises
        ------
        InvalidArgumentError
            If ``value`` is a string or is not iterable.
        """
        if isinstance(value, cls):
            return value
        to_list = getattr(value, "to_list", None)
        if callable(to_list):
            return cls(to_list())
        Arguments.contain(Boa.traversable()).check(value)
        return cls(value)

    # ------------------------------------------------------------------
    # Sequence protocol (positional)
    # ------------------------------------------------------------------

    @overload
    def __getitem__(self, index: int) -> Any: ...

    @overload
    def __getitem__(self, index: slice) -> "ArrayList": ...

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            return ArrayList(self._values[index])
        return self._values[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __contains__(self, value: object) -> bool:
        return value in self._values

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return tuple(self._data.items()) == tuple(other._data.items())  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash(tuple(self._data.items()))

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def to_list(self) -> list[Any]:
        """Return the values in order, without their keys."""
        return list(self._values)

    def to_map(self) -> "ArrayMap":
        """Return an ``ArrayMap`` holding the same key/value pairs."""
        from nucleus.data.array_map import ArrayMap

        return ArrayMap(self._data)

    # ------------------------------------------------------------------
    # List operations
    # ------------------------------------------------------------------

    def head(self) -> Any:
        self._assert_not_empty("head")
        return self._values[0]

    def last(self) -> Any:
        self._assert_not_empty("last")
        return self._values[-1]

    def tail(self) -> "ArrayList":
        """Return every element but the first."""
        self._assert_not_empty("tail")
        return ArrayList(self._values[1:])

    def init(self) -> "ArrayList":
        """Return every element but the last."""
        self._assert_not_empty("init")
        return ArrayList(self._values[:-1])

    def reverse(self) -> "ArrayList":
        return ArrayList(reversed(self._values))

    def append(self, other: "ArrayList") -> "ArrayList":  # type: ignore[override]
        """Return ``self``'s elements followed by ``other``'s.

        Raises
        ------
        MismatchedDataTypesError
            If ``other`` is not an ``ArrayList``.
        """
        self._assert_same_type(other)
        return ArrayList(self._values + other._values)

    def __repr__(self) -> str:
        return f"ArrayList({list(self._values)!r})"
