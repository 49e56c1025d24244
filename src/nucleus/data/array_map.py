"""ArrayMap: an immutable key-to-value map that keeps insertion order."""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

from nucleus.data.array_list import ArrayList
from nucleus.data.base import ArrayBacked
from nucleus.meditation.arguments import Arguments
from nucleus.meditation.boa import Boa


class ArrayMap(ArrayBacked, Mapping):
    """An ordered, immutable mapping.

    Parameters
    ----------
    initial:
        A mapping, anything exposing ``to_array()`` (such as another
        container, whose keys are kept), or an iterable of
        ``(key, value)`` pairs.  Later pairs win when a key repeats.
    """

    def __init__(
        self,
        initial: Mapping[Any, Any] | Iterable[tuple[Any, Any]] | None = None,
    ) -> None:
        if initial is None:
            self._adopt({})
            return
        to_array = getattr(initial, "to_array", None)
        if callable(to_array):
            self._adopt(dict(to_array()))
        else:
            self._adopt(dict(initial))

    @classmethod
    def of(cls, value: Any) -> "ArrayMap":
        """Build an ``ArrayMap`` from any keyed input.

        Accepts another ``ArrayMap`` (returned as is), anything exposing
        ``to_array()``, a mapping, or a sequence (keyed by index).

        Raises
        ------
        InvalidArgumentError
            If ``value`` is not a read-map.
        """
        if isinstance(value, cls):
            return value
        to_array = getattr(value, "to_array", None)
        if callable(to_array):
            return cls(to_array())
        Arguments.contain(Boa.read_map()).check(value)
        if isinstance(value, Mapping):
            return cls(value)
        if isinstance(value, Sequence):
            return cls(enumerate(value))
        items = getattr(value, "items", None)
        if callable(items):
            return cls(items())
        raise TypeError(f"Cannot enumerate the keys of {type(value).__name__}.")

    # ------------------------------------------------------------------
    # Mapping protocol
    # ------------------------------------------------------------------

    def __getitem__(self, key: Any) -> Any:
        return self.lookup(key)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    # ------------------------------------------------------------------
    # Persistent updates
    # ------------------------------------------------------------------

    def insert(self, key: Any, value: Any) -> "ArrayMap":
        """Return a new map with ``key`` set to ``value``."""
        data = dict(self._data)
        data[key] = value
        return ArrayMap._wrap(data)

    def delete(self, key: Any) -> "ArrayMap":
        """Return a new map without ``key``.  Missing keys are a no-op."""
        if key not in self._data:
            return self
        data = dict(self._data)
        del data[key]
        return ArrayMap._wrap(data)

    # ------------------------------------------------------------------
    # Conversions and combination
    # ------------------------------------------------------------------

    def to_list(self) -> ArrayList:
        """Return the values, in insertion order, as an ``ArrayList``."""
        return ArrayList(self._data.values())

    def append(self, other: "ArrayMap") -> "ArrayMap":  # type: ignore[override]
        """Return the key union of ``self`` and ``other``.

        On a key collision the value from ``other`` wins.  Keys from
        ``self`` keep their position; keys only in ``other`` follow in
        ``other``'s order.

        Raises
        ------
        MismatchedDataTypesError
            If ``other`` is not an ``ArrayMap``.
        """
        self._assert_same_type(other)
        return ArrayMap._wrap({**self._data, **other._data})
