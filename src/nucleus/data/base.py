"""Shared implementation for containers backed by an ordered dict.

An ordered ``dict`` gives both containers what they need: insertion
order, unique keys, and O(1) key lookup.  The dict is owned by the
container, never handed out, and never mutated after construction.
Every operation that "changes" a container builds a new one.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, ItemsView, KeysView, ValuesView
from typing import Any

from nucleus.data.interfaces import (
    Filterable,
    Foldable,
    LeftFoldable,
    Mappable,
    ReadMap,
    Semigroup,
    Traversable,
)
from nucleus.meditation.boa import Boa
from nucleus.meditation.constraints import AbstractConstraint
from nucleus.meditation.errors import (
    EmptyContainerError,
    MismatchedDataTypesError,
    UnknownKeyError,
)

logger = logging.getLogger(__name__)


class ArrayBacked(
    Traversable,
    LeftFoldable,
    Foldable,
    Mappable,
    Filterable,
    Semigroup,
    ReadMap,
):
    """Base class for ``ArrayList`` and ``ArrayMap``."""

    _data: dict[Any, Any]
    _size: int

    def _adopt(self, data: dict[Any, Any]) -> None:
        self._data = data
        self._size = len(data)

    @classmethod
    def _wrap(cls, data: dict[Any, Any]) -> Any:
        """Build an instance around ``data`` without re-keying it."""
        instance = cls.__new__(cls)
        instance._adopt(data)
        return instance

    # ------------------------------------------------------------------
    # Size and access
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def items(self) -> ItemsView[Any, Any]:
        return self._data.items()

    def keys(self) -> KeysView[Any]:
        return self._data.keys()

    def values(self) -> ValuesView[Any]:
        return self._data.values()

    def member(self, key: Any) -> bool:
        return key in self._data

    def lookup(self, key: Any) -> Any:
        """Return the value stored under ``key``.

        Raises
        ------
        UnknownKeyError
            If ``key`` is not present.
        """
        try:
            return self._data[key]
        except KeyError:
            raise UnknownKeyError(key) from None

    def to_array(self) -> dict[Any, Any]:
        """Return a fresh ``dict`` snapshot of the key/value pairs."""
        return dict(self._data)

    def get_value_type(self) -> AbstractConstraint:
        return Boa.any()

    # ------------------------------------------------------------------
    # Folds
    # ------------------------------------------------------------------

    def foldl(self, function: Callable[[Any, Any], Any], initial: Any) -> Any:
        accumulator = initial
        for value in self._data.values():
            accumulator = function(accumulator, value)
        return accumulator

    def foldr(self, function: Callable[[Any, Any], Any], initial: Any) -> Any:
        accumulator = initial
        for value in reversed(self._data.values()):
            accumulator = function(value, accumulator)
        return accumulator

    def foldl_with_keys(
        self, function: Callable[[Any, Any, Any], Any], initial: Any
    ) -> Any:
        """Like ``foldl`` but calls ``function(accumulator, value, key)``."""
        accumulator = initial
        for key, value in self._data.items():
            accumulator = function(accumulator, value, key)
        return accumulator

    def foldr_with_keys(
        self, function: Callable[[Any, Any, Any], Any], initial: Any
    ) -> Any:
        """Like ``foldr`` but calls ``function(value, key, accumulator)``."""
        accumulator = initial
        for key, value in reversed(self._data.items()):
            accumulator = function(value, key, accumulator)
        return accumulator

    # ------------------------------------------------------------------
    # Mapping and filtering (keys are preserved)
    # ------------------------------------------------------------------

    def map(self, function: Callable[[Any, Any], Any]) -> Any:
        return self._wrap({key: function(value, key) for key, value in self._data.items()})

    def filter(self, predicate: Callable[[Any, Any], Any]) -> Any:
        return self._wrap(
            {key: value for key, value in self._data.items() if predicate(value, key)}
        )

    # ------------------------------------------------------------------
    # Assertions
    # ------------------------------------------------------------------

    def _assert_same_type(self, received: Any) -> None:
        if type(received) is not type(self):
            logger.debug(
                "Rejecting %s operand for %s",
                type(received).__name__,
                type(self).__name__,
            )
            raise MismatchedDataTypesError(type(self), received)

    def _assert_not_empty(self, operation: str) -> None:
        if self._size < 1:
            raise EmptyContainerError(operation)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"
