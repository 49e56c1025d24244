"""Conversions from plain Python containers to nucleus containers.

Helpers that accept "anything foldable" use these to get a value with a
``foldl``/``foldr``/``lookup`` method, whatever the caller passed in.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from nucleus.data.array_list import ArrayList
from nucleus.data.array_map import ArrayMap
from nucleus.data.interfaces import Foldable, LeftFoldable, ReadMap, Traversable
from nucleus.meditation.arguments import Arguments
from nucleus.meditation.boa import Boa


class ComplexFactory:
    """Static conversions between plain containers and nucleus containers."""

    @staticmethod
    def to_left_foldable(value: Any) -> LeftFoldable:
        """Return ``value`` if it already has ``foldl``, else wrap it.

        Mappings become ``ArrayMap``; other iterables become ``ArrayList``.
        """
        if isinstance(value, LeftFoldable):
            return value
        Arguments.contain(Boa.left_foldable()).check(value)
        return ComplexFactory._wrap(value)

    @staticmethod
    def to_foldable(value: Any) -> Foldable:
        """Return ``value`` if it already has ``foldr``, else wrap it."""
        if isinstance(value, Foldable):
            return value
        Arguments.contain(Boa.foldable()).check(value)
        return ComplexFactory._wrap(value)

    @staticmethod
    def to_read_map(value: Any) -> ReadMap:
        """Return ``value`` if it already has ``lookup``/``member``, else wrap it."""
        if isinstance(value, ReadMap):
            return value
        return ArrayMap.of(value)

    @staticmethod
    def pairs(value: Any) -> Iterable[tuple[Any, Any]]:
        """Return the ``(key, value)`` pairs of any traversable value.

        Sequences and other plain iterables are keyed by position.
        """
        if isinstance(value, (Mapping, Traversable)):
            return value.items()
        Arguments.contain(Boa.traversable()).check(value)
        return enumerate(value)

    @staticmethod
    def _wrap(value: Any) -> ArrayList | ArrayMap:
        if isinstance(value, Mapping):
            return ArrayMap(value)
        return ArrayList(value)
