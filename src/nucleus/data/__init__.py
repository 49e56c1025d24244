"""Immutable containers and the capability interfaces they implement."""
from __future__ import annotations

from nucleus.data.array_list import ArrayList
from nucleus.data.array_map import ArrayMap
from nucleus.data.factory import ComplexFactory
from nucleus.data.interfaces import (
    Filterable,
    Foldable,
    LeftFoldable,
    Mappable,
    ReadMap,
    Semigroup,
    Traversable,
)

__all__ = [
    "ArrayList",
    "ArrayMap",
    "ComplexFactory",
    "Traversable",
    "LeftFoldable",
    "Foldable",
    "Mappable",
    "Filterable",
    "Semigroup",
    "ReadMap",
]
