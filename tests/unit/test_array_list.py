"""Unit tests for nucleus.data.array_list — ArrayList."""
from __future__ import annotations

from collections.abc import Sequence

import pytest

from nucleus.data.array_list import ArrayList
from nucleus.data.array_map import ArrayMap
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
from nucleus.meditation.errors import (
    ConfigurationError,
    EmptyContainerError,
    InvalidArgumentError,
    MismatchedDataTypesError,
    UnknownKeyError,
)


class _Listable:
    def to_list(self) -> list[int]:
        return [7, 8]


# ===========================================================================
# Construction
# ===========================================================================


class TestArrayListConstruction:
    def test_empty(self) -> None:
        empty = ArrayList()
        assert empty.size == 0
        assert empty.is_empty()
        assert empty.to_list() == []

    def test_from_list(self) -> None:
        assert ArrayList([1, 2, 3]).to_list() == [1, 2, 3]

    def test_from_mapping_discards_keys(self) -> None:
        items = ArrayList({"x": 1, "y": 2})
        assert items.to_array() == {0: 1, 1: 2}

    def test_from_generator(self) -> None:
        assert ArrayList(x * 2 for x in range(3)).to_list() == [0, 2, 4]

    def test_size_matches_element_count(self) -> None:
        items = ArrayList("abc" for _ in range(5))
        assert items.size == len(items) == 5

    def test_source_list_is_copied(self) -> None:
        source = [1, 2]
        items = ArrayList(source)
        source.append(3)
        assert items.to_list() == [1, 2]


class TestArrayListOf:
    def test_returns_same_instance(self, numbers: ArrayList) -> None:
        assert ArrayList.of(numbers) is numbers

    def test_uses_to_list(self) -> None:
        assert ArrayList.of(_Listable()).to_list() == [7, 8]

    def test_from_array_map(self) -> None:
        assert ArrayList.of(ArrayMap({"a": 1, "b": 2})).to_list() == [1, 2]

    def test_from_tuple(self) -> None:
        assert ArrayList.of((1, 2)).to_array() == {0: 1, 1: 2}

    def test_renumbers_mapping_keys(self) -> None:
        assert ArrayList.of({5: "a", 9: "b"}).to_array() == {0: "a", 1: "b"}

    def test_rejects_string(self) -> None:
        with pytest.raises(InvalidArgumentError):
            ArrayList.of("abc")

    def test_rejects_scalar(self) -> None:
        with pytest.raises(InvalidArgumentError):
            ArrayList.of(3)


# ===========================================================================
# Access
# ===========================================================================


class TestArrayListAccess:
    def test_positional_index(self, numbers: ArrayList) -> None:
        assert numbers[0] == 1
        assert numbers[-1] == 4

    def test_slice_returns_array_list(self, numbers: ArrayList) -> None:
        part = numbers[1:3]
        assert isinstance(part, ArrayList)
        assert part.to_array() == {0: 2, 1: 3}

    def test_index_error(self) -> None:
        with pytest.raises(IndexError):
            ArrayList()[0]

    def test_iteration_yields_values(self, numbers: ArrayList) -> None:
        assert list(numbers) == [1, 2, 3, 4]

    def test_iteration_is_restartable(self, numbers: ArrayList) -> None:
        assert list(numbers) == list(numbers)

    def test_contains(self, numbers: ArrayList) -> None:
        assert 3 in numbers
        assert 9 not in numbers

    def test_items_are_key_value_pairs(self) -> None:
        assert list(ArrayList(["a", "b"]).items()) == [(0, "a"), (1, "b")]

    def test_lookup_and_member(self, numbers: ArrayList) -> None:
        assert numbers.lookup(2) == 3
        assert numbers.member(3) is True
        assert numbers.member(4) is False

    def test_lookup_missing_key(self, numbers: ArrayList) -> None:
        with pytest.raises(UnknownKeyError):
            numbers.lookup(10)

    def test_lookup_uses_original_keys_after_filter(self, numbers: ArrayList) -> None:
        evens = numbers.filter(lambda v, k: v % 2 == 0)
        assert evens.lookup(3) == 4
        assert evens[1] == 4

    def test_get_value_type_is_any(self, numbers: ArrayList) -> None:
        assert numbers.get_value_type() is Boa.any()

    def test_repr(self) -> None:
        assert repr(ArrayList([1, 2])) == "ArrayList([1, 2])"


class TestArrayListEquality:
    def test_equal_lists(self) -> None:
        assert ArrayList([1, 2]) == ArrayList([1, 2])

    def test_order_matters(self) -> None:
        assert ArrayList([1, 2]) != ArrayList([2, 1])

    def test_not_equal_to_plain_list(self) -> None:
        assert ArrayList([1, 2]) != [1, 2]

    def test_keys_matter(self) -> None:
        filtered = ArrayList([0, 1, 2]).filter(lambda v, k: v > 0)
        assert filtered != ArrayList([1, 2])

    def test_hash_matches_equality(self) -> None:
        assert hash(ArrayList([1, 2])) == hash(ArrayList([1, 2]))


# ===========================================================================
# Algebra
# ===========================================================================


class TestArrayListFolds:
    def test_foldl_order(self) -> None:
        result = ArrayList(["a", "b", "c"]).foldl(lambda acc, x: f"({acc}{x})", "z")
        assert result == "(((za)b)c)"

    def test_foldr_order(self) -> None:
        result = ArrayList(["a", "b", "c"]).foldr(lambda x, acc: f"({x}{acc})", "z")
        assert result == "(a(b(cz)))"

    def test_folds_on_empty_return_initial(self) -> None:
        assert ArrayList().foldl(lambda acc, x: acc + x, 10) == 10
        assert ArrayList().foldr(lambda x, acc: acc + x, 10) == 10

    def test_foldl_visits_every_element_once(self, numbers: ArrayList) -> None:
        seen: list[int] = []
        numbers.foldl(lambda acc, x: seen.append(x), None)
        assert seen == [1, 2, 3, 4]

    def test_foldl_with_keys(self) -> None:
        result = ArrayList(["a", "b"]).foldl_with_keys(
            lambda acc, v, k: acc + [(k, v)], []
        )
        assert result == [(0, "a"), (1, "b")]

    def test_foldr_with_keys(self) -> None:
        result = ArrayList(["a", "b"]).foldr_with_keys(
            lambda v, k, acc: acc + [(k, v)], []
        )
        assert result == [(1, "b"), (0, "a")]


class TestArrayListMapFilter:
    def test_map_passes_value_and_key(self) -> None:
        result = ArrayList(["a", "b"]).map(lambda v, k: f"{k}:{v}")
        assert result.to_list() == ["0:a", "1:b"]

    def test_map_returns_array_list(self, numbers: ArrayList) -> None:
        assert isinstance(numbers.map(lambda v, k: v), ArrayList)

    def test_map_does_not_touch_original(self, numbers: ArrayList) -> None:
        numbers.map(lambda v, k: v * 10)
        assert numbers.to_list() == [1, 2, 3, 4]

    def test_filter_preserves_original_keys(self) -> None:
        result = ArrayList([10, 20, 30, 40]).filter(lambda v, k: v > 15)
        assert result.to_array() == {1: 20, 2: 30, 3: 40}

    def test_filter_preserves_relative_order(self) -> None:
        result = ArrayList([5, 1, 4, 2]).filter(lambda v, k: v > 1)
        assert result.to_list() == [5, 4, 2]

    def test_filter_can_use_key(self, numbers: ArrayList) -> None:
        assert numbers.filter(lambda v, k: k % 2 == 0).to_array() == {0: 1, 2: 3}

    def test_filter_returns_array_list(self, numbers: ArrayList) -> None:
        filtered = numbers.filter(lambda v, k: False)
        assert isinstance(filtered, ArrayList)
        assert filtered.size == 0

    def test_map_after_filter_keeps_keys(self, numbers: ArrayList) -> None:
        result = numbers.filter(lambda v, k: v > 2).map(lambda v, k: v * 10)
        assert result.to_array() == {2: 30, 3: 40}


class TestArrayListAppend:
    def test_concatenates_in_order(self) -> None:
        result = ArrayList([1, 2]).append(ArrayList([3, 4]))
        assert result.to_list() == [1, 2, 3, 4]
        assert result.to_array() == {0: 1, 1: 2, 2: 3, 3: 4}

    def test_operands_unchanged(self) -> None:
        left, right = ArrayList([1]), ArrayList([2])
        left.append(right)
        assert left.to_list() == [1]
        assert right.to_list() == [2]

    def test_append_renumbers_filtered_lists(self, numbers: ArrayList) -> None:
        odds = numbers.filter(lambda v, k: v % 2 == 1)
        assert odds.append(ArrayList([9])).to_array() == {0: 1, 1: 3, 2: 9}

    def test_rejects_array_map(self) -> None:
        with pytest.raises(MismatchedDataTypesError) as info:
            ArrayList([1]).append(ArrayMap({"a": 1}))  # type: ignore[arg-type]
        assert info.value.expected_type is ArrayList
        assert info.value.received_type is ArrayMap
        assert "ArrayList" in str(info.value) and "ArrayMap" in str(info.value)

    def test_rejects_plain_list(self) -> None:
        with pytest.raises(ConfigurationError):
            ArrayList([1]).append([2])  # type: ignore[arg-type]

    def test_associative(self) -> None:
        a, b, c = ArrayList([1]), ArrayList([2, 3]), ArrayList([4])
        assert a.append(b).append(c) == a.append(b.append(c))


class TestArrayListListOperations:
    def test_head_and_last(self, numbers: ArrayList) -> None:
        assert numbers.head() == 1
        assert numbers.last() == 4

    def test_tail_and_init(self, numbers: ArrayList) -> None:
        assert numbers.tail().to_array() == {0: 2, 1: 3, 2: 4}
        assert numbers.init().to_list() == [1, 2, 3]

    @pytest.mark.parametrize("operation", ["head", "last", "tail", "init"])
    def test_empty_container_failures(self, operation: str) -> None:
        with pytest.raises(EmptyContainerError) as info:
            getattr(ArrayList(), operation)()
        assert info.value.operation == operation

    def test_reverse(self, numbers: ArrayList) -> None:
        assert numbers.reverse().to_array() == {0: 4, 1: 3, 2: 2, 3: 1}

    def test_to_map(self) -> None:
        result = ArrayList(["a", "b"]).to_map()
        assert isinstance(result, ArrayMap)
        assert result.to_array() == {0: "a", 1: "b"}

    def test_to_array_is_a_copy(self, numbers: ArrayList) -> None:
        snapshot = numbers.to_array()
        snapshot[0] = 99
        assert numbers.head() == 1


class TestArrayListCapabilities:
    @pytest.mark.parametrize(
        "interface",
        [Traversable, LeftFoldable, Foldable, Mappable, Filterable, Semigroup, ReadMap, Sequence],
    )
    def test_declares_capability(self, numbers: ArrayList, interface: type) -> None:
        assert isinstance(numbers, interface)

    def test_list_constraint_accepts(self, numbers: ArrayList) -> None:
        assert Boa.lst().check(numbers) is True
