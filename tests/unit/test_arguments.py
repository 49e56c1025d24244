"""Unit tests for nucleus.meditation.arguments — positional checking."""
from __future__ import annotations

import pytest

from nucleus.meditation.arguments import Arguments
from nucleus.meditation.boa import Boa
from nucleus.meditation.errors import (
    ArityMismatchError,
    ConfigurationError,
    InvalidArgumentError,
)
from nucleus.meditation.kinds import Kind
from nucleus.meditation.result import CheckResult


class TestArgumentsConstruction:
    def test_contain_keeps_order(self) -> None:
        args = Arguments.contain(Boa.string(), Boa.integer())
        assert args.constraints == (Boa.string(), Boa.integer())

    def test_len(self) -> None:
        assert len(Arguments.contain(Boa.any(), Boa.any(), Boa.any())) == 3

    def test_constructor_accepts_iterable(self) -> None:
        args = Arguments([Boa.string()])
        assert len(args) == 1

    def test_rejects_non_constraints(self) -> None:
        with pytest.raises(TypeError):
            Arguments.contain(Boa.string(), "integer")  # type: ignore[arg-type]

    def test_constraints_are_a_tuple(self) -> None:
        assert isinstance(Arguments.contain(Boa.any()).constraints, tuple)

    def test_repr(self) -> None:
        args = Arguments.contain(Boa.string(), Boa.maybe(Boa.integer()))
        assert repr(args) == "Arguments(string, maybe(integer))"


class TestArgumentsArity:
    def test_more_values_than_constraints(self) -> None:
        with pytest.raises(ArityMismatchError) as info:
            Arguments.contain(Boa.any(), Boa.any()).check(1, 2, 3)
        assert info.value.expected == 2
        assert info.value.received == 3

    def test_fewer_values_than_constraints(self) -> None:
        with pytest.raises(ArityMismatchError):
            Arguments.contain(Boa.any(), Boa.any()).check(1)

    def test_arity_error_is_configuration_error(self) -> None:
        with pytest.raises(ConfigurationError):
            Arguments.contain(Boa.string()).check()

    def test_arity_error_is_not_validation_failure(self) -> None:
        with pytest.raises(ArityMismatchError) as info:
            Arguments.contain(Boa.string(), Boa.string()).check(1, 2, 3)
        assert not isinstance(info.value, InvalidArgumentError)

    def test_evaluate_also_raises_on_arity(self) -> None:
        with pytest.raises(ArityMismatchError):
            Arguments.contain(Boa.string()).evaluate("a", "b")

    def test_empty_contain_accepts_no_values(self) -> None:
        Arguments.contain().check()


class TestArgumentsCheck:
    def test_valid_values_pass(self) -> None:
        Arguments.contain(Boa.string(), Boa.integer()).check("a", 1)

    def test_single_violation_names_position_two(self) -> None:
        with pytest.raises(InvalidArgumentError) as info:
            Arguments.contain(Boa.string(), Boa.integer()).check("a", "b")
        violations = info.value.violations
        assert len(violations) == 1
        assert violations[0].position == 2
        assert violations[0].expected == "integer"
        assert violations[0].actual is Kind.STRING

    def test_all_violations_collected(self) -> None:
        with pytest.raises(InvalidArgumentError) as info:
            Arguments.contain(Boa.string(), Boa.integer(), Boa.boolean()).check(1, "x", True)
        assert [v.position for v in info.value.violations] == [1, 2]

    def test_message_lists_every_violation(self) -> None:
        with pytest.raises(InvalidArgumentError) as info:
            Arguments.contain(Boa.string(), Boa.integer()).check(1, "x")
        text = str(info.value)
        assert "argument 1 expected string, found integer" in text
        assert "argument 2 expected integer, found string" in text

    def test_union_expected_string(self) -> None:
        with pytest.raises(InvalidArgumentError) as info:
            Arguments.contain(Boa.either(Boa.integer(), Boa.float())).check("1")
        assert info.value.violations[0].expected == "integer|float"

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Arguments.contain(Boa.string()).check(None)


class TestArgumentsEvaluate:
    def test_success_result(self) -> None:
        result = Arguments.contain(Boa.string(), Boa.integer()).evaluate("a", 1)
        assert isinstance(result, CheckResult)
        assert result.passed()

    def test_failure_result_does_not_raise(self) -> None:
        result = Arguments.contain(Boa.string()).evaluate(5)
        assert result.failed()
        assert len(result) == 1

    def test_fresh_result_per_call(self) -> None:
        args = Arguments.contain(Boa.string())
        first = args.evaluate(1)
        second = args.evaluate("ok")
        assert first.failed()
        assert second.passed()
