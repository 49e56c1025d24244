"""Positional argument checking.

``Arguments`` pairs an ordered list of constraints with the values a
function received and checks every position.  All violations are
collected before failing, so a single call reports every offending
argument rather than just the first.

Usage
-----
::

    from nucleus.meditation import Arguments, Boa

    def within(minimum, maximum, value):
        number = Boa.either(Boa.integer(), Boa.float())
        Arguments.contain(number, number, number).check(minimum, maximum, value)
        ...
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from nucleus.meditation.constraints import AbstractConstraint
from nucleus.meditation.errors import ArityMismatchError, InvalidArgumentError
from nucleus.meditation.kinds import classify
from nucleus.meditation.result import CheckResult, Violation

logger = logging.getLogger(__name__)


class Arguments:
    """An immutable, ordered list of constraints checked against call arguments.

    Parameters
    ----------
    constraints:
        One constraint per expected argument, in order.
    """

    def __init__(self, constraints: Iterable[AbstractConstraint] = ()) -> None:
        self._constraints: tuple[AbstractConstraint, ...] = tuple(constraints)
        for constraint in self._constraints:
            if not isinstance(constraint, AbstractConstraint):
                raise TypeError(
                    f"Arguments only accepts constraints, got {type(constraint).__name__}."
                )

    @classmethod
    def contain(cls, *constraints: AbstractConstraint) -> "Arguments":
        """Build an ``Arguments`` instance from positional constraints."""
        return cls(constraints)

    @property
    def constraints(self) -> tuple[AbstractConstraint, ...]:
        return self._constraints

    def evaluate(self, *values: Any) -> CheckResult:
        """Check ``values`` position by position and return the result.

        Raises
        ------
        ArityMismatchError
            If the number of values differs from the number of constraints.
        """
        if len(values) != len(self._constraints):
            raise ArityMismatchError(len(self._constraints), len(values))

        violations: list[Violation] = []
        for position, (constraint, value) in enumerate(
            zip(self._constraints, values), start=1
        ):
            if not constraint.check(value):
                violations.append(
                    Violation(
                        expected=constraint.to_string(),
                        actual=classify(value),
                        position=position,
                    )
                )

        if violations:
            logger.debug(
                "Argument check failed with %d violation(s) against %r",
                len(violations),
                self,
            )
        return CheckResult.from_violations(violations)

    def check(self, *values: Any) -> None:
        """Check ``values`` and raise if any of them is invalid.

        Raises
        ------
        ArityMismatchError
            If the number of values differs from the number of constraints.
        InvalidArgumentError
            If one or more values fail their constraint.  The error lists
            every violation.
        """
        result = self.evaluate(*values)
        if result.failed():
            raise InvalidArgumentError(result)

    def __len__(self) -> int:
        return len(self._constraints)

    def __repr__(self) -> str:
        rendered = ", ".join(c.to_string() for c in self._constraints)
        return f"Arguments({rendered})"
