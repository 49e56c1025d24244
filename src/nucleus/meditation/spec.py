"""Keyed checking of attribute-style mappings.

A ``Spec`` maps string keys to constraints and checks a mapping of
key to value against them.  Required keys that are missing, and present
keys whose value fails its constraint, are reported as violations.  Keys
the spec does not know about are ignored unless the spec is strict.

Strictness is off by default::

    from nucleus.meditation import Boa, Spec

    spec = Spec({"name": Boa.string()})
    spec.check({"name": "a", "extra": 1}).passed()                 # True
    spec.with_strict(True).check({"name": "a", "extra": 1}).passed()  # False
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from nucleus.meditation.boa import Boa
from nucleus.meditation.constraints import AbstractConstraint
from nucleus.meditation.errors import InvalidArgumentError
from nucleus.meditation.kinds import classify
from nucleus.meditation.result import CheckResult, Violation, ViolationReason

logger = logging.getLogger(__name__)


class Spec:
    """A named set of keyed constraints.

    Parameters
    ----------
    fields:
        Mapping of key to constraint.  Declaration order is the order in
        which violations are reported.
    strict:
        When ``True``, keys in the input that the spec does not declare
        are reported as violations.
    required:
        Keys that must be present.  Defaults to every declared key.
        Every required key must also be declared in ``fields``.
    """

    def __init__(
        self,
        fields: Mapping[str, AbstractConstraint] | None = None,
        *,
        strict: bool = False,
        required: Iterable[str] | None = None,
    ) -> None:
        self._fields: dict[str, AbstractConstraint] = dict(fields or {})
        for key, constraint in self._fields.items():
            if not isinstance(constraint, AbstractConstraint):
                raise TypeError(
                    f"Spec field {key!r} must be a constraint, "
                    f"got {type(constraint).__name__}."
                )
        self._required: frozenset[str] = (
            frozenset(self._fields) if required is None else frozenset(required)
        )
        undeclared = self._required - self._fields.keys()
        if undeclared:
            raise ValueError(
                f"Required keys are not declared as fields: {sorted(undeclared)!r}"
            )
        self._strict: bool = strict

    @property
    def fields(self) -> dict[str, AbstractConstraint]:
        """Return a copy of the declared key to constraint mapping."""
        return dict(self._fields)

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def required(self) -> frozenset[str]:
        return self._required

    def with_field(self, key: str, constraint: AbstractConstraint) -> "Spec":
        """Return a new spec with ``key`` declared (and required)."""
        fields = dict(self._fields)
        fields[key] = constraint
        return Spec(fields, strict=self._strict, required=self._required | {key})

    def with_strict(self, strict: bool) -> "Spec":
        """Return a copy of this spec with strictness set to ``strict``."""
        return Spec(self._fields, strict=strict, required=self._required)

    def check(self, mapping: Any) -> CheckResult:
        """Check ``mapping`` against every declared field.

        Returns
        -------
        CheckResult
            Violations in field declaration order, followed by unknown
            keys (strict mode only) in input order.
        """
        if not isinstance(mapping, Mapping):
            return CheckResult.from_violations([
                Violation(
                    expected=Boa.map().to_string(),
                    actual=classify(mapping),
                )
            ])

        violations: list[Violation] = []
        for key, constraint in self._fields.items():
            if key not in mapping:
                if key in self._required:
                    violations.append(
                        Violation(
                            expected=constraint.to_string(),
                            actual=None,
                            key=key,
                            keyed=True,
                            reason=ViolationReason.MISSING,
                        )
                    )
                continue
            value = mapping[key]
            if not constraint.check(value):
                violations.append(
                    Violation(
                        expected=constraint.to_string(),
                        actual=classify(value),
                        key=key,
                        keyed=True,
                    )
                )

        if self._strict:
            for key, value in mapping.items():
                if key not in self._fields:
                    violations.append(
                        Violation(
                            expected="(undeclared)",
                            actual=classify(value),
                            key=key,
                            keyed=True,
                            reason=ViolationReason.UNKNOWN,
                        )
                    )

        if violations:
            logger.debug(
                "Spec check failed with %d violation(s) (strict=%s)",
                len(violations),
                self._strict,
            )
        return CheckResult.from_violations(violations)

    def validate(self, mapping: Any) -> None:
        """Check ``mapping`` and raise ``InvalidArgumentError`` if it fails."""
        result = self.check(mapping)
        if result.failed():
            raise InvalidArgumentError(result)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        rendered = ", ".join(f"{k}: {c}" for k, c in self._fields.items())
        return f"Spec({{{rendered}}}, strict={self._strict})"
