"""Check results produced by ``Arguments`` and ``Spec``.

A ``CheckResult`` is created fresh for every check, is immutable, and is
either a success (no violations) or a failure carrying every
``Violation`` found, in order.
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from nucleus.meditation.kinds import Kind


class ViolationReason(Enum):
    """Why a position or key was rejected."""

    MISMATCH = auto()
    MISSING = auto()
    UNKNOWN = auto()


@dataclass(frozen=True)
class Violation:
    """A single mismatch between an expected constraint and an actual value.

    Parameters
    ----------
    expected:
        The string form of the constraint that was not met.
    actual:
        The ``Kind`` of the value found, or ``None`` when the value is
        missing altogether.
    position:
        1-based argument position, for positional checks.
    key:
        Mapping key, for keyed checks.
    reason:
        Whether the value mismatched, was missing, or was not expected.
    keyed:
        True when the violation belongs to ``key``, which may itself be
        ``None``.  A violation with neither a position nor a key refers to
        the whole input.
    """

    expected: str
    actual: Kind | None
    position: int | None = field(default=None)
    key: Any = field(default=None)
    reason: ViolationReason = field(default=ViolationReason.MISMATCH)
    keyed: bool = field(default=False)

    @property
    def label(self) -> str:
        """Return ``"argument N"``, ``"key 'k'"`` or ``"input"``."""
        if self.position is not None:
            return f"argument {self.position}"
        if self.keyed or self.key is not None:
            return f"key {self.key!r}"
        return "input"

    def __str__(self) -> str:
        if self.reason is ViolationReason.MISSING:
            return f"{self.label} is missing, expected {self.expected}"
        if self.reason is ViolationReason.UNKNOWN:
            return f"{self.label} is not allowed (found {self.actual})"
        return f"{self.label} expected {self.expected}, found {self.actual}"


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single check.

    Parameters
    ----------
    violations:
        Every violation, in the order it was found.  Empty on success.
    """

    violations: tuple[Violation, ...] = field(default=())

    @classmethod
    def success(cls) -> "CheckResult":
        return cls()

    @classmethod
    def from_violations(cls, violations: Iterable[Violation]) -> "CheckResult":
        return cls(tuple(violations))

    def passed(self) -> bool:
        """Return True if no violations were recorded."""
        return not self.violations

    def failed(self) -> bool:
        """Return True if at least one violation was recorded."""
        return bool(self.violations)

    def raise_for_violations(self) -> None:
        """Raise ``InvalidArgumentError`` if this result failed."""
        if self.violations:
            from nucleus.meditation.errors import InvalidArgumentError

            raise InvalidArgumentError(self)

    def __bool__(self) -> bool:
        return self.passed()

    def __len__(self) -> int:
        return len(self.violations)

    def __iter__(self) -> Iterator[Violation]:
        return iter(self.violations)

    def __str__(self) -> str:
        if not self.violations:
            return "CheckResult (passed)"
        return "; ".join(str(v) for v in self.violations)
