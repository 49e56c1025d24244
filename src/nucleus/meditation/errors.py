"""Error types raised by the validation engine and the data containers.

Two families are kept apart on purpose:

ConfigurationError
    The caller wired something up wrong (constraint/value arity, operands
    of incompatible kinds).  These are programmer bugs and subclass
    ``TypeError``.
InvalidArgumentError
    One or more values failed their constraints.  Carries the complete
    ``CheckResult`` so the caller can see every offending position or key.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from nucleus.meditation.result import CheckResult, Violation


class NucleusError(Exception):
    """Base class for every error raised by nucleus."""


class ConfigurationError(NucleusError, TypeError):
    """Raised when the library is called with an inconsistent setup."""


class ArityMismatchError(ConfigurationError):
    """Raised when the number of values differs from the number of constraints."""

    def __init__(self, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(
            f"Expected {expected} argument(s) to check, but received {received}. "
            "The constraint list and the value list must have the same length."
        )


class MismatchedArgumentTypesError(ConfigurationError):
    """Raised when two operands that must share a kind do not."""

    def __init__(self, function_name: str, *values: Any) -> None:
        from nucleus.meditation.kinds import classify

        self.function_name = function_name
        self.kinds = tuple(classify(value) for value in values)
        rendered = ", ".join(str(kind) for kind in self.kinds)
        super().__init__(
            f"Arguments passed to {function_name!r} must all be of the same kind, "
            f"got: {rendered}."
        )


class MismatchedDataTypesError(ConfigurationError):
    """Raised when a container operation receives a different concrete container."""

    def __init__(self, expected_type: type, received: Any) -> None:
        self.expected_type = expected_type
        self.received_type = type(received)
        super().__init__(
            f"Expected an instance of {expected_type.__name__}, "
            f"got {self.received_type.__name__}."
        )


class InvalidRangeError(ConfigurationError, ValueError):
    """Raised when a lower bound is greater than its upper bound."""

    def __init__(self, minimum: Any, maximum: Any) -> None:
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Max value ({maximum!r}) is less than the min value ({minimum!r})."
        )


class InvalidArgumentError(NucleusError, ValueError):
    """Raised when one or more values fail their constraints.

    Parameters
    ----------
    result:
        The failed ``CheckResult``.  All of its violations are rendered
        into the message, one per line.
    """

    def __init__(self, result: "CheckResult") -> None:
        self.result = result
        super().__init__(str(self))

    @property
    def violations(self) -> tuple["Violation", ...]:
        """Return every violation recorded by the failed check."""
        return self.result.violations

    def __str__(self) -> str:
        count = len(self.result.violations)
        lines = [f"Invalid arguments ({count} violation(s)):"]
        for violation in self.result.violations:
            lines.append(f"  {violation}")
        return "\n".join(lines)


class UnknownKeyError(NucleusError, KeyError):
    """Raised when a key has no entry and no default is available."""

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unknown key: {self.key!r}"


class EmptyContainerError(NucleusError, IndexError):
    """Raised when an operation needs at least one element but got none."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Cannot call {operation!r} on an empty container.")
