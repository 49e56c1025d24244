"""Meditation: runtime constraints and argument checking.

Exports the ``Boa`` constraint factory, the ``Arguments`` and ``Spec``
checkers, ``TypeHound`` kind detection, check results, and error types.
"""
from __future__ import annotations

from nucleus.meditation.arguments import Arguments
from nucleus.meditation.boa import Boa
from nucleus.meditation.constraints import (
    AbstractConstraint,
    AnyConstraint,
    CallbackConstraint,
    Capability,
    CapabilityConstraint,
    EitherConstraint,
    InstanceOfConstraint,
    MaybeConstraint,
    PrimitiveTypeConstraint,
)
from nucleus.meditation.errors import (
    ArityMismatchError,
    ConfigurationError,
    EmptyContainerError,
    InvalidArgumentError,
    InvalidRangeError,
    MismatchedArgumentTypesError,
    MismatchedDataTypesError,
    NucleusError,
    UnknownKeyError,
)
from nucleus.meditation.kinds import Kind, TypeHound, classify
from nucleus.meditation.result import CheckResult, Violation, ViolationReason
from nucleus.meditation.spec import Spec

__all__ = [
    "Arguments",
    "Boa",
    "Spec",
    "Kind",
    "TypeHound",
    "classify",
    "CheckResult",
    "Violation",
    "ViolationReason",
    "AbstractConstraint",
    "AnyConstraint",
    "CallbackConstraint",
    "Capability",
    "CapabilityConstraint",
    "EitherConstraint",
    "InstanceOfConstraint",
    "MaybeConstraint",
    "PrimitiveTypeConstraint",
    "NucleusError",
    "ConfigurationError",
    "ArityMismatchError",
    "MismatchedArgumentTypesError",
    "MismatchedDataTypesError",
    "InvalidRangeError",
    "InvalidArgumentError",
    "UnknownKeyError",
    "EmptyContainerError",
]
