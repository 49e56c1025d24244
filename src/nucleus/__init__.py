"""nucleus-meditation — runtime constraints, argument checking and immutable containers.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import nucleus
    from nucleus import Arguments, ArrayList, Boa, Spec

    # Guard a function's arguments
    Arguments.contain(Boa.string(), Boa.maybe(Boa.integer())).check("id", None)

    # Validate a keyed payload
    result = nucleus.check_mapping({"name": Boa.string()}, {"name": "a", "extra": 1})
    result.passed()

    # Classify a value
    nucleus.classify("0")

    # Fold, map, filter and append immutable lists
    ArrayList([1, 2]).append(ArrayList([3, 4])).to_list()

    nucleus.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from nucleus.data.array_list import ArrayList
from nucleus.data.array_map import ArrayMap
from nucleus.meditation.arguments import Arguments
from nucleus.meditation.boa import Boa
from nucleus.meditation.kinds import Kind, TypeHound
from nucleus.meditation.result import CheckResult
from nucleus.meditation.spec import Spec

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from nucleus.meditation.constraints import AbstractConstraint


def classify(value: Any) -> Kind:
    """Return the primary ``Kind`` of ``value``.

    Parameters
    ----------
    value:
        Any Python value.

    Returns
    -------
    Kind
        Exactly one kind; unrecognised values are ``Kind.OBJECT``.
    """
    return TypeHound.fetch(value)


def check_arguments(
    constraints: "Iterable[AbstractConstraint]", *values: Any
) -> CheckResult:
    """Check ``values`` positionally against ``constraints``.

    Parameters
    ----------
    constraints:
        One constraint per value.
    values:
        The values to check.

    Returns
    -------
    CheckResult
        Every violation found, in position order.

    Raises
    ------
    nucleus.meditation.errors.ArityMismatchError
        If the number of values differs from the number of constraints.
    """
    return Arguments(constraints).evaluate(*values)


def check_mapping(
    fields: "Mapping[str, AbstractConstraint]",
    mapping: Any,
    strict: bool = False,
) -> CheckResult:
    """Check a keyed ``mapping`` against ``fields``.

    Parameters
    ----------
    fields:
        Mapping of required key to constraint.
    mapping:
        The mapping to check.
    strict:
        When ``True``, keys not declared in ``fields`` are violations.

    Returns
    -------
    CheckResult
        Every violation found.
    """
    return Spec(fields, strict=strict).check(mapping)


__all__ = [
    "__version__",
    "classify",
    "check_arguments",
    "check_mapping",
    "Arguments",
    "ArrayList",
    "ArrayMap",
    "Boa",
    "CheckResult",
    "Kind",
    "Spec",
    "TypeHound",
]
