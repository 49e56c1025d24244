"""A small standard library of functional helpers.

Most helpers guard their inputs with ``Arguments`` and then forward to
the container algebra, so they accept plain Python containers as well as
nucleus containers::

    from nucleus.support import std

    std.foldl(lambda acc, x: acc + x, 0, [1, 2, 3])        # 6
    std.filter(lambda v, k: v > 1, [1, 2, 3])              # {1: 2, 2: 3}
    add3 = std.curry(lambda a, b, c: a + b + c, 1)
    add3(2)(3)                                             # 6
"""
from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import Any

from nucleus.data.array_list import ArrayList
from nucleus.data.factory import ComplexFactory
from nucleus.data.interfaces import Semigroup
from nucleus.meditation.arguments import Arguments
from nucleus.meditation.boa import Boa
from nucleus.meditation.errors import InvalidRangeError, MismatchedArgumentTypesError
from nucleus.meditation.kinds import TypeHound

logger = logging.getLogger(__name__)

_NUMBER = Boa.either(Boa.integer(), Boa.float())


def call(function: Callable[..., Any], *args: Any) -> Any:
    """Call ``function`` with the remaining arguments."""
    return function(*args)


def apply(function: Callable[..., Any], args: Any) -> Any:
    """Call ``function`` with the elements of ``args`` as positional arguments."""
    Arguments.contain(Boa.func(), Boa.lst()).check(function, args)

    return call(function, *args)


def concat(one: Any, other: Any) -> Any:
    """Concatenate two strings or two lists of the same type.

    Raises
    ------
    InvalidArgumentError
        If either operand is neither a string nor list-like.
    MismatchedArgumentTypesError
        If the operands are of different kinds or types.
    """
    text_or_list = Boa.either(Boa.lst(), Boa.string())
    Arguments.contain(text_or_list, text_or_list).check(one, other)

    if not TypeHound.same_kind(one, other) or type(one) is not type(other):
        raise MismatchedArgumentTypesError("concat", one, other)

    if isinstance(one, Semigroup):
        return one.append(other)
    if isinstance(one, (str, list, tuple)):
        return one + other
    return list(one) + list(other)


def truthy(*args: Any) -> Any:
    """Return the first truthy argument, or ``False``."""
    for arg in args:
        if arg:
            return arg
    return False


def falsy(*args: Any) -> Any:
    """Return the first falsy argument, or ``True``."""
    for arg in args:
        if not arg:
            return arg
    return True


def coalesce(*args: Any) -> Any:
    """Return the first argument that is not ``None``."""
    for arg in args:
        if arg is not None:
            return arg
    return None


def nonempty(*args: Any) -> Any:
    """Return the first non-empty argument, or ``None``."""
    for arg in args:
        if arg:
            return arg
    return None


def within(minimum: float, maximum: float, value: float) -> bool:
    """Return True if ``minimum <= value <= maximum``.

    Raises
    ------
    InvalidRangeError
        If ``minimum`` is greater than ``maximum``.
    """
    Arguments.contain(_NUMBER, _NUMBER, _NUMBER).check(minimum, maximum, value)

    if minimum > maximum:
        raise InvalidRangeError(minimum, maximum)

    return minimum <= value <= maximum


def each(function: Callable[[Any, Any], Any], foldable: Any) -> None:
    """Call ``function(value, key)`` on every element."""
    Arguments.contain(Boa.func(), Boa.foldable()).check(function, foldable)

    for key, value in ComplexFactory.pairs(foldable):
        function(value, key)


def foldl(function: Callable[[Any, Any], Any], initial: Any, foldable: Any) -> Any:
    """Reduce ``foldable`` from the left with ``function(accumulator, value)``."""
    Arguments.contain(Boa.func(), Boa.any(), Boa.left_foldable()).check(
        function, initial, foldable
    )

    return ComplexFactory.to_left_foldable(foldable).foldl(function, initial)


def foldr(function: Callable[[Any, Any], Any], initial: Any, foldable: Any) -> Any:
    """Reduce ``foldable`` from the right with ``function(value, accumulator)``."""
    Arguments.contain(Boa.func(), Boa.any(), Boa.foldable()).check(
        function, initial, foldable
    )

    return ComplexFactory.to_foldable(foldable).foldr(function, initial)


def reduce(function: Callable[[Any, Any], Any], initial: Any, foldable: Any) -> Any:
    """Alias of ``foldl``."""
    return foldl(function, initial, foldable)


def reduce_right(function: Callable[[Any, Any], Any], initial: Any, foldable: Any) -> Any:
    """Alias of ``foldr``."""
    return foldr(function, initial, foldable)


def map(function: Callable[[Any, Any], Any], traversable: Any) -> dict[Any, Any]:  # noqa: A001
    """Return a dict of ``function(value, key)`` keyed like ``traversable``."""
    Arguments.contain(Boa.func(), Boa.traversable()).check(function, traversable)

    return {key: function(value, key) for key, value in ComplexFactory.pairs(traversable)}


def filter(function: Callable[[Any, Any], Any], traversable: Any) -> dict[Any, Any]:  # noqa: A001
    """Return the entries for which ``function(value, key)`` is truthy.

    Unlike the built-in ``filter``, keys are preserved: filtering a list
    yields a dict from original index to value.
    """
    Arguments.contain(Boa.func(), Boa.traversable()).check(function, traversable)

    return {
        key: value
        for key, value in ComplexFactory.pairs(traversable)
        if function(value, key)
    }


def reverse(items: Any) -> Any:
    """Return ``items`` reversed, keeping ``ArrayList`` and ``tuple`` types."""
    Arguments.contain(Boa.lst()).check(items)

    if isinstance(items, ArrayList):
        return items.reverse()
    if isinstance(items, tuple):
        return tuple(reversed(items))
    return list(reversed(items))


def _required_parameters(function: Callable[..., Any]) -> int:
    signature = inspect.signature(function)
    return sum(
        1
        for parameter in signature.parameters.values()
        if parameter.kind
        in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
        and parameter.default is inspect.Parameter.empty
    )


def curry_args(function: Callable[..., Any], args: Any) -> Any:
    """Left-curry ``function`` with the list ``args``.

    Calls ``function`` as soon as enough positional arguments have been
    collected to cover its required parameters; until then, returns a
    function accepting more.
    """
    Arguments.contain(Boa.func(), Boa.lst()).check(function, args)

    collected = list(args)
    if len(collected) >= _required_parameters(function):
        return apply(function, collected)

    def curried(*more: Any) -> Any:
        return curry_args(function, collected + list(more))

    return curried


def curry(function: Callable[..., Any], *args: Any) -> Any:
    """Left-curry ``function`` with the given positional arguments."""
    return curry_args(function, args)


def poll(function: Callable[[int], Any], times: int) -> None:
    """Call ``function(i)`` for ``i`` in ``range(times)``."""
    Arguments.contain(Boa.func(), Boa.integer()).check(function, times)

    for index in range(times):
        call(function, index)


def retry(function: Callable[[int], Any], attempts: int) -> Any:
    """Call ``function(attempt)`` until a call returns without raising.

    Returns the first successful result, or ``None`` once ``attempts``
    calls have all raised.
    """
    Arguments.contain(Boa.func(), Boa.integer()).check(function, attempts)

    for attempt in range(attempts):
        try:
            return call(function, attempt)
        except Exception:
            logger.debug("Attempt %d of %d failed", attempt + 1, attempts, exc_info=True)
    return None


def value(candidate: Any) -> Any:
    """Return ``candidate()`` if it is a plain function, else ``candidate``."""
    return candidate() if inspect.isfunction(candidate) else candidate


def first_bias(biased: bool, one: Any, other: Any) -> Any:
    """Return ``value(one)`` if ``biased`` else ``value(other)``."""
    Arguments.contain(Boa.boolean(), Boa.any(), Boa.any()).check(biased, one, other)

    if biased:
        return value(one)
    return value(other)
