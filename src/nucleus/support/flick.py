"""Flick: a switch statement as a value.

::

    from nucleus.support.flick import Flick

    label = Flick.when({
        "draft": lambda: "Draft",
        "live": lambda: "Published",
        "default": lambda: "Unknown",
    }).go(status)

Handlers take no arguments.  When the key has no handler, the handler
registered under the default key runs instead; when there is none,
``UnknownKeyError`` is raised.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from nucleus.data.factory import ComplexFactory
from nucleus.meditation.arguments import Arguments
from nucleus.meditation.boa import Boa
from nucleus.meditation.errors import UnknownKeyError

logger = logging.getLogger(__name__)

_KEY = Boa.either(Boa.string(), Boa.integer())


class Flick:
    """Keyed dispatch over a mapping of zero-argument handlers.

    Parameters
    ----------
    functions:
        Any read-map of key to handler: a dict, a list (keyed by index),
        or a nucleus ``ArrayMap``.
    default:
        Key of the fallback handler.
    """

    def __init__(
        self,
        functions: Mapping[Any, Callable[[], Any]] | Any,
        default: str | int = "default",
    ) -> None:
        Arguments.contain(Boa.read_map(), _KEY).check(functions, default)

        self._functions = ComplexFactory.to_read_map(functions)
        self._default = default

    @classmethod
    def when(
        cls,
        functions: Mapping[Any, Callable[[], Any]] | Any,
        default: str | int = "default",
    ) -> "Flick":
        return cls(functions, default)

    def go(self, key: str | int) -> Any:
        """Run the handler registered under ``key`` and return its result.

        Raises
        ------
        InvalidArgumentError
            If ``key`` is neither a string nor an integer.
        UnknownKeyError
            If neither ``key`` nor the default key has a handler.
        """
        Arguments.contain(_KEY).check(key)

        if self._functions.member(key):
            return self._functions.lookup(key)()
        if self._functions.member(self._default):
            logger.debug("No handler for %r; falling back to %r", key, self._default)
            return self._functions.lookup(self._default)()

        raise UnknownKeyError(key)
