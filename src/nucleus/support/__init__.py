"""Thin helpers built on the validation core and the container algebra.

``std`` holds functional helpers; ``Flick`` is a keyed dispatcher.
"""
from __future__ import annotations

from nucleus.support import std
from nucleus.support.flick import Flick

__all__ = ["std", "Flick"]
