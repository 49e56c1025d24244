#!/usr/bin/env python3
"""Example: Quickstart — nucleus-meditation

Minimal working example: classify values, guard a function's arguments,
check a keyed payload and print the result.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install nucleus-meditation
"""
from __future__ import annotations

import nucleus
from nucleus import Arguments, Boa, Spec
from nucleus.meditation.errors import InvalidArgumentError
from nucleus.meditation.report import ResultReporter


def create_user(name: object, age: object = None) -> str:
    Arguments.contain(Boa.string(), Boa.maybe(Boa.integer())).check(name, age)
    return f"{name} ({age if age is not None else 'unknown age'})"


def main() -> None:
    print(f"nucleus-meditation version: {nucleus.__version__}")

    # Step 1: Classify a few values
    for value in ("0", 0, 0.0, False, [0], {"a": 0}, len, None):
        print(f"  {value!r:>12} -> {nucleus.classify(value)}")

    # Step 2: Guard function arguments
    print(create_user("ada", 36))
    try:
        create_user(7, "old")
    except InvalidArgumentError as error:
        print(f"\n{error}")

    # Step 3: Check a keyed payload, leniently and strictly
    spec = Spec({"name": Boa.string(), "age": Boa.integer()})
    payload = {"name": "ada", "age": "36", "role": "admin"}
    reporter = ResultReporter()
    print("\nLenient:")
    reporter.print(spec.check(payload))
    print("Strict:")
    reporter.print(spec.with_strict(True).check(payload))


if __name__ == "__main__":
    main()
