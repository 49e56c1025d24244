#!/usr/bin/env python3
"""Example: Immutable collections

Demonstrates ArrayList and ArrayMap folds, key-preserving map/filter,
appending, and keyed dispatch with Flick.

Usage:
    python examples/02_collections.py

Requirements:
    pip install nucleus-meditation
"""
from __future__ import annotations

from nucleus import ArrayList, ArrayMap
from nucleus.support import Flick, std


def main() -> None:
    numbers = ArrayList([1, 2, 3, 4])

    # Folds run in opposite directions
    print("foldl:", numbers.foldl(lambda acc, x: f"({acc}-{x})", "0"))
    print("foldr:", numbers.foldr(lambda x, acc: f"({x}-{acc})", "0"))

    # filter keeps the original keys; to_list drops them
    evens = numbers.filter(lambda v, k: v % 2 == 0)
    print("evens keyed:", evens.to_array())
    print("evens listed:", evens.to_list())

    # append renumbers
    print("appended:", numbers.append(ArrayList([5, 6])).to_array())

    stock = ArrayMap({"apple": 3, "pear": 0})
    restocked = stock.append(ArrayMap({"pear": 12, "plum": 7}))
    print("restocked:", dict(restocked))
    print("in stock:", dict(restocked.filter(lambda v, k: v > 0)))

    # Functional helpers accept plain Python values as well
    print("total:", std.foldl(lambda acc, x: acc + x, 0, restocked))
    add3 = std.curry(lambda a, b, c: a + b + c)
    print("curried:", add3(1)(2)(3))

    status = Flick.when({
        "draft": lambda: "Not yet published",
        "live": lambda: "Visible to everyone",
        "default": lambda: "Unknown status",
    })
    for key in ("draft", "live", "archived"):
        print(f"{key}: {status.go(key)}")


if __name__ == "__main__":
    main()
