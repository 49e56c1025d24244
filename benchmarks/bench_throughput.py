"""Benchmark: argument checking and container throughput.

Measures how many ``Arguments`` checks, ``Spec`` checks and ``ArrayList``
map/filter/fold pipelines complete per second.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path
from typing import Callable

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from nucleus.data.array_list import ArrayList
from nucleus.meditation.arguments import Arguments
from nucleus.meditation.boa import Boa
from nucleus.meditation.spec import Spec

_ITERATIONS: int = 20_000
_PIPELINE_ITERATIONS: int = 2_000

_ARGUMENTS = Arguments.contain(
    Boa.string(),
    Boa.maybe(Boa.integer()),
    Boa.either(Boa.lst(), Boa.map()),
)

_SPEC = Spec(
    {
        "name": Boa.string(),
        "age": Boa.integer(),
        "tags": Boa.maybe(Boa.arr()),
    },
    strict=True,
)

_PAYLOAD = {"name": "bench", "age": 42, "tags": ["a", "b"]}


def _measure(operation: str, iterations: int, body: Callable[[], object]) -> dict[str, object]:
    start = time.perf_counter()
    for _ in range(iterations):
        body()
    total = time.perf_counter() - start

    result: dict[str, object] = {
        "operation": operation,
        "iterations": iterations,
        "total_seconds": round(total, 4),
        "ops_per_second": round(iterations / total, 1),
        "avg_latency_ms": round(total / iterations * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def bench_arguments_throughput() -> dict[str, object]:
    """Benchmark positional argument checking.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    return _measure(
        "arguments_check_throughput",
        _ITERATIONS,
        lambda: _ARGUMENTS.evaluate("id", None, {"k": 1}),
    )


def bench_spec_throughput() -> dict[str, object]:
    """Benchmark strict keyed-mapping checks."""
    return _measure(
        "spec_check_throughput",
        _ITERATIONS,
        lambda: _SPEC.check(_PAYLOAD),
    )


def bench_pipeline_throughput() -> dict[str, object]:
    """Benchmark a map, filter and fold pipeline over a 100-element ArrayList."""
    numbers = ArrayList(range(100))
    return _measure(
        "array_list_pipeline_throughput",
        _PIPELINE_ITERATIONS,
        lambda: numbers.map(lambda v, k: v * 2)
        .filter(lambda v, k: v % 3 == 0)
        .foldl(lambda acc, v: acc + v, 0),
    )


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for bench_fn, fname in [
        (bench_arguments_throughput, "arguments_throughput_baseline.json"),
        (bench_spec_throughput, "spec_throughput_baseline.json"),
        (bench_pipeline_throughput, "pipeline_throughput_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
