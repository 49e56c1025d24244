"""Structural tests for the nucleus-meditation benchmark module."""
from __future__ import annotations

import importlib
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "benchmarks"))


def test_bench_throughput_importable() -> None:
    """Verify bench_throughput module can be imported."""
    mod = importlib.import_module("bench_throughput")
    assert hasattr(mod, "bench_arguments_throughput")
    assert hasattr(mod, "bench_spec_throughput")
    assert hasattr(mod, "bench_pipeline_throughput")


def test_spec_throughput_returns_expected_keys() -> None:
    """Verify bench_spec_throughput returns expected result keys."""
    from bench_throughput import bench_spec_throughput

    result = bench_spec_throughput()
    assert result["operation"] == "spec_check_throughput"
    assert "iterations" in result
    assert "avg_latency_ms" in result
    assert float(result["ops_per_second"]) > 0  # type: ignore[arg-type]


def test_pipeline_throughput_returns_expected_keys() -> None:
    """Verify bench_pipeline_throughput returns expected result keys."""
    from bench_throughput import bench_pipeline_throughput

    result = bench_pipeline_throughput()
    assert "operation" in result
    assert "ops_per_second" in result
