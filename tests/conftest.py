"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from microbench import Benchmark, BenchmarkConfig


@pytest.fixture
def bench() -> Benchmark:
    return Benchmark("suite")


@pytest.fixture
def quick_bench() -> Benchmark:
    return Benchmark.with_config("suite", BenchmarkConfig(quick=True))


@pytest.fixture(autouse=True)
def _clear_bench_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BENCH_QUICK", raising=False)
    monkeypatch.delenv("BENCH_LOG_LEVEL", raising=False)
