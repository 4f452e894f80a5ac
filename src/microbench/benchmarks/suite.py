"""Stdlib workloads timed with the harness.

Inputs are built before timing starts so only the operation itself is
measured.
"""

from __future__ import annotations

import hashlib
import json
import zlib

from microbench.core import Benchmark, BenchmarkRun

from .synthetic import deterministic_bytes, deterministic_ints, filled

SEED = 1337
KIB = 1024

SHA256_SIZES = (("1KiB", KIB), ("64KiB", 64 * KIB), ("1MiB", 1024 * KIB))
JSON_ITEM_COUNTS = (("small", 10), ("medium", 1_000), ("large", 100_000))
COMPRESS_SIZE = 256 * KIB
SORT_COUNT = 100_000


def _sha256(run: BenchmarkRun, size: int) -> None:
    data = deterministic_bytes(size, seed=SEED)
    run.timed(lambda: hashlib.sha256(data).digest())
    run.log("bytes", len(data))


def _zlib_compress(run: BenchmarkRun, data: bytes) -> None:
    compressed = run.timed(lambda: zlib.compress(data))
    run.log("input_bytes", len(data))
    run.log("output_bytes", len(compressed))


def _json_encode(run: BenchmarkRun, count: int) -> None:
    payload = [{"id": i, "name": f"item-{i}", "tags": ["a", "b"], "score": i * 0.5} for i in range(count)]
    encoded = run.timed(lambda: json.dumps(payload))
    run.log("items", count)
    run.log("bytes", len(encoded.encode("utf-8")))


def _sort_ints(run: BenchmarkRun) -> None:
    values = deterministic_ints(SORT_COUNT, seed=SEED)
    run.timed(lambda: sorted(values))
    run.log("items", len(values))


def register_builtin(bench: Benchmark) -> None:
    """Registers the built-in suite on `bench`, in a fixed order."""

    bench.register_with_params("sha256", SHA256_SIZES, _sha256)
    bench.register_with_params(
        "zlib_compress",
        (
            ("random", deterministic_bytes(COMPRESS_SIZE, seed=SEED)),
            ("zeros", filled(COMPRESS_SIZE)),
            ("repeated", filled(COMPRESS_SIZE, 0xAA)),
        ),
        _zlib_compress,
    )
    bench.register_with_params("json_encode", JSON_ITEM_COUNTS, _json_encode)
    bench.register("sort_ints", _sort_ints)
