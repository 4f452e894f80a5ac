"""microbench: a minimal in-process micro-benchmark harness."""

from .core import Benchmark, BenchmarkResult, BenchmarkRun
from .shared import BenchmarkConfig

__all__ = [
	"Benchmark",
	"BenchmarkConfig",
	"BenchmarkResult",
	"BenchmarkRun",
	"benchmarks",
	"core",
	"reporting",
	"shared",
]
