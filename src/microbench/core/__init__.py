"""Harness core: timed runs, their results and the benchmark registry."""

from . import models
from .benchmark import Benchmark
from .models import BenchmarkResult, BenchmarkRun

__all__ = [
	"models",
	"Benchmark",
	"BenchmarkResult",
	"BenchmarkRun",
]
