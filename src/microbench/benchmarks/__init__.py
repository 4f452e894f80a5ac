"""Built-in self-benchmark suite.

This package provides:
- repeatable synthetic inputs,
- a suite of stdlib workloads timed with the harness,
- the `microbench` command-line entry point.
"""

from .suite import register_builtin

__all__ = ["register_builtin"]
