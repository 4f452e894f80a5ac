"""Harness configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

QUICK_ENV_VAR = "BENCH_QUICK"

_TRUTHY = ("true", "1")


@dataclass(frozen=True, slots=True)
class BenchmarkConfig:
    """Run-wide switches for a benchmark suite.

    `quick` truncates parameter sweeps to their first parameter, for fast
    iteration during development.
    """

    quick: bool = False

    @classmethod
    def default(cls) -> "BenchmarkConfig":
        return cls(quick=False)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "BenchmarkConfig":
        """Builds the config from `BENCH_QUICK`.

        Only the exact values `"true"` and `"1"` enable quick mode; anything
        else, including a missing variable, leaves it off.
        """

        env = os.environ if environ is None else environ
        return cls(quick=env.get(QUICK_ENV_VAR, "false") in _TRUTHY)
