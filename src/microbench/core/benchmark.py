"""Benchmark registry: runs registered closures and collects their results."""

from __future__ import annotations

import sys
from collections.abc import Sized
from itertools import islice
from typing import Any, Callable, Iterable, Mapping, TextIO, TypeVar

from microbench.reporting.json_report import build_report, render_report
from microbench.shared.config import BenchmarkConfig
from microbench.shared.logging import get_logger

from .models import BenchmarkResult, BenchmarkRun

P = TypeVar("P")


class Benchmark:
    """A named suite of benchmark runs.

    Every registration executes its closure immediately, on the calling thread,
    and appends the resulting run. Exceptions raised by a closure propagate to
    the caller and nothing is appended for the failed run.
    """

    def __init__(self, name: str, config: BenchmarkConfig | None = None) -> None:
        self._name = name
        self._config = config if config is not None else BenchmarkConfig.default()
        self._timings: list[tuple[str, BenchmarkResult]] = []
        self._logger = get_logger(__name__).bind(benchmark=name)

    @classmethod
    def with_config(cls, name: str, config: BenchmarkConfig) -> "Benchmark":
        return cls(name, config)

    @classmethod
    def from_env(cls, name: str, environ: Mapping[str, str] | None = None) -> "Benchmark":
        return cls(name, BenchmarkConfig.from_env(environ))

    @property
    def name(self) -> str:
        return self._name

    @property
    def config(self) -> BenchmarkConfig:
        return self._config

    @property
    def results(self) -> tuple[tuple[str, BenchmarkResult], ...]:
        """Registered results as `(label, result)` pairs, in registration order.

        Each run is a copy; changing it does not affect the report.
        """

        return tuple(
            (label, BenchmarkResult(name=result.name, run=result.run.copy()))
            for label, result in self._timings
        )

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, name: str, func: Callable[[BenchmarkRun], Any]) -> None:
        """Runs `func` once against a fresh run and records it under `name`."""

        run = BenchmarkRun(name=name)
        func(run)
        self._append(name, run)

    def register_with_params(
        self,
        name: str,
        params: Iterable[tuple[str, P]],
        func: Callable[[BenchmarkRun, P], Any],
    ) -> None:
        """Runs `func` once per `(label, value)` parameter, in order.

        In quick mode only the first parameter is run.
        """

        if self._config.quick:
            if isinstance(params, Sized) and len(params) > 1:
                self._logger.info("quick-mode-truncated", name=name, skipped=len(params) - 1)
            params = islice(params, 1)

        for label, value in params:
            run = BenchmarkRun(name=name, param=label)
            func(run, value)
            self._append(name, run)

    def _append(self, name: str, run: BenchmarkRun) -> None:
        # The closure may keep `run`; only a detached copy is recorded.
        run = run.copy()
        self._timings.append((name, BenchmarkResult(name=name, run=run)))
        self._logger.debug(
            "benchmark-run",
            name=name,
            param=run.param,
            time_ns=run.time,
            metrics=dict(run.metrics),
        )

    # ------------------------------------------------------------------
    # Report
    # ------------------------------------------------------------------

    def report(self) -> dict[str, Any]:
        return build_report(self._name, self._timings)

    def to_json(self) -> str:
        return render_report(self._name, self._timings)

    def output(self, stream: TextIO | None = None) -> None:
        """Writes the report as a single JSON line (stdout by default)."""

        out = stream if stream is not None else sys.stdout
        line = self.to_json()
        encoding = getattr(out, "encoding", None)
        if encoding:
            try:
                line.encode(encoding)
            except UnicodeEncodeError:
                line = render_report(self._name, self._timings, ensure_ascii=True)
        out.write(line + "\n")
        out.flush()
