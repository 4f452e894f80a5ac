"""Data models for timed runs and their results."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import asdict, dataclass, field, replace
from typing import Any, Callable, Iterator, Mapping, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class BenchmarkRun:
    """A single timed execution.

    `time` is the elapsed duration in nanoseconds of the most recent timing
    operation; it stays 0 until one completes. Each timing operation replaces
    the previous value, so only the last timed section is kept.
    """

    name: str
    param: str = ""
    time: int = 0
    metrics: dict[str, int] = field(default_factory=dict)

    @contextmanager
    def timing(self) -> Iterator[None]:
        """Times the enclosed block on a monotonic clock.

        If the block raises, `time` keeps its previous value.
        """

        start = time.perf_counter_ns()
        yield
        self.time = time.perf_counter_ns() - start

    def timed(self, func: Callable[[], T]) -> T:
        """Times `func()` and returns its result unchanged."""

        with self.timing():
            out = func()
        return out

    def log(self, metric: str, value: int) -> None:
        self.metrics[metric] = value

    def copy(self) -> "BenchmarkRun":
        """Returns a detached copy with its own metrics dict."""

        return replace(self, metrics=dict(self.metrics))

    @property
    def seconds(self) -> float:
        return self.time / 1e9

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BenchmarkRun":
        return cls(
            name=str(data["name"]),
            param=str(data.get("param", "")),
            time=int(data["time"]),
            metrics={str(k): int(v) for k, v in dict(data.get("metrics") or {}).items()},
        )


@dataclass(frozen=True, slots=True)
class BenchmarkResult:
    """A finished run paired with the label it was registered under."""

    name: str
    run: BenchmarkRun

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "run": self.run.to_dict()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BenchmarkResult":
        return cls(name=str(data["name"]), run=BenchmarkRun.from_dict(data["run"]))
