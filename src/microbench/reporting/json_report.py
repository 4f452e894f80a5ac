"""JSON report serialization.

A report is one line of compact JSON:

    {"name": <benchmark>, "timings": [[<label>, {"name": <label>, "run": {...}}], ...]}

Run durations (`time`) are integer nanoseconds.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterable

if TYPE_CHECKING:
    from microbench.core.models import BenchmarkResult


@dataclass(slots=True)
class BenchmarkReport:
    """A parsed report."""

    name: str
    timings: list[tuple[str, BenchmarkResult]] = field(default_factory=list)

    def results(self) -> list[BenchmarkResult]:
        return [result for _, result in self.timings]


def build_report(name: str, timings: Iterable[tuple[str, BenchmarkResult]]) -> dict[str, Any]:
    return {
        "name": name,
        "timings": [[label, result.to_dict()] for label, result in timings],
    }


def render_report(
    name: str,
    timings: Iterable[tuple[str, BenchmarkResult]],
    *,
    ensure_ascii: bool = False,
) -> str:
    return json.dumps(build_report(name, timings), ensure_ascii=ensure_ascii, separators=(",", ":"))


def parse_report(text: str) -> BenchmarkReport:
    """Parses a report line produced by `Benchmark.output`.

    Raises `ValueError` when the payload is not a report.
    """

    from microbench.core.models import BenchmarkResult

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Report is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict) or "name" not in payload or "timings" not in payload:
        raise ValueError("Report must be an object with 'name' and 'timings'")
    if not isinstance(payload["timings"], list):
        raise ValueError("Report 'timings' must be a list")

    report = BenchmarkReport(name=str(payload["name"]))
    for entry in payload["timings"]:
        if not isinstance(entry, list) or len(entry) != 2:
            raise ValueError(f"Malformed timing entry: {entry!r}")
        label, data = entry
        try:
            result = BenchmarkResult.from_dict(data)
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"Malformed result for {label!r}: {exc}") from exc
        report.timings.append((str(label), result))
    return report
