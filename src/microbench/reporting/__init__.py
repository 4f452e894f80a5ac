"""Report serialization."""

from .json_report import BenchmarkReport, build_report, parse_report, render_report

__all__ = [
	"BenchmarkReport",
	"build_report",
	"parse_report",
	"render_report",
]
