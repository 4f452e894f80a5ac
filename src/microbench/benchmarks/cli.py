"""CLI entrypoint for running the built-in suite and printing its report."""

from __future__ import annotations

from argparse import ArgumentParser

from microbench.core import Benchmark
from microbench.shared import BenchmarkConfig, configure_logging, get_logger, level_from_env

from .suite import register_builtin

SUITE_NAME = "microbench"


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="microbench",
        description="Run the built-in micro-benchmark suite and print a JSON report to stdout.",
    )
    parser.add_argument(
        "--quick",
        action="store_true",
        help="Run only the first parameter of each sweep (default: taken from BENCH_QUICK)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(level_from_env())
    logger = get_logger(__name__)

    config = BenchmarkConfig(quick=True) if args.quick else BenchmarkConfig.from_env()
    bench = Benchmark.with_config(SUITE_NAME, config)
    try:
        register_builtin(bench)
    except Exception:
        logger.exception("benchmark-failed", suite=SUITE_NAME)
        return 1

    bench.output()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
