"""Structured logging configuration."""

from __future__ import annotations

import logging
import os
import sys
from typing import Mapping

import structlog
from structlog.stdlib import BoundLogger

LOG_LEVEL_ENV_VAR = "BENCH_LOG_LEVEL"


def configure_logging(level: int = logging.WARNING) -> None:
    """Initialises logging for the harness.

    Everything goes to stderr; stdout carries only the report line.
    """

    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)
    logging.getLogger("microbench").setLevel(level)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"]),
        ],
        wrapper_class=BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> BoundLogger:
    """Returns a structlog logger backed by the stdlib logger `name`.

    The wrapped logger is always a stdlib one, so output follows the stdlib
    handlers even before `configure_logging` has run.
    """

    return structlog.wrap_logger(logging.getLogger(name), wrapper_class=BoundLogger)


def level_from_env(environ: Mapping[str, str] | None = None) -> int:
    env = os.environ if environ is None else environ
    name = (env.get(LOG_LEVEL_ENV_VAR) or "").strip().upper()
    level = logging.getLevelName(name) if name else logging.WARNING
    return level if isinstance(level, int) else logging.WARNING
