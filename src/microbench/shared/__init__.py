"""Shared modules: configuration and logging."""

from .config import QUICK_ENV_VAR, BenchmarkConfig
from .logging import configure_logging, get_logger, level_from_env

__all__ = [
	"BenchmarkConfig",
	"QUICK_ENV_VAR",
	"configure_logging",
	"get_logger",
	"level_from_env",
]
