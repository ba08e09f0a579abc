"""Diagnostics setup for the colprint CLI.

Column blocks are the only thing colprint writes to stdout. Every log line,
from structlog in the operations layer or from stdlib loggers such as the
config loader, is sent to stderr.
"""

from __future__ import annotations

import logging as std_logging
import sys

import structlog

_VERBOSITY_LEVELS = (std_logging.WARNING, std_logging.INFO, std_logging.DEBUG)


def level_for_verbosity(verbosity: int) -> int:
    """Map a ``-v`` count to a logging level (WARNING, INFO, then DEBUG)."""

    return _VERBOSITY_LEVELS[min(max(verbosity, 0), len(_VERBOSITY_LEVELS) - 1)]


def _event_renderer(json_mode: bool) -> structlog.typing.Processor:
    if json_mode:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(json_mode: bool = False, verbosity: int = 0) -> None:
    """Set up stdlib and structlog logging on stderr for one CLI invocation."""

    level = level_for_verbosity(verbosity)

    stderr_handler = std_logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(std_logging.Formatter("%(message)s"))
    # main() may run more than once in a process (tests); replace old handlers.
    std_logging.basicConfig(level=level, handlers=[stderr_handler], force=True)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            _event_renderer(json_mode),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
