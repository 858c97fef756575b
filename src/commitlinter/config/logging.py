"""structlog setup for the ``commitlinter`` logger.

commitlinter usually runs inside another tool (a pre-commit hook, a CI
step), so only the package logger is configured; the root logger is left
to the host. Records go to stderr, human-readable by default or one JSON
object per line with ``--log-json``. Rejected-message diagnostics are not
log records; :mod:`commitlinter.output.renderers` prints those.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.types import Processor

LOGGER_NAME = "commitlinter"

# Shared by structlog loggers and stdlib ``logging.getLogger`` records.
_PRE_CHAIN: list[Processor] = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _renderer(log_json: bool) -> Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route ``commitlinter.*`` records to stderr.

    DEBUG when *verbose* (which rule file was loaded, how each line was
    classified), otherwise WARNING. Safe to call more than once.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            *_PRE_CHAIN,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
