# Copyright 2026 schemadts Contributors
# SPDX-License-Identifier: Apache-2.0

"""Structured logging configuration.

Log events go to stderr so that generated source written to stdout stays
clean. Console output is meant for people, JSON output for tooling.
"""

from __future__ import annotations

import logging
import sys
from typing import Literal

import structlog

# ###############
# Public Interface
# ###############


def configure_logging(level: str = "WARNING", fmt: Literal["console", "json"] = "console") -> None:
    """Configure structlog and the standard library root logger.

    Args:
        level: Minimum level (DEBUG, INFO, WARNING, ERROR).
        fmt: ``"console"`` for human-readable output, ``"json"`` for one JSON
            object per event.
    """
    renderer: structlog.types.Processor
    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper()))


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a logger bound to *name* (usually ``__name__``)."""
    return structlog.get_logger(name)
