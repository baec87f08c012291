"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import sys

import structlog


def setup_logging(log_level: str = "INFO", json_output: bool = True):
    """Configure structlog for the process.

    JSON lines to stdout for services; ``json_output=False`` switches to the
    human-readable console renderer on stderr used by the scripts.
    Should be called once at startup.
    """
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, log_level.upper())),
        context_class=dict,
        # stdout is looked up per logger so redirected streams are honoured
        logger_factory=structlog.PrintLoggerFactory() if json_output else structlog.PrintLoggerFactory(file=sys.stderr),
    )
