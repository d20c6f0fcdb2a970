"""Centralized structlog configuration.

Importing the package configures nothing. `WoWCommunityAPI` applies
`ClientSettings.log_level` on construction unless the host application (or
the CLI `-v` flag) configured structlog first.
"""

from __future__ import annotations

import logging
import sys

import structlog


def _normalize_log_level(level: str | None) -> int:
    normalized = (level or "WARNING").strip().upper()
    return logging.getLevelNamesMapping().get(normalized, logging.WARNING)


def configure_logging(level: str | None = None, *, force: bool = False) -> None:
    """Configure structlog with a console renderer on stderr."""

    if structlog.is_configured() and not force:
        return

    resolved_level = _normalize_log_level(level)
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolved_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


logger = structlog.get_logger("wowapi")
