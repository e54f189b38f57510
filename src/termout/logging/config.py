# Copyright (c) 2025-2026 provide.io llc
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Centralized logging configuration for termout.

This module provides structured logging using structlog, configured to:
- Write all logs to stderr (stdout is the terminal being drawn on)
- Respect TERMOUT_LOG_LEVEL environment variable (default: WARNING)
- Use ISO timestamps and console rendering
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from termout.settings import LoggingSettings

__all__ = ["configure_logging", "ensure_logging", "get_logger"]


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog for termout.

    Call once at application startup. Escape sequences and log lines must
    never share a stream, so the logger factory is pinned to stderr.

    Args:
        settings: Settings or LoggingSettings instance (will be created if None)
    """
    if settings is None:
        from termout.settings import LoggingSettings

        settings = LoggingSettings()

    log_level = getattr(logging, settings.log_level.upper(), logging.WARNING)

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__ of calling module)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def ensure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure logging unless the application already has.

    structlog's unconfigured default prints to stdout, which would land
    log lines in the middle of escape sequences.
    """
    if not structlog.is_configured():
        configure_logging(settings)
