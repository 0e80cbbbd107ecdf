"""
Logging configuration for the application.

One format for every logger, written to stdout.
LOG_LEVEL accepts the stdlib level names and the npm-style names
(warn, http, verbose, silly) that existing deployments set.
Never logs sensitive data (request bodies, secrets, raw payloads).
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LEVEL_ALIASES = {
    "warn": logging.WARNING,
    "http": logging.INFO,
    "verbose": logging.DEBUG,
    "silly": logging.DEBUG,
}

# Loggers whose INFO output duplicates or floods the access log
QUIET_LOGGERS = ("uvicorn.access", "uvicorn.error", "sqlalchemy.engine")


def resolve_level(name: str) -> int:
    """Map a LOG_LEVEL value to a stdlib level; unknown names mean INFO."""
    key = name.strip().lower()
    if key in LEVEL_ALIASES:
        return LEVEL_ALIASES[key]
    level = logging.getLevelName(key.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: str = "info") -> None:
    """Configure logging for the whole process.

    Safe to call more than once; each call replaces the root handlers.

    Args:
        level: LOG_LEVEL value, case-insensitive.
    """
    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
