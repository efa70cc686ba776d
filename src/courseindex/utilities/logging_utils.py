"""
Logging setup for the command-line tool.

Library modules only create module loggers; handlers are installed here,
once, by the CLI entry point.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def resolve_level(config: dict[str, Any], verbose: bool = False, quiet: bool = False) -> int:
    """Pick the log level from command-line flags, falling back to config.

    --verbose forces DEBUG and --quiet forces ERROR. Otherwise the
    logging.level setting is used, defaulting to WARNING when it is not a
    known level name.
    """
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR

    name = str(config.get("logging", {}).get("level", "WARNING")).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(level: int = logging.WARNING) -> logging.Handler:
    """Install a stderr handler on the package logger.

    Calling again replaces the previously installed handler instead of
    adding a second one.

    Returns:
        The installed handler.
    """
    logger = logging.getLogger("courseindex")
    for handler in list(logger.handlers):
        if getattr(handler, "_courseindex_cli", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._courseindex_cli = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
