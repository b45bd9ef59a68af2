"""Logging configuration for the vrow CLI."""

from __future__ import annotations

import logging
import sys


LOGGER_NAME = "vrow"

DEBUG_FORMAT = "%(levelname)s %(name)s.%(module)s: %(message)s"


def resolve_log_level(verbose: bool, debug: bool) -> int:
    """Return the logger level for the requested verbosity."""
    if debug:
        return logging.DEBUG
    if verbose:
        return logging.INFO
    return logging.WARNING


def configure_logging(verbose: bool, debug: bool = False) -> None:
    """Configure logging output based on verbosity.

    Args:
        verbose: Whether to enable INFO logging to stdout
        debug: Whether to also show the DEBUG resolution trace; implies verbose
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.propagate = False
    level = resolve_log_level(verbose, debug)
    logger.setLevel(level)

    if level == logging.WARNING:
        logger.handlers.clear()
        return

    handler = next(
        (handler for handler in logger.handlers if isinstance(handler, logging.StreamHandler)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        logger.addHandler(handler)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(DEBUG_FORMAT if debug else "%(message)s"))
