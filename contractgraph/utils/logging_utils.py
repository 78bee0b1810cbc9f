"""Logging setup with Rich integration."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "contractgraph"


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> logging.Logger:
    """Route the package's log records through a Rich handler.

    Only the ``contractgraph`` logger tree is configured; the root logger and
    any handlers the host application installed on it are left untouched.
    Calling this again replaces the Rich handler added by a previous call.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).

    Returns:
        logging.Logger: The configured package logger.
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        if isinstance(existing, RichHandler):
            package_logger.removeHandler(existing)

    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )
    handler.setFormatter(logging.Formatter("[%(name)s] %(message)s"))

    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    return package_logger
