"""Logging setup for the command line front end."""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "sysbench_report"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Send package logs to stderr through Rich.

    Stdout is reserved for the rendered report, so nothing here writes to it.
    Calling this again replaces the previously installed handler.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
