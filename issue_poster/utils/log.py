"""Logging setup for the command-line run."""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "issue_poster"


def setup_logging(verbose: bool = False) -> None:
    """Send package log records to stderr through rich.

    The package logger stays at WARNING unless ``verbose`` is set, in which
    case it logs at INFO. Per-request details are logged at DEBUG and only
    show up when a caller lowers the level further. Credentials are never
    logged.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True), show_path=False, show_time=False
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
