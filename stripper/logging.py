"""Logging setup for the command line."""

import logging

from rich.console import Console
from rich.logging import RichHandler

DEFAULT_LOG_FORMAT = "%(name)s: %(message)s"


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Route package logs to stderr through rich.

    Repeated calls replace the handler instead of stacking a new one.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    package_logger = logging.getLogger("stripper")
    package_logger.setLevel(level)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.propagate = False
