"""Logging setup for the saxcodec package."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Configure the ``saxcodec`` logger with a rich console handler.

    Calling this again replaces the previously installed handler.
    """
    logger = logging.getLogger("saxcodec")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)

    return logger
