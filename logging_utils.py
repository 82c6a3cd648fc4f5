"""
logging_utils.py
Root logger setup: diagnostics go to stderr through rich, stdout stays the report.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Send diagnostics to stderr through rich, keeping stdout for the report.

    Calling it again only adjusts the level.
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    if getattr(logger, "_efetch_configured", False):
        return logger

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    setattr(logger, "_efetch_configured", True)
    return logger
