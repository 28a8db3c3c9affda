"""
Provides support for logging
"""

import logging
import time
from typing import Any


def configure_logging(
    level: int = logging.WARNING,
    handlers: list[logging.Handler] | None = None,
):
    """
    Configures the root logger with UTC timestamps and the format:

        %(asctime)s [%(levelname)s] [%(name)s] %(message)s

    Any existing configuration is replaced, which lets the shell apply the configured log level.
    """
    logging.Formatter.converter = time.gmtime
    logging.basicConfig(
        format="%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
        level=level,
        handlers=handlers,
        force=True,
    )
    logging.captureWarnings(True)


def get_logger(obj: Any, name: str | None = None) -> logging.Logger:
    """
    Ledger commands log under their class name, e.g., `PlaceBid`, or `PlaceBid.{name}` for a child logger.
    """
    logger = logging.getLogger(obj.__class__.__name__)
    if name is None:
        return logger

    return logger.getChild(name)
