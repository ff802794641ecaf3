"""
Logging setup for command-line use.

Library modules only create loggers under the ``qrstyle`` namespace;
handlers are attached here, by the application. Records go to stderr so
that text written to stdout (ASCII grids, output paths) stays clean.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the ``qrstyle`` logger.

    Calling it again replaces the handlers of the previous call.

    Parameters
    ----------
    level : int, optional
        Logging level, e.g. ``logging.DEBUG``. The default is
        ``logging.INFO``.
    log_file : str, optional
        Also write records to this file, truncating it first.

    Returns
    -------
    logging.Logger
        The configured ``qrstyle`` logger.
    """
    logger = logging.getLogger("qrstyle")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging initialized at level %s", logging.getLevelName(level))
    return logger
