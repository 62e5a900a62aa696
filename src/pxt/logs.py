"""Logging setup.

The TUI owns the terminal, so records go to a file instead of stderr.
"""

import logging
from pathlib import Path

from pxt.constants import LOG_FORMAT

_HANDLER_NAME = "pxt-file"


def configure_logging(level: str | int = logging.WARNING, log_file: Path | None = None) -> logging.Logger:
    """Attach a file handler to the ``pxt`` logger.

    Calling this again replaces the previous handler instead of adding a
    second one.
    """
    logger = logging.getLogger("pxt")
    logger.setLevel(level)
    for existing in list(logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logger.removeHandler(existing)
            existing.close()

    if log_file is None:
        handler: logging.Handler = logging.NullHandler()
    else:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.set_name(_HANDLER_NAME)
    logger.addHandler(handler)
    return logger
