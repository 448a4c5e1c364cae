"""Logging setup shared by the API server and the CLI.

Log records go to stderr so that command output written to stdout (JSON
records, classification labels) stays machine-readable.
"""

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are chatty at DEBUG about image decoding and
# multipart parsing.
_NOISY_LOGGERS = ("PIL", "multipart", "python_multipart")


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """Configure the root logger once per process.

    Args:
        level: Logging level name; unknown names fall back to INFO.
        stream: Destination for log records. Defaults to ``sys.stderr``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return the module logger for ``name`` (usually ``__name__``)."""
    return logging.getLogger(name)
