"""
Logging setup for the envelope API.

One stdout stream, one line per record. Routes and use cases log through
``logging.getLogger(__name__)``; the error boundary logs each unhandled
failure with its traceback before turning it into an envelope.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

NOISY_LOGGERS = ("uvicorn.access", "uvicorn.error")


def configure_logging(level: str = "INFO") -> None:
    """Install the root handler, replacing any handler already present.

    Called from ``create_app``, so building a second application (as the
    tests do) leaves exactly one handler in place.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
            Unknown names fall back to INFO.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # uvicorn: warnings and above only
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
