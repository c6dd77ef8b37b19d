"""
Logging configuration for the error demo.

Everything goes to stdout on one line per record. Translated errors are
logged by the error handlers and requests by the request logging
middleware, so the uvicorn access log is silenced to avoid duplicates.
"""

import logging
import sys
from collections.abc import Iterable

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

PACKAGE_LOGGER = "error_demo"
QUIET_LOGGERS = ("uvicorn.access",)


def configure_logging(
    level: str = "INFO",
    debug: bool = False,
    quiet: Iterable[str] = QUIET_LOGGERS,
) -> None:
    """Install the root handler and tune application loggers.

    Args:
        level: Root log level name; unknown names fall back to INFO.
        debug: Log this package at DEBUG regardless of ``level``.
        quiet: Logger names raised to WARNING.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger(PACKAGE_LOGGER).setLevel(
        logging.DEBUG if debug else logging.NOTSET
    )
    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)
