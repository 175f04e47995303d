"""Logging setup for the TSDoc README generator.

Module loggers live under the ``tsdoc_readme`` namespace and propagate
to the package logger configured here from the ``logging`` section of
the application config.
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "tsdoc_readme"


def _attach(
    logger: logging.Logger,
    handler: logging.Handler,
    level: int,
    formatter: logging.Formatter,
) -> None:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def setup_logging(
    level: str = "INFO",
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Point the package logger at stderr and, optionally, a log file.

    Handlers from earlier calls are dropped, so repeated CLI invocations
    in one process do not duplicate output. Unknown level names fall
    back to INFO.

    Args:
        level: Level name such as DEBUG or WARNING.
        log_format: Format string shared by every handler.
        log_file: Extra file to append log records to.

    Returns:
        The package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    package_logger.setLevel(numeric_level)
    formatter = logging.Formatter(log_format)

    _attach(package_logger, logging.StreamHandler(sys.stderr), numeric_level, formatter)
    if log_file:
        _attach(package_logger, logging.FileHandler(log_file), numeric_level, formatter)

    package_logger.debug("Logging initialized at level %s", level)
    return package_logger
