"""Logger setup and timing helpers for imgsharp.

Importing the package only attaches a NullHandler to the ``imgsharp``
logger. Output format and level stay with the host application unless it
opts in through ``configure_logging``.
"""

import logging
import time
from contextlib import contextmanager
from typing import Iterator, Optional

from ...config.settings import get_settings

ROOT_LOGGER_NAME = "imgsharp"
LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Send ``imgsharp`` records to stderr at the configured level.

    Meant for scripts and applications; the library never calls it itself.

    Args:
        level: Level name to use instead of ``IMGSHARP_LOG_LEVEL``

    Returns:
        The package root logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel((level or get_settings().log_level).upper())
    logging.basicConfig(format=LOG_FORMAT, datefmt=DATE_FORMAT)
    return root


def get_logger(name: str) -> logging.Logger:
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


@contextmanager
def timed(label: str, logger: Optional[logging.Logger] = None) -> Iterator[None]:
    """Log how long the wrapped block took, at DEBUG level.

    Does nothing when ``log_timings`` is disabled in settings.

    Examples:
        >>> with timed("getting average of laplacian"):
        ...     pass
    """
    if not get_settings().log_timings:
        yield
        return

    log = logger or get_logger(__name__)
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        log.debug("%s took %f seconds to execute", label, elapsed)
