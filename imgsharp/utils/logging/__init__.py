"""Logging utilities for imgsharp."""

from .log import (
    LOG_FORMAT, ROOT_LOGGER_NAME,
    configure_logging, get_logger, timed,
)

__all__ = [
    "LOG_FORMAT", "ROOT_LOGGER_NAME",
    "configure_logging", "get_logger", "timed",
]
