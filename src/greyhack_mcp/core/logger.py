"""Logging utilities for the greyhack MCP server."""

import logging
import sys

_LOGGER_NAME = "greyhack_mcp"


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance below the package logger.

    Args:
        name: Optional sub-logger name, or a module `__name__` inside the package.
            If None, returns the package root logger.

    Returns:
        The requested logger.
    """
    if name == _LOGGER_NAME or (name and name.startswith(_LOGGER_NAME + ".")):
        return logging.getLogger(name)
    if name:
        return logging.getLogger(f"{_LOGGER_NAME}.{name}")
    return logging.getLogger(_LOGGER_NAME)


def setup_logging(
    level: int | str = logging.INFO, format_str: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
) -> None:
    """Setup default logging configuration for the server process.

    The handler writes to stderr. When the server runs over the stdio transport,
    stdout carries the MCP message stream and must stay free of log lines.

    Args:
        level: Logging level, either numeric or a level name such as "DEBUG".
        format_str: Log format string.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)

    # Avoid adding multiple handlers if called multiple times
    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_str))
    logger.addHandler(handler)


# Set default NullHandler to avoid "No handler found" warnings
logging.getLogger(_LOGGER_NAME).addHandler(logging.NullHandler())
