"""Logging configuration for whitted."""

from __future__ import annotations

import logging

from whitted.config import LOG_FORMAT, LOG_LEVEL


def setup_logging(
    level: str | None = None,
    name: str = "whitted",
) -> logging.Logger:
    """Attach a console handler to the package logger.

    Calling this more than once does not stack handlers; the existing console
    handler is reconfigured instead.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to ``WHITTED_LOG_LEVEL``.
        name: Logger name. Defaults to the package root so every module logger
            inherits the handler.

    Returns:
        The configured logger.
    """
    if level is None:
        level = LOG_LEVEL
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = next(
        (h for h in logger.handlers if getattr(h, "_whitted_console", False)),
        None,
    )
    if console_handler is None:
        console_handler = logging.StreamHandler()
        console_handler._whitted_console = True  # type: ignore[attr-defined]
        logger.addHandler(console_handler)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)

    return logger
