"""Logging configuration for kitsu-manga using loguru.

stdout carries the report, so console logs go to stderr. A rotating file
sink is added only when ``settings.log.file`` is set.
Use get_logger() to get a logger instance for any module.
"""

import sys

from loguru import logger as _base_logger

from models.config import settings

# Store configuration state to prevent re-initialization
_initialized = False


def configure_logging(debug: bool = False) -> None:
    """Configure loguru for the entire application.

    Args:
        debug: If True, set console logging to DEBUG level instead of WARNING
    """
    global _initialized

    # Remove default handler (and ours, when reconfiguring with --debug)
    _base_logger.remove()

    console_level = "DEBUG" if debug else "WARNING"
    _base_logger.add(
        sys.stderr,
        format="<level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=console_level,
    )

    log_file = settings.log.file
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _base_logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level="DEBUG",
            rotation="10 MB",
            retention=5,
        )

    _initialized = True


def get_logger(name: str):
    """Return the shared loguru logger bound to ``name``, configuring logging on first use."""
    if not _initialized:
        configure_logging()
    return _base_logger.bind(name=name)
