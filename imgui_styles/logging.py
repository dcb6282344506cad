"""
Logging configuration for imgui-styles.

The library itself only logs: every module asks ``get_logger(__name__)``
for a child of the ``imgui_styles`` logger, which carries a NullHandler
until an application (or ``python -m imgui_styles``) calls
``setup_logging``.

Usage:
    from imgui_styles.logging import setup_logging, get_logger

    # In an application entry point
    setup_logging(level='DEBUG', log_file='styles.log', console=True)

    # In any module
    logger = get_logger(__name__)
    logger.debug("Applied theme")
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = 'imgui_styles'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def setup_logging(
    level: str = 'WARNING',
    log_file: Optional[str] = None,
    console: bool = False
) -> logging.Logger:
    """
    Configure the ``imgui_styles`` logger.

    Handlers installed by a previous call are replaced.

    Args:
        level: Log level name ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
        log_file: Path of a file that receives every record at ``level``
        console: If True, also log to stderr

    Returns:
        The configured package logger
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.debug(f"Logging configured: level={level}, log_file={log_file}, console={console}")
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``imgui_styles`` hierarchy for ``name``."""
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{LOGGER_NAME}.{name}')
