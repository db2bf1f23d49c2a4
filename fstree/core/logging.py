"""Logging utilities for fstree modules."""

import logging

PACKAGE_LOGGER = 'fstree'


def get_logger(name: str) -> logging.Logger:
    """Get the logger for an fstree module.

    Records propagate to the root logger, so handlers the application
    installs see resolver and storage messages. Until the application
    configures logging, the logger stays at WARNING and resolver debug
    output is suppressed.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger for the module
    """
    logger = logging.getLogger(name)
    logger.propagate = True

    # No application handlers yet
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logger.setLevel(logging.WARNING)

    return logger


def set_package_level(level: int) -> None:
    """Set the level on the package logger and every fstree child logger."""
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)

    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith(PACKAGE_LOGGER + '.') and isinstance(logger, logging.Logger):
            logger.setLevel(level)
            logger.propagate = True
