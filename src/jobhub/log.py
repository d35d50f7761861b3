"""Logging setup for the jobhub package."""

import logging

from jobhub.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Return a logger for a jobhub module.

    The first call attaches a console handler to the ``jobhub`` package
    logger at ``settings.log_level``; module loggers propagate to it.
    """
    package_logger = logging.getLogger("jobhub")
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
        package_logger.setLevel(settings.log_level.upper())
    return logging.getLogger(name)
