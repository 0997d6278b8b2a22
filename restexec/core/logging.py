"""
Logger lookup for restexec.

Package loggers:
- ``restexec.executor``: request dispatch (DEBUG) and translated errors (WARNING)
- ``restexec.client.requests`` / ``restexec.client.aiohttp``: adapter traffic
  (DEBUG) and network failures (ERROR)
"""

import logging


def get_logger(name: str) -> logging.Logger:
    """Return a propagating restexec logger.

    While the root logger has no handlers, the logger is held at WARNING so
    an unconfigured application only sees translated errors. Once
    basicConfig() or setup_logging() has run, the configured level applies.

    Args:
        name: One of the package logger names, e.g. 'restexec.executor'

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True

    if not logging.getLogger().handlers:
        logger.setLevel(logging.WARNING)

    return logger
