"""
Default logging setup applied when plexquant is imported.
"""

import logging

from plexquant.core.logger import DEFAULT_LOG_FORMAT


def initialize_logging(level: int = logging.WARNING, fmt: str = DEFAULT_LOG_FORMAT) -> None:
    """
    Attach a stream handler to the ``plexquant`` logger if it has none.

    Applications can call :func:`plexquant.core.logger.configure_logging`
    afterwards to change the level or add a log file.
    """
    package_logger = logging.getLogger("plexquant")
    if package_logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
