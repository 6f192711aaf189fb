"""
Logging helpers for the plexquant package.

This module provides named loggers, a configuration entry point and small
decorators used to trace long-running pipeline steps.
"""

import functools
import logging
import time
from pathlib import Path
from typing import Callable, Optional, Union

DEFAULT_LOG_FORMAT = "%(asctime)s [%(funcName)s] - %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Parameters
    ----------
    name : str
        Dotted logger name, usually ``plexquant.<module>``.

    Returns
    -------
    logging.Logger
        The named logger.
    """
    return logging.getLogger(name)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    fmt: str = DEFAULT_LOG_FORMAT,
) -> logging.Logger:
    """
    Configure the ``plexquant`` root logger.

    Parameters
    ----------
    level : int or str
        Logging level, either a ``logging`` constant or its name.
    log_file : str or Path, optional
        If given, log records are also written to this file.
    fmt : str
        Format string for all handlers.

    Returns
    -------
    logging.Logger
        The configured package logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    package_logger = logging.getLogger("plexquant")
    package_logger.setLevel(level)

    formatter = logging.Formatter(fmt)
    for handler in package_logger.handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)

    if log_file:
        log_file = Path(log_file)
        if not log_file.parent.exists():
            log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    return package_logger


def log_execution_time(logger: logging.Logger, level: int = logging.INFO) -> Callable:
    """
    Decorator that logs how long the wrapped function took.

    Parameters
    ----------
    logger : logging.Logger
        Logger receiving the timing record.
    level : int
        Level used for the timing record.
    """

    def decorator(fn: Callable) -> Callable:
        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                return fn(*args, **kwargs)
            finally:
                elapsed = time.time() - start_time
                logger.log(level, "%s finished in %.2f seconds", fn.__qualname__, elapsed)

        return wrapper

    return decorator
