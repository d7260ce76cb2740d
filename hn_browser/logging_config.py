"""
Logging configuration for HN Browser.

The browser owns the terminal while it runs, so records only reach stderr
when a caller asks for console output explicitly.
"""

import logging
import sys
import time
from functools import wraps
from typing import List, Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _build_handlers(log_file: Optional[str], console: bool) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handlers: List[logging.Handler] = []

    if log_file:
        handlers.append(logging.FileHandler(log_file))
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    for handler in handlers:
        handler.setFormatter(formatter)

    # Keeps logging's last-resort stderr handler from firing
    return handlers or [logging.NullHandler()]


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None, console: bool = True) -> None:
    """
    Setup logging configuration for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path
        console: Also log to stderr. The terminal UI passes False, since
            anything written to stderr lands on top of the screen.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        handlers=_build_handlers(log_file, console),
        force=True  # Override any existing configuration
    )

    # Set specific logger levels for external libraries
    logging.getLogger("requests").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name."""
    return logging.getLogger(name)


def log_performance(logger: logging.Logger, operation: str):
    """Decorator to log performance timing for functions."""
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.monotonic()
            logger.debug(f"Starting {operation}")

            try:
                result = func(*args, **kwargs)
                duration = time.monotonic() - start_time
                logger.info(f"Completed {operation} in {duration:.2f}s")
                return result
            except Exception as e:
                duration = time.monotonic() - start_time
                logger.error(f"Failed {operation} after {duration:.2f}s: {e}")
                raise
        return wrapper
    return decorator
