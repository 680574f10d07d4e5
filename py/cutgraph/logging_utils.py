import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "WARNING",
    log_format: Optional[str] = None,
    date_format: Optional[str] = None,
) -> logging.Logger:
    """
    Setup logging for the cutgraph package.

    Args:
        level: The logging level to use. Defaults to "WARNING".
        log_format: Custom log format string. If None, uses default format.
        date_format: Custom date format string. If None, uses default format.

    Returns:
        The configured package logger.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        fmt=log_format or DEFAULT_FORMAT,
        datefmt=date_format or DEFAULT_DATE_FORMAT,
    ))

    logger = logging.getLogger("cutgraph")
    logger.setLevel(level.upper())
    # Calling twice must not duplicate output
    for old in list(logger.handlers):
        logger.removeHandler(old)
    logger.addHandler(handler)

    # Keep package records off the root logger
    logger.propagate = False
    return logger
