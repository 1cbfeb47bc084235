import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _handler(handler: logging.Handler, level: int, format_string: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_string))
    return handler


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
    force: bool = False,
) -> logging.Logger:
    """
    Set up logging for the ``linkscraper`` logger hierarchy.

    Library modules only create loggers; handlers are attached here, which
    the CLI calls once per run.

    Args:
        level: Logging level name; unknown names fall back to WARNING
        log_file: Optional file that receives the same records
        format_string: Optional custom format string for log messages
        force: If True, replace handlers installed by an earlier call

    Returns:
        The configured ``linkscraper`` logger
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
    fmt = format_string or DEFAULT_FORMAT

    logger = logging.getLogger("linkscraper")
    logger.setLevel(numeric_level)

    if force or not logger.handlers:
        for old in logger.handlers:
            old.close()
        logger.handlers.clear()

        # stdout is reserved for link output
        logger.addHandler(_handler(logging.StreamHandler(sys.stderr), numeric_level, fmt))
        if log_file:
            logger.addHandler(_handler(logging.FileHandler(log_file), numeric_level, fmt))

    logger.propagate = False
    return logger
