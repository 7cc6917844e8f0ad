# algotree/log.py

import logging
import sys
from pathlib import Path
from typing import Optional

__all__ = ["get_logger"]


def get_logger(name: str, log_level: str = "WARNING", log_file: Optional[Path] = None,
               format_string: Optional[str] = None) -> logging.Logger:
    """
    Get or create a logger with handlers attached.

    Library modules only call logging.getLogger(__name__); the CLI calls this
    once on the "algotree" logger so every module below it shares the handlers.

    Args:
        name: Logger name
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        log_file: Optional path for a second, file based handler
        format_string: Optional custom format string
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, log_level.upper()))

    # Prevent adding duplicate handlers
    if logger.handlers:
        return logger

    if format_string is None:
        format_string = '%(asctime)s [%(name)s] [%(levelname)s]: %(message)s'

    formatter = logging.Formatter(format_string)

    # stderr, so JSON on stdout stays parseable
    console_handler = logging.StreamHandler(stream=sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
