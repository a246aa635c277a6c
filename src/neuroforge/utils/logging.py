"""
Logging Configuration Module

Logging setup for applications using the neuroforge package. Library modules
only create their loggers with logging.getLogger(__name__); nothing is
printed unless the application configures logging, e.g. with setup_logging().
"""

import logging
import sys


def setup_logging(level        : int        = logging.INFO,
                  log_file     : str | None = None,
                  format_string: str | None = None) -> None:
    """
    Set up logging for the neuroforge package.

    Parameters:
        level:         logging level (default: INFO)
        log_file:      optional file receiving the log records as well
        format_string: custom format of the log messages
    """
    if format_string is None:
        format_string = "[%(asctime)s] %(levelname)s [%(name)s]: %(message)s"

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level, format=format_string, handlers=handlers, force=True)

    logging.getLogger('neuroforge').setLevel(level)
