"""
Logging configuration for statestore commands.

Verbosity maps to levels the way the CLI documents it:
no flag WARNING, -v INFO, -vv DEBUG, -vvv TRACE (includes botocore wire logs).

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import logging
import sys

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Third-party loggers that only speak up at TRACE
_NOISY_LOGGERS = ("boto3", "botocore", "urllib3")


def _level_for(verbose: int) -> int:
    if verbose <= 0:
        return logging.WARNING
    if verbose == 1:
        return logging.INFO
    if verbose == 2:
        return logging.DEBUG
    return TRACE


def setup_logging(verbose: int = 0) -> None:
    """
    Configure root logging for the given verbosity count.

    Args:
        verbose: Number of -v flags passed on the command line
    """
    level = _level_for(verbose)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)

    library_level = logging.DEBUG if level <= TRACE else logging.WARNING
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Standard library logger
    """
    return logging.getLogger(name)
