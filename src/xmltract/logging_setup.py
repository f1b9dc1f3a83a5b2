"""
Logging configuration for the command-line tool.

Library modules only ever call logging.getLogger(__name__); no handler is
installed on import. The CLI calls setup_logging() once, which attaches a
single stderr handler to the package logger (not the root logger).
"""

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = 'xmltract'
LOG_FORMAT = '%(levelname)s %(asctime)s: %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def verbosity_to_level(quiet: bool, verbose: bool, default: str = 'WARNING') -> str:
    """
    Map -q / -v flags to a level name.

    -q wins over -v when both are given.

    Example:
        >>> verbosity_to_level(quiet=True, verbose=False)
        'ERROR'
        >>> verbosity_to_level(quiet=False, verbose=True)
        'INFO'
    """
    if quiet:
        return 'ERROR'
    if verbose:
        return 'INFO'
    return default


def setup_logging(level: str = 'WARNING', stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Attach one stream handler to the package logger.

    Calling it again replaces the previous handler, so repeated CLI
    invocations in one process (tests) never write to a stale stream.

    Args:
        level: Logging level name
        stream: Destination (default: sys.stderr at call time)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False

    return logger
