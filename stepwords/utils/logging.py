"""Logger configuration."""

import sys

from loguru import logger


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Configure the loguru logger for console output.

    Removes any previously registered sinks so repeated calls (tests, nested
    CLI runs) do not duplicate output.

    Args:
        verbose: Emit INFO messages
        debug: Emit DEBUG messages (implies verbose)
    """
    logger.remove()

    if debug:
        level = "DEBUG"
        fmt = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{line} - {message}"
    elif verbose:
        level = "INFO"
        fmt = "{message}"
    else:
        level = "WARNING"
        fmt = "<level>{level}</level>: {message}"

    logger.add(sys.stderr, level=level, format=fmt, colorize=None)
