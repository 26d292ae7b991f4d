import sys

from loguru import logger

LOG_FORMAT = "<level>[{level}]</level> {message}"


def configure_logging(level: str = "WARNING", sink=sys.stderr) -> int:
    """
    Route loguru output to a single sink.

    Result lines go to stdout, so the log sink defaults to stderr to keep the
    two streams apart.

    Returns:
        The loguru handler id of the installed sink
    """
    logger.remove()
    return logger.add(sink, level=level.upper(), format=LOG_FORMAT)
