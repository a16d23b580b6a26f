import sys

from loguru import logger

import config

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def setup_logging(level: str = None) -> None:
    """Replace loguru's default sink with a single stderr sink."""
    logger.remove()
    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=level or config.LOG_LEVEL,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )
