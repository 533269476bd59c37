"""Loguru sink setup."""
import sys

from loguru import logger

from cars_practice.core.config import get_settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str | None = None) -> None:
    """Replace loguru's default sink with one at the configured level."""
    settings = get_settings()
    logger.remove()
    logger.add(
        sys.stderr,
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
        backtrace=settings.debug,
        diagnose=settings.debug,
    )
