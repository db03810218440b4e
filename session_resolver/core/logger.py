"""Logger configuration for the session resolver.

Level and file sink come from settings (LOG_LEVEL, LOG_FILE) unless the caller
overrides them, e.g. the CLI's --log-debug flag.
"""

import sys
from pathlib import Path

from loguru import logger

from session_resolver.config.settings import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level> | {extra}"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message} | {extra}"


def setup_logger(
    level: str | None = None,
    log_file: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> str:
    """Point loguru at stderr and, when configured, a rotating file.

    Args:
        level: Logging level, defaults to settings.log_level
        log_file: Log file path, defaults to settings.log_file (console only when unset)
        rotation: Log rotation size (e.g., "10 MB", "1 day")
        retention: Log retention period (e.g., "7 days", "1 month")

    Returns:
        The level the sinks were installed with
    """
    level = (level or settings.log_level).upper()
    log_file = log_file or settings.log_file

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            format=FILE_FORMAT,
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
            backtrace=True,
            # Session payloads end up in locals; keep them out of file tracebacks
            diagnose=False,
        )

    logger.bind(level=level, log_file=log_file, debug_mapping=settings.debug_mapping).debug("Logger initialized")
    return level
