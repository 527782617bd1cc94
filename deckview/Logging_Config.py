# Logging_Config.py
# Description: loguru setup for the deck viewer
#
# Imports
import logging
import sys
from pathlib import Path
from typing import Optional
#
# Third-Party Imports
from loguru import logger
#
# Local Imports
from .config import LoggingSettings
#
#######################################################################################################################
#
# Functions:

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


class InterceptHandler(logging.Handler):
    """Forward standard-library log records (textual, asyncio) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure_logging(settings: LoggingSettings, console: bool = False, level_override: Optional[str] = None) -> None:
    """
    Configure loguru sinks.

    A Textual app owns the terminal, so the stderr sink is only added for
    headless runs; otherwise logs go to the rotating file.

    Args:
        settings: Logging section of the app settings
        console: Also log to stderr
        level_override: Level from the command line, wins over settings
    """
    level = (level_override or settings.log_level).upper()
    logger.remove()  # Remove default handler

    file_error = None
    if settings.log_file:
        log_path = Path(settings.log_file).expanduser()
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            logger.add(
                sink=str(log_path),
                level=level,
                format=LOG_FORMAT,
                rotation=settings.rotation,
                retention=settings.retention,
                compression="zip",
                enqueue=False,
            )
        except OSError as e:
            file_error = e
            console = True

    if console:
        logger.add(sink=sys.stderr, level=level, colorize=True)
    if file_error is not None:
        logger.error(f"Could not open log file {settings.log_file}: {file_error}")

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logger.info(f"Logging configured: level={level}, file={settings.log_file}, console={console}")

#
# End of Logging_Config.py
#######################################################################################################################
