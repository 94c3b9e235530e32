"""
Logging Configuration
Sets up the 'fancontroller' logger for the dial application.

The level is taken, in order of precedence, from the `level` argument, the
FANCONTROLLER_LOG_LEVEL environment variable, or the `--debug` command line
flag; INFO otherwise. FANCONTROLLER_LOG_FILE adds a log file when no file is
passed explicitly.
"""
import logging
import os
import sys
from typing import Optional, Sequence, Union

LOG_LEVEL_ENV = "FANCONTROLLER_LOG_LEVEL"
LOG_FILE_ENV = "FANCONTROLLER_LOG_FILE"
DEBUG_FLAG = "--debug"


def resolve_level(level: Union[int, str, None] = None, argv: Optional[Sequence[str]] = None) -> int:
    """Work out the effective log level for the application."""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV) or None
    if level is None:
        args = sys.argv if argv is None else argv
        return logging.DEBUG if DEBUG_FLAG in args else logging.INFO
    if isinstance(level, str):
        named = logging.getLevelName(level.strip().upper())
        # getLevelName() answers unknown names with "Level <name>"
        return named if isinstance(named, int) else logging.INFO
    return level


def setup_logging(
    level: Union[int, str, None] = None,
    log_file: Optional[str] = None,
    argv: Optional[Sequence[str]] = None
) -> logging.Logger:
    """
    Configures the logger for the 'fancontroller' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG or "debug"). Resolved from the
            environment or the command line when omitted.
        log_file: Optional path to save logs to a file.
        argv: Command line to look for the debug flag in. Defaults to sys.argv.

    Returns:
        The configured package logger.
    """
    effective = resolve_level(level, argv)
    log_file = log_file or os.environ.get(LOG_FILE_ENV) or None

    logger = logging.getLogger("fancontroller")
    logger.setLevel(effective)

    # Avoid duplicate output when the application is restarted in-process
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized at %s.", logging.getLevelName(effective))
    return logger
