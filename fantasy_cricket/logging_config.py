"""Logging setup for the fantasy cricket service.

Everything logs under the ``fantasy_cricket`` logger tree. HTTP access lines
go to ``fantasy_cricket.server.access``, which stays at WARNING unless the
access log is switched on, so request noise can be toggled without touching
the level of the service logs.
"""

import logging
import sys
from pathlib import Path

PACKAGE_LOGGER = 'fantasy_cricket'
ACCESS_LOGGER = f'{PACKAGE_LOGGER}.server.access'
LOG_FILE_NAME = 'fantasy_cricket.log'

FILE_FORMAT = '%(asctime)s %(levelname)-8s [%(threadName)s] %(name)s: %(message)s'
CONSOLE_FORMAT = '%(levelname)s %(name)s: %(message)s'


def resolve_level(level: int | str) -> int:
    """Turn a level name such as 'debug' into its numeric value."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f'Unknown log level: {level!r}')
    return resolved


def setup_logging(
    log_dir: Path | None = None,
    level: int | str = logging.INFO,
    log_to_file: bool = True,
    log_to_console: bool = True,
    access_log: bool = False,
) -> logging.Logger:
    """
    Configure the service's logger tree.

    Args:
        log_dir: Directory for fantasy_cricket.log (default: ./logs)
        level: Level or level name for the service logs, any case
        log_to_file: Append to the log file
        log_to_console: Log to stderr
        access_log: Emit one INFO line per HTTP request

    Returns:
        The package logger

    Raises:
        ValueError: If the level name is unknown
    """
    level = resolve_level(level)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_to_file:
        log_dir = Path('logs') if log_dir is None else Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / LOG_FILE_NAME, encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console_handler)

    logging.getLogger(ACCESS_LOGGER).setLevel(logging.INFO if access_log else logging.WARNING)

    return logger


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Get a logger inside the package tree; 'store' becomes 'fantasy_cricket.store'."""
    if name != PACKAGE_LOGGER and not name.startswith(f'{PACKAGE_LOGGER}.'):
        name = f'{PACKAGE_LOGGER}.{name}'
    return logging.getLogger(name)
