"""
Logging setup for feed-catcher.

Messages go to stdout so they interleave with the progress output of a
run. A log file given with --log-file (or config.LOG_FILE) receives the
same records with source locations.
"""

import logging
import logging.config
import sys
from pathlib import Path
from typing import Optional

from feed_catcher import config

_logging_configured = False

CONSOLE_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(pathname)s:%(lineno)d - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _file_handler(log_file: str, level: int) -> Optional[dict]:
    """Handler settings for log_file, or None if its folder cannot be created."""
    try:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        print(f"Warning: Could not set up file logging to {log_file}: {e}", file=sys.stderr)
        return None

    return {
        'class': 'logging.FileHandler',
        'level': level,
        'formatter': 'file',
        'filename': str(log_file),
        'mode': 'a',
        'encoding': 'utf-8',
    }


def _get_logging_config(level: Optional[str] = None, log_file: Optional[str] = None) -> dict:
    """
    Build the dictConfig() settings.

    Parameters:
    level: Level name, default config.LOG_LEVEL
    log_file: Log file path, default config.LOG_FILE

    Returns:
    dict: Logging configuration for dictConfig()
    """
    log_level = getattr(logging, (level or config.LOG_LEVEL).upper(), logging.INFO)
    log_file = log_file or config.LOG_FILE

    handlers = {
        'console': {
            'class': 'logging.StreamHandler',
            'level': log_level,
            'formatter': 'console',
            'stream': sys.stdout,
        }
    }
    if log_file:
        file_handler = _file_handler(log_file, log_level)
        if file_handler:
            handlers['file'] = file_handler

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'console': {'format': CONSOLE_FORMAT, 'datefmt': DATE_FORMAT},
            'file': {'format': FILE_FORMAT, 'datefmt': DATE_FORMAT},
        },
        'handlers': handlers,
        'loggers': {
            'feed_catcher': {
                'level': log_level,
                'handlers': list(handlers),
                'propagate': False,
            }
        },
    }


def configure_logging(level: Optional[str] = None, log_file: Optional[str] = None, force: bool = False) -> None:
    """
    Configure the feed_catcher logger.

    Only the first call takes effect unless force is True; the CLI forces
    a reconfiguration to apply --log-level and --log-file.
    """
    global _logging_configured

    if _logging_configured and not force:
        return

    logging.config.dictConfig(_get_logging_config(level, log_file))
    _logging_configured = True


def setup_logging(logger_name: Optional[str] = None) -> logging.Logger:
    """
    Return a logger below the feed_catcher namespace.

    Example:
        >>> setup_logging('download').name
        'feed_catcher.download'
    """
    configure_logging()

    if not logger_name:
        return logging.getLogger('feed_catcher')
    if not logger_name.startswith('feed_catcher'):
        logger_name = f'feed_catcher.{logger_name}'
    return logging.getLogger(logger_name)
