"""
Logging setup for the Siege stats bot.

All handlers hang off the ``siegebot`` package logger. Module loggers are its
children, so anything logged anywhere in the package reaches the console and
the daily log file.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from siegebot.config import Config

PACKAGE_LOGGER = 'siegebot'

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def log_file_path(log_dir: Optional[str] = None) -> Path:
    """Path of today's log file"""
    return Path(log_dir or Config.LOG_DIR) / f'siege_bot_{datetime.now().strftime("%Y%m%d")}.log'


def configure_logging(log_dir: Optional[str] = None) -> logging.Logger:
    """
    Attach console and file handlers to the package logger

    Any handlers from an earlier call are closed and replaced, so this can be
    called again after changing the log directory.

    Args:
        log_dir: Directory for the daily log file, defaults to Config.LOG_DIR

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    log_level = logging.DEBUG if Config.DEBUG else logging.INFO
    logger.setLevel(log_level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    path = log_file_path(log_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return logger


def setup_logger(name: str) -> logging.Logger:
    """Get a logger under the package logger, configuring handlers on first use"""
    if not logging.getLogger(PACKAGE_LOGGER).handlers:
        configure_logging()

    # Running ``python -m siegebot.main`` names the entry module __main__
    if name == '__main__':
        name = f'{PACKAGE_LOGGER}.main'
    return logging.getLogger(name)
