"""Logging configuration for pocketledger.

Everything goes to a dated file under the configured log directory; the
console gets a shorter format.
"""

import logging
from datetime import date
from config import Config

LOGGER_NAME = "pocketledger"

_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_CONSOLE_FORMAT = "%(levelname)s - %(message)s"


def _file_handler(config: Config) -> logging.Handler:
    config.log_dir.mkdir(parents=True, exist_ok=True)
    path = config.log_dir / f"{LOGGER_NAME}-{date.today().isoformat()}.log"

    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def _console_handler() -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    return handler


def setup_logging(config: Config) -> logging.Logger:
    """Attach file and console handlers to the application logger.

    Safe to call more than once; previous handlers are closed and replaced.

    Args:
        config: Application configuration containing log settings.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(config.log_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    for handler in (_file_handler(config), _console_handler()):
        handler.setLevel(config.log_level)
        logger.addHandler(handler)

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger."""
    return logging.getLogger(LOGGER_NAME)
