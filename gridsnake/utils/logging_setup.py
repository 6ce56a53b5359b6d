"""
Logging setup driven by the ``logging`` section of the config.
"""
import logging
from pathlib import Path
from typing import Optional

from .config_loader import LoggingConfig


LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Configure the package logger.

    Adds a console handler and, if ``log_file`` is set, a file handler.
    Calling it again replaces the handlers installed by a previous call.
    Records are not passed on to the root logger.

    Args:
        config: Logging settings (defaults to INFO on the console)

    Returns:
        The configured ``gridsnake`` logger
    """
    if config is None:
        config = LoggingConfig()

    logger = logging.getLogger("gridsnake")
    logger.setLevel(config.level.upper())
    # Records stop here so a configured root logger does not print them twice
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    logger.addHandler(console)

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
