"""
Logging configuration.

Library modules only create loggers (logging.getLogger(__name__)); handlers
are attached here, by the CLI or by an application embedding toolprobe.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from rich.logging import RichHandler

LOGGER_NAME = "toolprobe"


def setup_logging(level: Union[str, int] = "WARNING", log_file: Optional[Path] = None) -> logging.Logger:
    """
    Configure the toolprobe logger.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or number
        log_file: Optional file that receives a plain-text copy of the log

    Returns:
        logging.Logger: The configured "toolprobe" logger

    Note:
        Calling this again replaces previously installed handlers.
    """
    if isinstance(level, str):
        level_number = logging.getLevelName(level.upper())
        if not isinstance(level_number, int):
            raise ValueError(f"Unknown log level: {level}")
        level = level_number

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(show_path=False, rich_tracebacks=True)
    console_handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        )
        logger.addHandler(file_handler)

    return logger
