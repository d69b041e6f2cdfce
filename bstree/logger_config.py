"""
Centralized logging setup for the tree tools.

Library code only calls ``logging.getLogger(__name__)``; the CLI entry points
call ``configure_logger`` once to decide where those records end up.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logger(
    name: Optional[str] = "bstree",
    log_dir: str = "./logs",
    log_file: str = "bstree.log",
    level: int = logging.WARNING,
    max_bytes: int = 1024 * 1024,
    backup_count: int = 3,
    output: str = "console",
) -> logging.Logger:
    """
    Configures and returns a logger instance.

    Args:
        name: Logger name; None configures the root logger.
        log_dir: Directory for the rotating log file.
        log_file: File name inside log_dir.
        level: Level applied to the logger and its handlers.
        max_bytes: Size at which the log file is rotated.
        backup_count: Rotated files kept.
        output: "console", "file" or "both".

    Returns:
        The configured logger. Calling again with the same name replaces the
        handlers from the previous call, so a new level or output takes
        effect without duplicating records.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if output in {"file", "both"}:
        try:
            os.makedirs(log_dir, exist_ok=True)
            file_handler = RotatingFileHandler(
                os.path.join(log_dir, log_file), maxBytes=max_bytes, backupCount=backup_count
            )
        except OSError as e:
            raise RuntimeError(f"Failed to create or access log directory {log_dir!r}: {e}") from e
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if output in {"console", "both"}:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger
