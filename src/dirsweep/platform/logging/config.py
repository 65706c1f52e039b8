"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Configure the shared ``dirsweep`` logger from the loaded Config.
Why: Keep handler rendering separate from setup so configuration stays concise.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Final

from rich.console import Console

from dirsweep.config.config import config as app_config
from dirsweep.core.filesystem import ensure_parent_directory

from .handlers import RemovalRichHandler

LOGGER_NAME: Final[str] = "dirsweep"


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """Set up and configure the package logger.

    Args:
        log_file: Path to a rotating log file. ``None`` keeps console output only.
        console_level: Level for console output. Defaults to WARNING.
        file_level: Level for file output. Defaults to DEBUG.

    Returns:
        logging.Logger: The configured ``dirsweep`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    console = Console(stderr=True, soft_wrap=True)
    console_handler = RemovalRichHandler(console=console)
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        resolved_log_file = Path(log_file).expanduser().resolve()
        _ = ensure_parent_directory(resolved_log_file)

        file_handler = logging.handlers.RotatingFileHandler(
            resolved_log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


logger: Final[logging.Logger] = setup_logger(
    log_file=app_config.resolved_log_file,
    console_level=app_config.console_level,
)


__all__ = ["LOGGER_NAME", "logger", "setup_logger"]
