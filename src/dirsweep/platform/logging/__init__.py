"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, setup helper, and Rich handler.
Why: Provide a single canonical import path for logging concerns.
"""

from __future__ import annotations

from .config import logger, setup_logger
from .handlers import RemovalRichHandler

__all__ = [
    "RemovalRichHandler",
    "logger",
    "setup_logger",
]
