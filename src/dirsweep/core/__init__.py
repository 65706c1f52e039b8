"""Core filesystem helpers for dirsweep."""

from .events import RemovalEvent
from .filesystem import ensure_directory, ensure_parent_directory, remove_dir_if_exists

__all__ = [
    "RemovalEvent",
    "ensure_directory",
    "ensure_parent_directory",
    "remove_dir_if_exists",
]
