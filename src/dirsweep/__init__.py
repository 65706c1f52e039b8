# Where: dirsweep.__init__
# What: Expose the removal helper and bootstrap the shared logger on import.
# Why: ``from dirsweep import remove_dir_if_exists`` is the whole public surface.

"""Idempotent removal of filesystem trees."""

from dirsweep.platform.logging import logger
from dirsweep.core.filesystem import remove_dir_if_exists

__all__ = ["logger", "remove_dir_if_exists"]
