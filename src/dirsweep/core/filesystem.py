"""
Summary: Idempotent tree removal and directory creation helpers.
Why: Callers need "nothing exists here afterwards" without caring whether it existed before.
"""

from __future__ import annotations

import errno
import logging
import os
import shutil
import stat
from collections.abc import Callable
from pathlib import Path
from typing import Any

from .events import RemovalEvent

logger = logging.getLogger(__name__)

_DOT_NAMES: frozenset[str] = frozenset({".", ".."})


def _ignore_vanished(func: Callable[..., Any], path: str, exc: BaseException) -> None:
    """``shutil.rmtree`` error hook that tolerates entries deleted underneath it."""

    del func
    if isinstance(exc, FileNotFoundError):
        logger.debug("Entry vanished during removal: %s", path)
        return
    raise exc


def _check_removable(raw_path: str) -> None:
    """Reject paths whose final element is ``.`` or ``..`` with ``EINVAL``."""

    tail = os.path.basename(raw_path.rstrip("/" + os.sep))
    if tail in _DOT_NAMES:
        raise OSError(errno.EINVAL, os.strerror(errno.EINVAL), raw_path)


def _remove_entry(target: Path) -> bool:
    """Remove ``target`` and return ``False`` when nothing was there.

    Directories are removed recursively. Anything else, including a symlink
    to a directory, is unlinked so the link target is left alone.
    """

    try:
        mode = os.lstat(target).st_mode
    except FileNotFoundError:
        return False

    if stat.S_ISDIR(mode):
        shutil.rmtree(target, onexc=_ignore_vanished)
    else:
        try:
            target.unlink()
        except FileNotFoundError:
            return False
    return True


def remove_dir_if_exists(path: str | os.PathLike[str]) -> None:
    """Remove whatever exists at ``path``, recursively, and succeed if nothing does.

    Only the "not found" condition is swallowed. ``PermissionError``,
    ``NotADirectoryError``, busy-resource and other ``OSError`` failures are
    logged and re-raised unchanged. A failure partway through a tree leaves
    the already-deleted entries gone.

    Args:
        path: File, directory or symlink to remove. An empty string is a no-op.

    Raises:
        OSError: For any removal failure other than the path not existing,
            including ``EINVAL`` when the final path element is ``.`` or ``..``.
    """

    raw_path = os.fspath(path)
    if not raw_path:
        return

    target = Path(raw_path)
    context = {"target_path": raw_path}

    logger.debug(
        "Removing %s",
        target,
        extra={"removal_event": RemovalEvent.START, **context},
    )
    try:
        _check_removable(raw_path)
        removed = _remove_entry(target)
    except OSError as exc:
        logger.error(
            "Failed to remove %s: %s",
            target,
            exc,
            extra={
                "removal_event": RemovalEvent.ERROR,
                "error_message": exc.strerror or str(exc),
                **context,
            },
        )
        raise

    if not removed:
        logger.debug(
            "Nothing to remove at %s",
            target,
            extra={"removal_event": RemovalEvent.MISSING, **context},
        )
        return

    logger.debug(
        "Removed %s",
        target,
        extra={"removal_event": RemovalEvent.COMPLETE, **context},
    )


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def ensure_parent_directory(path: Path) -> Path:
    """Ensure the parent directory for ``path`` exists and return it."""

    return ensure_directory(path.parent)


__all__ = ["ensure_directory", "ensure_parent_directory", "remove_dir_if_exists"]
