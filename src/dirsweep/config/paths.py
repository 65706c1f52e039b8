"""Shared path utilities for configuration and log locations.

Policy:
- Config: read only from the file named by ``DIRSWEEP_CONFIG``. A library
  must not pick up whatever ``config/config.toml`` its host project ships.
- Logs: repository-root ``<repo_root>/logs/dirsweep.log`` when file logging
  is requested without an explicit path.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


ENV_CONFIG_PATH: Final[str] = "DIRSWEEP_CONFIG"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a path honoring explicit and environment overrides, in that order."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = (mapping.get(env_var) or "").strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    return default_factory().expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up from ``start``.

    Looks for ``pyproject.toml`` or ``.git`` and falls back to the current
    working directory when neither is found.
    """
    here = (start or Path(__file__).resolve()).parent
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return Path.cwd()


def default_config_path(env: Mapping[str, str] | None = None) -> Path | None:
    """Get the TOML config file named by ``DIRSWEEP_CONFIG``, or ``None`` when unset."""

    mapping = env if env is not None else os.environ
    if not (mapping.get(ENV_CONFIG_PATH) or "").strip():
        return None
    return resolve_overridable_path(
        explicit_path=None,
        env=mapping,
        env_var=ENV_CONFIG_PATH,
        default_factory=Path.cwd,
    )


def default_log_dir() -> Path:
    """Get the default directory for log files."""

    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    """Get the default log file path."""

    return (default_log_dir() / "dirsweep.log").resolve()


__all__ = [
    "ENV_CONFIG_PATH",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
