"""Configuration management for dirsweep."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from dirsweep.config.paths import default_config_path, default_log_file


def _path_field(default: Path | None = None) -> Any:
    """Create a dataclass field flagged for ``str`` to ``Path`` conversion."""
    return field(default=default, metadata={"path": True})


def _parse_level(value: object, *, source: Path) -> int:
    """Translate a level name such as ``"INFO"`` into its numeric value."""

    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        level = logging.getLevelNamesMapping().get(value.strip().upper())
        if level is not None:
            return level
    raise ValueError(f"Invalid console_level {value!r} in {source}")


@dataclass
class Config:
    """Runtime configuration for the shared logger."""

    # Explicit log file; relative paths resolve against the config file folder
    log_file: Path | None = _path_field()

    # Write to the default logs/ folder when no explicit log_file is set
    file_logging: bool = False

    console_level: int = logging.WARNING

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        from dataclasses import fields

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    @property
    def resolved_log_file(self) -> Path | None:
        """Return the log file the logger should write to, if any."""

        if self.log_file is not None:
            return self.log_file
        if self.file_logging:
            return default_log_file()
        return None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, source: Path) -> "Config":
        """Build a config from parsed TOML data, ignoring unknown keys."""

        config = cls()
        if "log_file" in data:
            raw = data["log_file"]
            if not isinstance(raw, str):
                raise ValueError(f"log_file must be a string in {source}")
            log_file = Path(raw).expanduser() if raw else None
            if log_file is not None and not log_file.is_absolute():
                log_file = (source.parent / log_file).resolve()
            config.log_file = log_file
        if "file_logging" in data:
            raw_flag = data["file_logging"]
            if not isinstance(raw_flag, bool):
                raise ValueError(f"file_logging must be a boolean in {source}")
            config.file_logging = raw_flag
        if "console_level" in data:
            config.console_level = _parse_level(data["console_level"], source=source)
        return config

    @classmethod
    def load(
        cls,
        path: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> "Config":
        """Load configuration from TOML, returning defaults when the file is absent.

        Args:
            path: Explicit config file. Defaults to ``default_config_path(env)``;
                without an explicit path or ``DIRSWEEP_CONFIG`` nothing is read.
            env: Environment mapping used for ``DIRSWEEP_CONFIG`` lookup.

        Returns:
            Config: Loaded configuration.

        Raises:
            ValueError: If the file is not valid TOML or holds invalid values.
        """
        source = path if path is not None else default_config_path(env)
        if source is None or not source.is_file():
            return cls()

        try:
            with open(source, "rb") as handle:
                data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ValueError(f"Invalid TOML in {source}: {exc}") from exc

        return cls.from_mapping(data, source=source)


config = Config.load()


__all__ = ["Config", "config"]
