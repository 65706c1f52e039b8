"""Rich console handler that renders structured removal events."""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class RemovalRichHandler(RichHandler):
    """Rich handler that shows removal events with an icon and a compact path."""

    _REMOVAL_STYLES: ClassVar[dict[str, tuple[str, str, str]]] = {
        "removal.start": ("🧹", "blue", "Removing "),
        "removal.complete": ("✅", "green", "Removed "),
        "removal.missing": ("ℹ️", "yellow", "Nothing at "),
        "removal.error": ("❌", "red", "Failed to remove "),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Render ``path`` keeping only its last few segments.

        Args:
            path: Absolute or relative path string.

        Returns:
            Text: Path with coloured separators and a leading ellipsis when truncated.
        """
        pure_path = self._to_pure_path(path)
        is_windows = isinstance(pure_path, PureWindowsPath)
        separator = "\\" if is_windows else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]

        display = ""
        if truncated:
            display = "…" + separator
        elif anchor:
            display = anchor.rstrip("\\/") + separator if is_windows else separator
        display += separator.join(body_parts)

        return self._style_path_string(display or ".", separator)

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    @staticmethod
    def _style_path_string(path_string: str, separator: str) -> Text:
        text = Text()
        separator_chars = {separator, "/"}
        for char in path_string:
            if char in separator_chars or char == "…":
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_removal_message(self, record: logging.LogRecord) -> Text | None:
        """Render a record carrying ``removal_event`` extras, else ``None``."""

        event = getattr(record, "removal_event", None)
        if not isinstance(event, str):
            return None

        icon, color, prefix = self._REMOVAL_STYLES.get(str(event), ("ℹ️", "blue", ""))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(prefix)
        target_path = getattr(record, "target_path", None)
        if target_path:
            _ = body.append_text(self._format_path(str(target_path)))

        error_message = getattr(record, "error_message", None)
        if event == "removal.error" and error_message:
            _ = body.append(f" ({error_message})")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        removal_text = self._render_removal_message(record)
        if removal_text is not None:
            return removal_text
        return super().render_message(record, message)


__all__ = ["RemovalRichHandler"]
