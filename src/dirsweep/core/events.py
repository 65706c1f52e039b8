"""Where: src/dirsweep/core/events.py
What: Structured event identifiers attached to removal log records.
Why: Let log handlers style removal output without parsing message text.
"""

from __future__ import annotations

from enum import StrEnum


class RemovalEvent(StrEnum):
    """Structured event identifiers for tree removal logs."""

    START = "removal.start"
    COMPLETE = "removal.complete"
    MISSING = "removal.missing"
    ERROR = "removal.error"


__all__ = ["RemovalEvent"]
