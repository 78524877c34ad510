"""Datetime formatting utilities for note names and listings."""

from __future__ import annotations

from datetime import datetime

# Note file stamps use the local clock at second resolution.
_NOTE_STAMP_FORMAT = "%Y-%m-%d_%H%M%S"
_DISPLAY_FORMAT = "%Y-%m-%d %H:%M"


def note_timestamp(dt: datetime | None = None) -> str:
    """Return ``dt`` (default: now, local time) as ``YYYY-MM-DD_HHMMSS``."""

    moment = dt if dt is not None else datetime.now()
    return moment.strftime(_NOTE_STAMP_FORMAT)


def to_user_friendly_local(timestamp: float) -> str:
    """Format a POSIX timestamp in local time, e.g. ``2025-01-31 09:15``."""

    return datetime.fromtimestamp(timestamp).strftime(_DISPLAY_FORMAT)
