"""Formatting helpers shared by presentation layers."""

from __future__ import annotations

from datetime import datetime, tzinfo
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pyttr.models.snapshot import FeedSnapshot


def format_clock_time(timestamp: int, tz: tzinfo | None = None) -> str:
    """Format an epoch timestamp as ``HH:MM`` in *tz* (local time when ``None``)."""
    return datetime.fromtimestamp(timestamp, tz=tz).strftime("%H:%M")


def difficulty_to_stars(difficulty: int) -> int:
    """Field office difficulty is 0-based; the game shows it as 1-5 stars."""
    return difficulty + 1


def format_updated(snapshot: FeedSnapshot[Any, Any], tz: tzinfo | None = None) -> str | None:
    """``"Updated HH:MM"`` for a loaded snapshot, ``None`` while still loading."""
    if snapshot.last_updated <= 0:
        return None
    return f"Updated {format_clock_time(snapshot.last_updated, tz)}"
