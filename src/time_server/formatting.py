"""Rendering of instants and offset differences."""

from __future__ import annotations

from datetime import datetime

from .schemas import TimeResult
from .zones import is_dst

# Independent of the process locale.
WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def format_instant(instant: datetime) -> str:
    """Render ``YYYY-MM-DDTHH:MM:SS+HH:MM``.

    Always second precision and an explicit numeric offset; a zero offset is
    ``+00:00`` and never ``Z``. Offsets carrying seconds are truncated to
    whole minutes.
    """
    civil = instant.replace(tzinfo=None, microsecond=0).isoformat(timespec="seconds")
    offset = instant.utcoffset()
    total = int(offset.total_seconds()) if offset is not None else 0
    # Truncate toward zero first so -30s renders as +00:00.
    total_minutes = int(total / 60)
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{civil}{sign}{hours:02d}:{minutes:02d}"


def format_offset_difference(offset_source_seconds: int, offset_target_seconds: int) -> str:
    """Signed hour difference between two UTC offsets, e.g. ``+1.0h`` or ``-5.75h``."""
    hours = (offset_target_seconds - offset_source_seconds) / 3600
    if hours.is_integer():
        return f"{hours:+.1f}h"

    text = f"{hours:+.2f}".rstrip("0").rstrip(".")
    if "." not in text:
        # Rounded onto a whole hour; keep the one-decimal form.
        text += ".0"
    return f"{text}h"


def build_time_result(instant: datetime, timezone_name: str) -> TimeResult:
    return TimeResult(
        timezone=timezone_name,
        datetime=format_instant(instant),
        day_of_week=WEEKDAYS[instant.weekday()],
        is_dst=is_dst(instant),
    )
