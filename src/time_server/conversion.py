"""Conversion of clock times and timestamps between zones."""

from __future__ import annotations

import re
from datetime import datetime, timezone

from .errors import EmptyInput, InvalidTimeFormat, MissingField
from .formatting import build_time_result, format_offset_difference
from .schemas import TimeConversionResult
from .zones import UTC_NAME, now_in, resolve

_CLOCK_RE = re.compile(r"(\d{1,2}):(\d{2})", re.ASCII)
_RFC3339_RE = re.compile(
    r"\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})",
    re.ASCII,
)
NAIVE_LAYOUT = "%Y-%m-%d %H:%M:%S"


def parse_clock(time_str: str) -> tuple[int, int]:
    """Parse a 24-hour ``HH:MM`` (or ``H:MM``) string into ``(hour, minute)``."""
    match = _CLOCK_RE.fullmatch(time_str)
    if not match:
        raise InvalidTimeFormat(time_str)
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise InvalidTimeFormat(time_str)
    return hour, minute


def convert(
    source_tz: str,
    time_str: str,
    target_tz: str,
    now: datetime | None = None,
) -> TimeConversionResult:
    """Convert ``time_str`` on today's date in ``source_tz`` into ``target_tz``.

    "Today" is the current date in the source zone. ``now`` overrides the
    reference instant used to find it.
    """
    for field, value in (
        ("source_timezone", source_tz),
        ("time", time_str),
        ("target_timezone", target_tz),
    ):
        if not value:
            raise MissingField(field)

    hour, minute = parse_clock(time_str)

    source_zone = resolve(source_tz, field="source_timezone")
    today = now_in(source_zone, now)
    civil = today.replace(hour=hour, minute=minute, second=0, microsecond=0, fold=0)
    # A wall time inside a DST gap does not exist; round-trip through UTC so
    # the result names the instant actually reached.
    source_time = civil.astimezone(timezone.utc).astimezone(source_zone)

    target_zone = resolve(target_tz, field="target_timezone")
    target_time = source_time.astimezone(target_zone)

    difference = format_offset_difference(
        int(source_time.utcoffset().total_seconds()),
        int(target_time.utcoffset().total_seconds()),
    )
    return TimeConversionResult(
        source=build_time_result(source_time, source_tz),
        target=build_time_result(target_time, target_tz),
        time_difference=difference,
    )


def convert_time_string(value: str, from_tz: str, to_tz: str) -> datetime:
    """Reproject a timestamp string into ``to_tz``.

    Accepts RFC 3339 with an explicit offset (or ``Z``), or a naive
    ``YYYY-MM-DD HH:MM:SS`` read in ``from_tz`` (UTC when empty).
    """
    if not value:
        raise EmptyInput()

    return _parse_timestamp(value, from_tz).astimezone(resolve(to_tz, field="target_timezone"))


def _parse_timestamp(value: str, from_tz: str) -> datetime:
    expected = "RFC 3339 or YYYY-MM-DD HH:MM:SS"
    # strptime also matches non-ASCII digits.
    if not value.isascii():
        raise InvalidTimeFormat(value, expected=expected)
    if _RFC3339_RE.fullmatch(value):
        try:
            return datetime.fromisoformat(value.upper().replace("Z", "+00:00"))
        except ValueError as exc:
            raise InvalidTimeFormat(value, expected=expected) from exc

    try:
        naive = datetime.strptime(value, NAIVE_LAYOUT)
    except ValueError as exc:
        raise InvalidTimeFormat(value, expected=expected) from exc
    return naive.replace(tzinfo=resolve(from_tz or UTC_NAME, field="source_timezone"))
