"""Time tools (no external dependency)."""

from __future__ import annotations

from ..conversion import convert
from ..formatting import build_time_result
from ..schemas import ConvertTimeInput, GetCurrentTimeInput, TimeConversionResult, TimeResult
from ..settings import TimeServerSettings
from ..zones import UTC_NAME, now_in, resolve


def get_current_time(
    payload: GetCurrentTimeInput, settings: TimeServerSettings, _trace_id: str
) -> TimeResult:
    # An omitted zone means UTC, not the server's local zone.
    tz_name = payload.timezone or UTC_NAME
    zone = resolve(tz_name, field="timezone")
    return build_time_result(now_in(zone), tz_name)


def convert_time(
    payload: ConvertTimeInput, settings: TimeServerSettings, _trace_id: str
) -> TimeConversionResult:
    return convert(payload.source_timezone, payload.time, payload.target_timezone)
