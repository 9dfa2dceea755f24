import re
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from time_server.formatting import build_time_result, format_instant, format_offset_difference

DATETIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{2}:\d{2}$")
DIFFERENCE_RE = re.compile(r"^[+-]\d+\.\d+h$")


@pytest.mark.parametrize(
    ("source", "target", "expected"),
    [
        (0, 3600, "+1.0h"),
        (3600, 0, "-1.0h"),
        (0, 0, "+0.0h"),
        (0, 20700, "+5.75h"),
        (20700, 0, "-5.75h"),
        (0, 1800, "+0.5h"),
        (0, -12600, "-3.5h"),
        (-18000, 32400, "+14.0h"),
    ],
)
def test_format_offset_difference(source, target, expected):
    assert format_offset_difference(source, target) == expected


def test_format_offset_difference_near_whole_hour_keeps_decimal():
    # 1h 0m 1s rounds onto a whole hour at two decimals
    result = format_offset_difference(0, 3601)
    assert result == "+1.0h"
    assert DIFFERENCE_RE.match(result)


def test_format_instant_drops_fraction_and_keeps_offset():
    instant = datetime(2025, 7, 15, 12, 30, 45, 123456, tzinfo=ZoneInfo("America/New_York"))
    assert format_instant(instant) == "2025-07-15T12:30:45-04:00"


def test_format_instant_zero_offset_is_numeric():
    instant = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert format_instant(instant) == "2024-01-01T00:00:00+00:00"
    assert format_instant(instant.astimezone(ZoneInfo("UTC"))) == "2024-01-01T00:00:00+00:00"


def test_format_instant_fractional_offset():
    instant = datetime(2024, 1, 1, 5, 45, tzinfo=ZoneInfo("Asia/Kathmandu"))
    assert format_instant(instant) == "2024-01-01T05:45:00+05:45"


def test_format_instant_truncates_offset_seconds():
    tz = timezone(-timedelta(hours=5, minutes=30, seconds=30))
    instant = datetime(1900, 1, 1, 8, 0, tzinfo=tz)
    assert format_instant(instant) == "1900-01-01T08:00:00-05:30"


def test_format_instant_sub_minute_negative_offset():
    tz = timezone(-timedelta(seconds=30))
    instant = datetime(1900, 1, 1, 8, 0, tzinfo=tz)
    assert format_instant(instant) == "1900-01-01T08:00:00+00:00"


@pytest.mark.parametrize(
    "zone",
    ["UTC", "America/New_York", "Europe/Paris", "Asia/Tokyo", "Australia/Sydney", "Asia/Kathmandu"],
)
def test_format_instant_shape(zone):
    instant = datetime.now(timezone.utc).astimezone(ZoneInfo(zone))
    assert DATETIME_RE.match(format_instant(instant))


def test_build_time_result():
    instant = datetime(2025, 7, 15, 12, 30, 45, tzinfo=ZoneInfo("America/New_York"))
    result = build_time_result(instant, "America/New_York")
    assert result.timezone == "America/New_York"
    assert result.day_of_week == "Tuesday"
    assert result.datetime == "2025-07-15T12:30:45-04:00"
    # July in New York is DST
    assert result.is_dst is True


def test_time_result_is_immutable():
    instant = datetime(2025, 1, 1, tzinfo=ZoneInfo("UTC"))
    result = build_time_result(instant, "UTC")
    with pytest.raises(ValidationError):
        result.timezone = "Europe/Paris"
