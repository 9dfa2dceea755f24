"""Timezone resolution on top of the IANA database.

``zoneinfo`` keeps a process-wide cache of loaded zones, so lookups here are
read-only after the first load and safe to share between requests.
"""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import UnknownTimezone
from .logging import get_logger

logger = get_logger("zones")

UTC_NAME = "UTC"

# Names some hosts report when no real IANA zone is configured.
_GENERIC_ZONE_LABELS = {"", "local", "localtime"}
_ZONEINFO_MARKER = "zoneinfo/"


def resolve(name: str, field: str | None = None) -> ZoneInfo:
    """Load an IANA zone, raising ``UnknownTimezone`` for unknown or malformed names."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, TypeError, OSError) as exc:
        # Directory names such as "America" surface as IsADirectoryError.
        raise UnknownTimezone(name, field=field) from exc


def now_in(zone: ZoneInfo, now: datetime | None = None) -> datetime:
    reference = now or datetime.now(timezone.utc)
    if reference.tzinfo is None:
        reference = reference.replace(tzinfo=timezone.utc)
    return reference.astimezone(zone)


def is_dst(instant: datetime, zone: ZoneInfo | None = None) -> bool:
    """Report whether ``instant`` is observed under daylight saving time.

    The standard offset is taken as the smaller of the offsets in force on
    January 1 and July 1 of the instant's year, which covers both
    hemispheres. Zones with more than one transition pair a year are not
    modelled.
    """
    zone = zone or instant.tzinfo
    if zone is None:
        return False
    local = instant.astimezone(zone)
    jan = datetime(local.year, 1, 1, tzinfo=zone).utcoffset()
    jul = datetime(local.year, 7, 1, tzinfo=zone).utcoffset()
    standard = min(jan, jul)
    return local.utcoffset() != standard


def local_default(override: str | None = None) -> str:
    """Pick the zone name used when a caller does not name one."""
    if override:
        return override
    for candidate in _host_zone_candidates():
        if candidate.lower() in _GENERIC_ZONE_LABELS:
            continue
        try:
            resolve(candidate)
        except UnknownTimezone:
            logger.debug(
                "local_timezone_unresolvable",
                extra={"extra": {"candidate": candidate}},
            )
            continue
        return candidate
    return UTC_NAME


def _host_zone_candidates() -> Iterator[str]:
    env_tz = os.environ.get("TZ", "").lstrip(":").strip()
    if env_tz:
        yield _strip_zoneinfo_prefix(env_tz)

    try:
        yield Path("/etc/timezone").read_text(encoding="utf-8").strip()
    except OSError:
        pass

    localtime = Path("/etc/localtime")
    if localtime.is_symlink():
        yield _strip_zoneinfo_prefix(str(localtime.resolve()))


def _strip_zoneinfo_prefix(path: str) -> str:
    # /usr/share/zoneinfo/posix/Europe/Paris -> Europe/Paris
    if _ZONEINFO_MARKER not in path:
        return path
    name = path.rsplit(_ZONEINFO_MARKER, 1)[1]
    for variant in ("posix/", "right/"):
        if name.startswith(variant):
            return name[len(variant):]
    return name
