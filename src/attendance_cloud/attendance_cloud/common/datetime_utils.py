from __future__ import annotations

from datetime import date, datetime, time, timezone, tzinfo
from typing import Any, Optional
from zoneinfo import ZoneInfo


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def get_zone(name: str) -> tzinfo:
    return ZoneInfo(name)


def now_local(tz: tzinfo) -> datetime:
    """Current time in the given zone.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now(tz)


def start_of_day(moment: datetime) -> datetime:
    """Midnight (00:00:00.000) of the day `moment` falls on, same zone."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def day_bounds(start: date, end: date, tz: tzinfo) -> tuple[datetime, datetime]:
    """Inclusive [start 00:00, end 23:59:59.999999] range in `tz`."""
    return (
        datetime.combine(start, time.min, tzinfo=tz),
        datetime.combine(end, time.max, tzinfo=tz),
    )


def as_local(value: Any, tz: tzinfo) -> Optional[datetime]:
    """Convert a stored timestamp into `tz`; None when it is not a datetime.

    Firestore returns aware UTC datetimes; naive values are treated as UTC.
    """
    if not isinstance(value, datetime):
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(tz)
