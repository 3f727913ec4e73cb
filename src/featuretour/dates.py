# src/featuretour/dates.py
"""
Date and time helpers built on datetime and zoneinfo.
"""

import calendar
import time
from datetime import date, datetime, time as dtime, timedelta, timezone, tzinfo
from typing import List, Optional
from zoneinfo import ZoneInfo, available_timezones

GERMAN_SHORT_TIME = "%H:%M"
GERMAN_MEDIUM_DATE = "%d.%m.%Y"
LEGACY_DATE_FORMAT = "%a %b %d %H:%M:%S %Z %Y"


def clock_millis() -> int:
    """Milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def legacy_date(moment: datetime) -> str:
    """Render an aware datetime in local time, e.g. ``Wed Dec 31 23:59:59 CET 2014``."""
    return moment.astimezone().strftime(LEGACY_DATE_FORMAT)


def available_zone_ids() -> List[str]:
    return sorted(available_timezones())


def zone(zone_id: str) -> ZoneInfo:
    """Look up a zone; unknown ids raise ``zoneinfo.ZoneInfoNotFoundError``."""
    return ZoneInfo(zone_id)


def _format_offset(offset: timedelta) -> str:
    if not offset:
        return "Z"
    total = int(offset.total_seconds())
    sign = "+" if total >= 0 else "-"
    hours, remainder = divmod(abs(total), 3600)
    return f"{sign}{hours:02d}:{remainder // 60:02d}"


def standard_offset(tz: tzinfo, when: Optional[datetime] = None) -> timedelta:
    """UTC offset of ``tz`` at ``when`` without any daylight saving shift."""
    local = (when or datetime.now(timezone.utc)).astimezone(tz)
    return local.utcoffset() - (local.dst() or timedelta(0))


def zone_rules(tz: tzinfo, when: Optional[datetime] = None) -> str:
    return f"ZoneRules[currentStandardOffset={_format_offset(standard_offset(tz, when))}]"


def local_time_in(tz: tzinfo) -> dtime:
    """Current wall-clock time in ``tz``, without zone information."""
    return datetime.now(tz).time()


MICROS_PER_MINUTE = 60_000_000
MICROS_PER_HOUR = 3_600_000_000


def _micros_of_day(t: dtime) -> int:
    return ((t.hour * 3600 + t.minute * 60 + t.second) * 1_000_000) + t.microsecond


def _units_between(start: dtime, end: dtime, unit: int) -> int:
    diff = _micros_of_day(end) - _micros_of_day(start)
    whole = abs(diff) // unit
    return whole if diff >= 0 else -whole


def hours_between(start: dtime, end: dtime) -> int:
    """Whole hours from ``start`` to ``end`` on the same day, truncated toward zero."""
    return _units_between(start, end, MICROS_PER_HOUR)


def minutes_between(start: dtime, end: dtime) -> int:
    return _units_between(start, end, MICROS_PER_MINUTE)


def parse_german_time(text: str) -> dtime:
    """Parse a short German time such as ``06:13``."""
    return datetime.strptime(text, GERMAN_SHORT_TIME).time()


def parse_german_date(text: str) -> date:
    """Parse a medium German date such as ``24.12.2014``."""
    return datetime.strptime(text, GERMAN_MEDIUM_DATE).date()


def day_of_week(day: date) -> str:
    return calendar.day_name[day.weekday()].upper()


def month_name(day: date) -> str:
    return calendar.month_name[day.month].upper()


def minute_of_day(moment: datetime) -> int:
    return moment.hour * 60 + moment.minute
