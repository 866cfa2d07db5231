# SPDX-License-Identifier: MIT

import datetime
from typing import Any, Optional, cast

import pendulum

# Sunday-first ordering used by the calendar grids
DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def today_local() -> pendulum.Date:
    return pendulum.now("local").date()


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def date_to_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD")


def date_to_str_optional(date: Optional[pendulum.Date]) -> Optional[str]:
    if date is None:
        return None
    return date_to_str(date)


def date_from_str(date: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string (a time component is ignored)."""
    parsed = pendulum.parse(date, exact=True)
    if isinstance(parsed, datetime.datetime):
        return pendulum.date(parsed.year, parsed.month, parsed.day)
    if isinstance(parsed, datetime.date):
        return pendulum.date(parsed.year, parsed.month, parsed.day)
    raise ValueError(f"not a calendar date: {date!r}")


def to_local_date(value: Any) -> Optional[pendulum.Date]:
    """
    Truncate a date-like value to a local calendar date.

    Accepts dates, datetimes and ISO strings. Aware values, including strings
    carrying an offset, are converted to local time first. Anything missing or
    unparseable gives None so callers can treat it as "no date".
    """
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        if value.tzinfo is not None:
            value = pendulum.instance(value).in_tz("local")
        return pendulum.date(value.year, value.month, value.day)
    if isinstance(value, datetime.date):
        return pendulum.date(value.year, value.month, value.day)
    if isinstance(value, str):
        try:
            parsed = pendulum.parse(value.strip(), exact=True, tz=None)
        except ValueError:
            return None
        if isinstance(parsed, (pendulum.Time, pendulum.Duration)):
            return None
        return to_local_date(parsed)
    return None


def weekday_index(date: datetime.date) -> int:
    """Sunday-based weekday index: Sunday = 0 ... Saturday = 6."""
    return date.isoweekday() % 7


def day_name(date: datetime.date) -> str:
    return DAY_NAMES[weekday_index(date)]


def is_same_day(first: Any, second: Any) -> bool:
    first_date = to_local_date(first)
    second_date = to_local_date(second)
    if first_date is None or second_date is None:
        return False
    return first_date == second_date


def is_in_range(date: Any, start: Any, end: Any) -> bool:
    """Closed, inclusive range check on local calendar dates."""
    date_value = to_local_date(date)
    start_value = to_local_date(start)
    end_value = to_local_date(end)
    if date_value is None or start_value is None or end_value is None:
        return False
    return start_value <= date_value <= end_value


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")


def date_to_display_str_optional(date: Optional[pendulum.Date]) -> Optional[str]:
    if date is None:
        return None
    return date_to_display_str(date)


def date_to_short_str(date: pendulum.Date) -> str:
    return date.format("MMM D")


def month_title(date: pendulum.Date) -> str:
    return date.format("MMMM YYYY")


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD HH:mm")
