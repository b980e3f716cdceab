# SPDX-License-Identifier: MIT

import re
from typing import Optional, cast

import pendulum

DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
CLOCK_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def today_local() -> pendulum.Date:
    return now_local().date()


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime)).in_tz("local")


def datetime_from_str_optional(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime is None:
        return None
    return datetime_from_str(datetime)


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a strict 'YYYY-MM-DD' string; raises ValueError on anything else."""
    match = DATE_PATTERN.match(date_str)
    if match is None:
        raise ValueError(f"not a YYYY-MM-DD date: {date_str}")
    year, month, day = (int(part) for part in match.groups())
    return pendulum.date(year, month, day)


def date_to_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD")


def clock_time_on_date(date: pendulum.Date, clock_time: str) -> pendulum.DateTime:
    """Combine a date with an 'HH:MM' wall-clock time in local time."""
    match = CLOCK_TIME_PATTERN.match(clock_time)
    if match is None:
        raise ValueError(f"not an HH:MM time: {clock_time}")
    hour_str, minute_str = match.groups()
    return pendulum.datetime(
        date.year,
        date.month,
        date.day,
        int(hour_str),
        int(minute_str),
        tz="local",
    )


def datetime_to_clock_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("HH:mm")


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("MMM D")


def date_to_display_day_str(date: pendulum.Date) -> str:
    return date.format("ddd MMM D")


def relative_due_str(due: pendulum.Date, today: pendulum.Date) -> str:
    """Describe a due date relative to today: 'today', '2 days overdue', 'in 3 days'."""
    days = (due - today).days
    if days == 0:
        return "today"
    if days == -1:
        return "1 day overdue"
    if days < -1:
        return f"{-days} days overdue"
    if days == 1:
        return "tomorrow"
    return f"in {days} days"
