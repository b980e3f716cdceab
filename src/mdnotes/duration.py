# SPDX-License-Identifier: MIT

import re
from datetime import timedelta

import pendulum

from mdnotes.errors import InvalidDurationFormat

DURATION_PATTERN = re.compile(r"^(?:(\d+)h)?(?:(\d+)m)?$", re.IGNORECASE)


def parse_duration(value: str) -> pendulum.Duration:
    """
    Parse a human duration such as '1h15m', '2h' or '45m'.

    Raises:
        InvalidDurationFormat: if the value has none of those shapes
    """
    text = value.strip()
    match = DURATION_PATTERN.match(text)
    if text == "" or match is None:
        raise InvalidDurationFormat(value)

    hours_str, minutes_str = match.groups()
    hours = int(hours_str) if hours_str is not None else 0
    minutes = int(minutes_str) if minutes_str is not None else 0
    return pendulum.duration(hours=hours, minutes=minutes)


def format_duration(duration: timedelta) -> str:
    total_minutes = int(duration.total_seconds() // 60)
    if total_minutes <= 0:
        return "0m"

    hours, minutes = divmod(total_minutes, 60)
    if hours > 0 and minutes > 0:
        return f"{hours}h{minutes}m"
    if hours > 0:
        return f"{hours}h"
    return f"{minutes}m"


def sum_durations(durations: list[pendulum.Duration]) -> pendulum.Duration:
    total_seconds: float = 0
    for duration in durations:
        total_seconds += duration.total_seconds()
    return pendulum.duration(seconds=total_seconds)


def truncate_to_minutes(duration: timedelta) -> pendulum.Duration:
    total_minutes = max(int(duration.total_seconds() // 60), 0)
    return pendulum.duration(minutes=total_minutes)
