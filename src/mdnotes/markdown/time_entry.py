# SPDX-License-Identifier: MIT

import re

from mdnotes.duration import format_duration, parse_duration
from mdnotes.errors import InvalidDurationFormat, MalformedTimeEntry
from mdnotes.markdown.line import BULLET, INDENT
from mdnotes.model.time_entry import TimeEntry
from mdnotes.time import (
    clock_time_on_date,
    date_from_str,
    date_to_str,
    datetime_to_clock_str,
)

DURATION_IN_PARENS_PATTERN = re.compile(r"\(([^)]+)\)")
DESCRIPTION_SEPARATOR = " - "


def parse_time_entry(line: str) -> TimeEntry:
    """
    Parse a time log bullet.

    Format: "• 2024-01-15 09:30-10:45 (1h15m) - Initial component setup"

    Raises:
        MalformedTimeEntry: if any part of the entry does not parse
    """
    text = line.strip()
    if text.startswith(BULLET):
        text = text[len(BULLET) :].strip()

    parts = text.split(DESCRIPTION_SEPARATOR, 1)
    if len(parts) != 2:
        raise MalformedTimeEntry(line, "missing ' - ' separator")
    time_part, description = parts

    duration_match = DURATION_IN_PARENS_PATTERN.search(time_part)
    if duration_match is None:
        raise MalformedTimeEntry(line, "duration not found")
    try:
        duration = parse_duration(duration_match.group(1))
    except InvalidDurationFormat as e:
        raise MalformedTimeEntry(line, "invalid duration") from e

    time_part = DURATION_IN_PARENS_PATTERN.sub("", time_part).strip()
    date_and_range = time_part.split()
    if len(date_and_range) != 2:
        raise MalformedTimeEntry(line, "invalid date-time format")
    date_str, time_range = date_and_range

    try:
        date = date_from_str(date_str)
    except ValueError as e:
        raise MalformedTimeEntry(line, "invalid date") from e

    range_parts = time_range.split("-")
    if len(range_parts) != 2:
        raise MalformedTimeEntry(line, "invalid time range")

    try:
        start = clock_time_on_date(date, range_parts[0])
    except ValueError as e:
        raise MalformedTimeEntry(line, "invalid start time") from e
    try:
        end = clock_time_on_date(date, range_parts[1])
    except ValueError as e:
        raise MalformedTimeEntry(line, "invalid end time") from e

    return {
        "date": date,
        "start": start,
        "end": end,
        "duration": duration,
        "description": description.strip(),
    }


def format_time_entry(entry: TimeEntry) -> str:
    return (
        f"{INDENT}{BULLET} {date_to_str(entry['date'])} "
        f"{datetime_to_clock_str(entry['start'])}-{datetime_to_clock_str(entry['end'])} "
        f"({format_duration(entry['duration'])}) - {entry['description']}"
    )
