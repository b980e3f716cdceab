# SPDX-License-Identifier: MIT

import re
from typing import Literal, TypedDict, Union

TASK_PATTERN = re.compile(r"^(\s*)-\s*\[\s*([ xX]?)\s*\]\s*(.*)$")
TIME_LOG_PATTERN = re.compile(r"^\s*Time log:\s*$")
TIME_ENTRY_PATTERN = re.compile(r"^\s*•")
REMAINING_PATTERN = re.compile(r"^\s*Remaining:\s*(.+)$")
TOTAL_PATTERN = re.compile(r"^\s*Total:\s*(.+)$")

INDENT = "  "
BULLET = "•"


class TaskLine(TypedDict):
    kind: Literal["task"]
    indent: int
    checked: bool
    text: str


class TimeLogHeaderLine(TypedDict):
    kind: Literal["time_log_header"]


class TimeEntryLine(TypedDict):
    kind: Literal["time_entry"]
    text: str


class RemainingLine(TypedDict):
    kind: Literal["remaining"]
    text: str


class TotalLine(TypedDict):
    kind: Literal["total"]
    text: str


class PlainLine(TypedDict):
    kind: Literal["plain"]
    text: str
    indented: bool
    blank: bool


Line = Union[
    TaskLine, TimeLogHeaderLine, TimeEntryLine, RemainingLine, TotalLine, PlainLine
]


def classify_line(line: str) -> Line:
    """
    Classify one line of a note file.

    The checks run in a fixed precedence: task line, time log header, bullet
    entry, remaining line, total line, and everything else is plain. The
    classification is context free; whether a bullet belongs to a time log
    is decided by the consumer.
    """
    task_match = TASK_PATTERN.match(line)
    if task_match is not None:
        indent_str, checkbox, text = task_match.groups()
        return TaskLine(
            kind="task",
            indent=len(indent_str),
            checked=checkbox.lower() == "x",
            text=text.strip(),
        )

    if TIME_LOG_PATTERN.match(line):
        return TimeLogHeaderLine(kind="time_log_header")

    if TIME_ENTRY_PATTERN.match(line):
        return TimeEntryLine(kind="time_entry", text=line)

    remaining_match = REMAINING_PATTERN.match(line)
    if remaining_match is not None:
        return RemainingLine(kind="remaining", text=remaining_match.group(1).strip())

    total_match = TOTAL_PATTERN.match(line)
    if total_match is not None:
        return TotalLine(kind="total", text=total_match.group(1).strip())

    return PlainLine(
        kind="plain",
        text=line,
        indented=line.startswith(INDENT),
        blank=line.strip() == "",
    )
