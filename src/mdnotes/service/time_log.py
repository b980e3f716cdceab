# SPDX-License-Identifier: MIT

from datetime import timedelta
from pathlib import Path
from typing import Optional

import pendulum

from mdnotes.duration import truncate_to_minutes
from mdnotes.errors import FileReadError, FileWriteError, LineOutOfRange
from mdnotes.markdown.line import INDENT, TIME_LOG_PATTERN, classify_line
from mdnotes.markdown.time_entry import format_time_entry
from mdnotes.model.time_entry import TimeEntry
from mdnotes.repository.fileio import write_text_atomic

TIME_LOG_HEADER = f"{INDENT}Time log:"
WORK_SESSION_DESCRIPTION = "Work session"
LOOK_AHEAD_LINES = 10


def add_time_entry(
    file_path: str,
    task_line: int,
    start_time: pendulum.DateTime,
    elapsed: timedelta,
) -> TimeEntry:
    """
    Append a work session to the time log of the task on task_line.

    The entry goes after the last bullet of an existing "Time log:" block, or
    in a new block right below the task line. Every other line of the file is
    written back unchanged.

    Raises:
        FileReadError: if the note cannot be read
        LineOutOfRange: if task_line is not a line of the note
        FileWriteError: if the note cannot be replaced
    """
    path = Path(file_path)
    try:
        content = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(file_path, e) from e

    lines = content.split("\n")
    if task_line < 1 or task_line > len(lines):
        raise LineOutOfRange(file_path, task_line, len(lines))

    local_start = start_time.in_tz("local")
    duration = truncate_to_minutes(elapsed)
    entry: TimeEntry = {
        "date": local_start.date(),
        "start": local_start,
        "end": local_start + duration,
        "duration": duration,
        "description": WORK_SESSION_DESCRIPTION,
    }
    # CRLF notes keep their \r on every line split on \n
    line_end = "\r" if "\r\n" in content else ""
    entry_line = format_time_entry(entry)

    time_log_index = __find_time_log(lines, task_line)
    if time_log_index is None:
        insert_at = task_line
        new_lines = [TIME_LOG_HEADER, entry_line]
    else:
        insert_at = __find_insertion_point(lines, time_log_index)
        new_lines = [entry_line]
    new_lines = [line + line_end for line in new_lines]
    if line_end != "" and insert_at == len(lines):
        # the last line had no newline, so the inserted lines now follow it
        if not lines[-1].endswith(line_end):
            lines[-1] += line_end
        new_lines[-1] = new_lines[-1].removesuffix(line_end)
    lines[insert_at:insert_at] = new_lines

    try:
        write_text_atomic(path, "\n".join(lines))
    except OSError as e:
        raise FileWriteError(file_path, e) from e

    return entry


def __find_time_log(lines: list[str], task_line: int) -> Optional[int]:
    # task_line is 1-based, so it is also the index of the line below the task
    end = min(task_line + LOOK_AHEAD_LINES, len(lines))
    for index in range(task_line, end):
        line = lines[index]
        if line.startswith(INDENT) and TIME_LOG_PATTERN.match(line):
            return index
        if classify_line(line)["kind"] == "task":
            return None
        if not line.startswith(INDENT) and line.strip() != "":
            return None
    return None


def __find_insertion_point(lines: list[str], time_log_index: int) -> int:
    insert_at = time_log_index + 1
    for index in range(time_log_index + 1, len(lines)):
        line = lines[index]
        if not line.startswith(INDENT):
            break
        kind = classify_line(line)["kind"]
        if kind in ("remaining", "total", "task"):
            return index
        if kind == "time_entry":
            insert_at = index + 1
    return insert_at
