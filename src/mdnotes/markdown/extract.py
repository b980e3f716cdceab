# SPDX-License-Identifier: MIT

import re
from pathlib import Path
from typing import Optional

import pendulum

from mdnotes.duration import parse_duration, sum_durations
from mdnotes.errors import InvalidDurationFormat, MalformedTimeEntry
from mdnotes.markdown.line import INDENT, TaskLine, classify_line
from mdnotes.markdown.time_entry import parse_time_entry
from mdnotes.model.task import Task
from mdnotes.template.task import get_task_template
from mdnotes.time import date_from_str

DUE_DATE_PATTERN = re.compile(r"due:(\d{4}-\d{2}-\d{2})")
ESTIMATE_PATTERN = re.compile(r"est:(\S+)")
TAG_PATTERN = re.compile(r"#(\w+)")


def extract_tasks(file_path: Path) -> list[Task]:
    """Read a note file as UTF-8 and extract its tasks; I/O errors propagate."""
    content = file_path.read_text(encoding="utf-8")
    return extract_tasks_from_text(content, str(file_path.resolve()))


def extract_tasks_from_text(content: str, file_path: str) -> list[Task]:
    tasks: list[Task] = []
    current: Optional[Task] = None
    # open_block: the task still owns the following lines
    # in_time_log: bullet lines are parsed as time entries
    # closed: a Remaining/Total line ended time log scanning for good
    open_block = False
    in_time_log = False
    closed = False
    summed_total = True

    def flush() -> None:
        if current is None:
            return
        if summed_total:
            current["total_time"] = sum_durations(
                [entry["duration"] for entry in current["time_entries"]]
            )
        tasks.append(current)

    for line_number, raw_line in enumerate(content.split("\n"), start=1):
        line = classify_line(raw_line)

        if line["kind"] == "task":
            flush()
            current = _task_from_line(line, line_number, file_path)
            open_block = True
            in_time_log = False
            closed = False
            summed_total = True
            continue

        if current is None or not open_block:
            continue

        # only indented lines belong to the task above
        if not raw_line.startswith(INDENT) and raw_line.strip() != "":
            open_block = False
            in_time_log = False
            continue

        match line["kind"]:
            case "time_log_header":
                if not closed:
                    in_time_log = True
            case "time_entry":
                if in_time_log:
                    try:
                        current["time_entries"].append(parse_time_entry(line["text"]))
                    except MalformedTimeEntry:
                        pass
            case "remaining":
                current["remaining"] = line["text"]
                in_time_log = False
                closed = True
            case "total":
                try:
                    current["total_time"] = parse_duration(line["text"])
                    summed_total = False
                except InvalidDurationFormat:
                    pass
                in_time_log = False
                closed = True

    flush()
    return tasks


def _task_from_line(line: TaskLine, line_number: int, file_path: str) -> Task:
    raw_text = line["text"]
    task = get_task_template(raw_text, line_number, line["indent"], file_path)
    task["completed"] = line["checked"]
    text = raw_text

    due_match = DUE_DATE_PATTERN.search(raw_text)
    if due_match is not None:
        due = _parse_due_date(due_match.group(1))
        if due is not None:
            task["due"] = due
            text = _strip_token(DUE_DATE_PATTERN, text)

    estimate_match = ESTIMATE_PATTERN.search(raw_text)
    if estimate_match is not None:
        task["estimate"] = estimate_match.group(1)
        text = _strip_token(ESTIMATE_PATTERN, text)

    seen: set[str] = set()
    for tag_match in TAG_PATTERN.finditer(raw_text):
        tag = "#" + tag_match.group(1)
        if tag.lower() not in seen:
            seen.add(tag.lower())
            task["tags"].append(tag)

    task["text"] = text.strip()
    return task


def _parse_due_date(value: str) -> Optional[pendulum.Date]:
    try:
        return date_from_str(value)
    except ValueError:
        return None


def _strip_token(pattern: re.Pattern[str], text: str) -> str:
    return re.sub(r"\s*" + pattern.pattern, "", text)
