# SPDX-License-Identifier: MIT

import os
from typing import Optional

from mdnotes.duration import format_duration, parse_duration
from mdnotes.errors import InvalidDurationFormat
from mdnotes.model.task import Task

PRIORITY_COLORS = {"high": "bold red", "medium": "bold yellow", "low": "grey50"}


def format_tags(tags: Optional[list[str]]) -> str:
    """Format a list of tags as a space-separated string."""
    if tags is None or len(tags) == 0:
        return ""
    return " ".join(tags)


def pluralize(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def truncate(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def relative_path(file_path: str, notes_root: str) -> str:
    try:
        return os.path.relpath(file_path, notes_root)
    except ValueError:
        return file_path


def render_priority(priority: str) -> str:
    color = PRIORITY_COLORS.get(priority, "grey50")
    return f"[{color}]{priority}[/{color}]"


def render_time_info(task: Task) -> str:
    """
    Describe the time worked on a task against what is left.

    Returns an empty string for tasks without any logged time.
    """
    total_time = task["total_time"]
    if total_time.total_seconds() <= 0:
        return ""

    total = format_duration(total_time)
    if task["remaining"] is not None:
        return f"{total} worked, {task['remaining']} left"
    if task["estimate"] is not None:
        try:
            estimate = parse_duration(task["estimate"])
        except InvalidDurationFormat:
            return f"{total} worked"
        if total_time >= estimate:
            return f"{total} completed"
        return f"{total}/{format_duration(estimate)}"
    return f"{total} worked"
