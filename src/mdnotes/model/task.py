# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from mdnotes.model.time_entry import TimeEntry


class Task(TypedDict):
    text: str
    line: int
    indent: int
    completed: bool
    due: Optional[pendulum.Date]
    estimate: Optional[str]
    tags: list[str]
    file_path: str
    time_entries: list[TimeEntry]
    total_time: pendulum.Duration
    remaining: Optional[str]


class TaskScan(TypedDict):
    tasks: list[Task]
    skipped: list[str]
