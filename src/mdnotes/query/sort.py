# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from mdnotes.model.task import Task
from mdnotes.model.task_filter import SortBy
from mdnotes.service.task import PRIORITY_ORDER, detect_priority


def sort_tasks(tasks: list[Task], sort_by: Optional[SortBy] = None) -> list[Task]:
    """
    Return the tasks ordered by priority, file, or (default) due date.

    Tasks without a due date go after the dated ones. The sort is stable.
    """
    match sort_by:
        case "priority":
            return sorted(
                tasks,
                key=lambda task: (
                    PRIORITY_ORDER[detect_priority(task["text"])],
                    *__due_key(task["due"]),
                    task["file_path"],
                ),
            )
        case "file":
            return sorted(tasks, key=lambda task: task["file_path"])
        case _:
            return sorted(
                tasks, key=lambda task: (*__due_key(task["due"]), task["file_path"])
            )


def __due_key(due: Optional[pendulum.Date]) -> tuple[bool, str]:
    if due is None:
        return (True, "")
    return (False, due.isoformat())
