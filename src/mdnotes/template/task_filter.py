# SPDX-License-Identifier: MIT

from mdnotes.model.task_filter import TaskFilter


def get_task_filter_template() -> TaskFilter:
    return {
        "tags": [],
        "priority": None,
        "overdue": False,
        "today": False,
        "file_pattern": None,
        "sort_by": None,
        "focus": False,
        "all": False,
        "summary": False,
        "full": False,
    }
