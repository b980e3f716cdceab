# SPDX-License-Identifier: MIT

import pendulum

from mdnotes.model.task import Task
from mdnotes.model.task_filter import TaskFilter
from mdnotes.service.task import detect_priority


def normalize_tag(tag: str) -> str:
    return tag if tag.startswith("#") else f"#{tag}"


def filter_tasks(
    tasks: list[Task], criteria: TaskFilter, today: pendulum.Date
) -> list[Task]:
    """
    Keep the tasks matching every requested criterion.

    Overdue and today are combined with OR when both are requested, which
    is also what focus mode asks for.
    """
    return [task for task in tasks if matches_filter(task, criteria, today)]


def matches_filter(task: Task, criteria: TaskFilter, today: pendulum.Date) -> bool:
    if len(criteria["tags"]) > 0:
        filter_tags = {normalize_tag(tag).casefold() for tag in criteria["tags"]}
        if not any(tag.casefold() in filter_tags for tag in task["tags"]):
            return False

    if criteria["priority"] is not None:
        if detect_priority(task["text"]) != criteria["priority"].lower():
            return False

    overdue = criteria["overdue"] or criteria["focus"]
    due_today = criteria["today"] or criteria["focus"]
    due = task["due"]
    if overdue and due_today:
        if due is None or due > today:
            return False
    elif overdue:
        if due is None or due >= today:
            return False
    elif due_today:
        if due is None or due != today:
            return False

    if criteria["file_pattern"] is not None:
        if criteria["file_pattern"].lower() not in task["file_path"].lower():
            return False

    return True
