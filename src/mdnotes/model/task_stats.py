# SPDX-License-Identifier: MIT

from typing import TypedDict

from mdnotes.model.task import Task


class TaskStats(TypedDict):
    total: int
    urgent: list[Task]
    today: list[Task]
    overdue: list[Task]
    other: list[Task]
    quick_wins: list[Task]
    energy_needed: list[Task]
    blocked: list[Task]
