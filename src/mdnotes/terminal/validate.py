# SPDX-License-Identifier: MIT

from typing import Optional, cast, get_args

import typer

from mdnotes.model.task_filter import SortBy

PRIORITIES = ["high", "medium", "low"]
SORT_ORDERS: tuple[str, ...] = get_args(SortBy)


def validate_priority(priority: Optional[str]) -> Optional[str]:
    if priority is None:
        return None
    if priority.lower() not in PRIORITIES:
        raise typer.BadParameter("Priority must be one of: high, medium, low")
    return priority.lower()


def validate_sort(sort_by: Optional[str]) -> Optional[SortBy]:
    if sort_by is None:
        return None
    if sort_by.lower() not in SORT_ORDERS:
        raise typer.BadParameter("Sort must be one of: due, priority, file")
    return cast(SortBy, sort_by.lower())
