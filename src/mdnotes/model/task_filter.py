# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

Priority = Literal["high", "medium", "low"]
SortBy = Literal["due", "priority", "file"]


class TaskFilter(TypedDict):
    tags: list[str]
    priority: Optional[str]
    overdue: bool
    today: bool
    file_pattern: Optional[str]
    sort_by: Optional[SortBy]
    focus: bool
    all: bool
    summary: bool
    full: bool
