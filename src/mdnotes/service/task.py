# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional

import pendulum

from mdnotes.errors import TaskNotFound
from mdnotes.model.task import Task
from mdnotes.model.task_filter import Priority
from mdnotes.model.task_stats import TaskStats

HIGH_PRIORITY_KEYWORDS = ["urgent", "asap", "critical", "important", "!!!"]
MEDIUM_PRIORITY_KEYWORDS = ["!!", "soon", "priority"]

PRIORITY_ORDER: dict[str, int] = {"high": 0, "medium": 1, "low": 2}

QUICK_WIN_KEYWORDS = ["quick", "simple", "easy", "fix typo"]
ENERGY_NEEDED_KEYWORDS = ["design", "architecture", "refactor", "implement"]
BLOCKED_KEYWORDS = ["blocked", "waiting", "pending"]

QUICK_EFFORT_KEYWORDS = ["fix typo", "update", "change", "quick", "simple", "easy"]
MEDIUM_EFFORT_KEYWORDS = ["add", "create", "write", "test", "review"]
LARGE_EFFORT_KEYWORDS = ["implement", "design", "refactor", "architecture", "migrate"]


def detect_priority(text: str) -> Priority:
    """First keyword hit wins: high keywords are checked before medium ones."""
    text_lower = text.lower()
    if __contains_any(text_lower, HIGH_PRIORITY_KEYWORDS):
        return "high"
    if __contains_any(text_lower, MEDIUM_PRIORITY_KEYWORDS):
        return "medium"
    return "low"


def find_task_by_text(tasks: list[Task], search_text: str) -> Task:
    """
    Resolve search_text to a single task.

    Tasks whose text contains search_text (case-insensitive) are candidates.
    An exact case-insensitive match is preferred over the others, otherwise
    the first candidate in scan order is used.

    Raises:
        TaskNotFound: if no task text contains search_text
    """
    search_lower = search_text.lower()
    matches = [task for task in tasks if search_lower in task["text"].lower()]

    if len(matches) == 0:
        raise TaskNotFound(search_text)
    if len(matches) == 1:
        return matches[0]

    for match in matches:
        if match["text"].casefold() == search_text.casefold():
            return match
    return matches[0]


def analyze_task_stats(tasks: list[Task], today: pendulum.Date) -> TaskStats:
    stats: TaskStats = {
        "total": len(tasks),
        "urgent": [],
        "today": [],
        "overdue": [],
        "other": [],
        "quick_wins": [],
        "energy_needed": [],
        "blocked": [],
    }

    for task in tasks:
        text_lower = task["text"].lower()
        due = task["due"]

        if detect_priority(task["text"]) == "high":
            stats["urgent"].append(task)
        elif due is not None and due < today:
            stats["overdue"].append(task)
        elif due is not None and due == today:
            stats["today"].append(task)
        else:
            stats["other"].append(task)

        # heuristic buckets are independent of each other
        if __contains_any(text_lower, QUICK_WIN_KEYWORDS) or (
            "update" in text_lower and len(task["text"]) < 30
        ):
            stats["quick_wins"].append(task)
        if __contains_any(text_lower, ENERGY_NEEDED_KEYWORDS):
            stats["energy_needed"].append(task)
        if __contains_any(text_lower, BLOCKED_KEYWORDS):
            stats["blocked"].append(task)

    return stats


def critical_tasks(stats: TaskStats, limit: int = 5) -> list[Task]:
    return (stats["urgent"] + stats["overdue"] + stats["today"])[:limit]


def estimate_task_effort(text: str) -> str:
    """Rough effort guess from keywords in the task text."""
    text_lower = text.lower()

    if len(text) < 40 and __contains_any(text_lower, QUICK_EFFORT_KEYWORDS):
        return "15m"
    if __contains_any(text_lower, LARGE_EFFORT_KEYWORDS):
        return "2-4h"
    if __contains_any(text_lower, MEDIUM_EFFORT_KEYWORDS):
        return "1h"
    if len(text) > 60:
        return "1-2h"
    return "30m"


def detect_context(base_dir: Path, cwd: Path) -> Optional[str]:
    """
    Return the top level notes directory cwd is inside of, if any.

    Standing in the notes root itself, or outside of it, has no context.
    """
    try:
        relative = cwd.resolve().relative_to(base_dir.resolve())
    except ValueError:
        return None

    if len(relative.parts) == 0:
        return None
    return relative.parts[0]


def __contains_any(text: str, keywords: list[str]) -> bool:
    return any(keyword in text for keyword in keywords)
