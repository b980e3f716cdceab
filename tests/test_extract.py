"""Tests for task extraction from note text."""

from pathlib import Path
from typing import Callable

import pendulum

from mdnotes.markdown.extract import extract_tasks, extract_tasks_from_text

FILE_PATH = "/notes/projects/alpha.md"

TIME_LOG_NOTE = """\
# Alpha

- [ ] Build login form #frontend
  Time log:
  • 2024-01-15 09:30-10:45 (1h15m) - Initial component setup
  • 2024-01-16 14:00-14:30 (30m) - Styling
  Remaining: 2h
- [x] Deploy preview
"""


def test_extract_task_metadata() -> None:
    """Due date and estimate are lifted out of the text, tags stay in it."""
    tasks = extract_tasks_from_text(
        "- [ ] Fix auth bug due:2099-01-01 est:2h #urgent", FILE_PATH
    )

    assert len(tasks) == 1
    task = tasks[0]
    assert task["text"] == "Fix auth bug #urgent"
    assert task["due"] == pendulum.date(2099, 1, 1)
    assert task["estimate"] == "2h"
    assert task["tags"] == ["#urgent"]
    assert task["line"] == 1
    assert task["file_path"] == FILE_PATH
    assert task["completed"] is False


def test_extract_includes_checked_tasks() -> None:
    """Completed tasks are extracted and flagged."""
    tasks = extract_tasks_from_text("- [x] Done thing\n- [X] Also done", FILE_PATH)
    assert [task["completed"] for task in tasks] == [True, True]


def test_extract_time_log() -> None:
    """Bullets below a Time log header add up to the total."""
    tasks = extract_tasks_from_text(TIME_LOG_NOTE, FILE_PATH)

    assert [task["text"] for task in tasks] == [
        "Build login form #frontend",
        "Deploy preview",
    ]
    login_form = tasks[0]
    assert login_form["line"] == 3
    assert len(login_form["time_entries"]) == 2
    assert login_form["total_time"] == pendulum.duration(minutes=105)
    assert login_form["remaining"] == "2h"

    assert tasks[1]["line"] == 8
    assert tasks[1]["time_entries"] == []
    assert tasks[1]["total_time"].total_seconds() == 0


def test_extract_stops_time_log_at_remaining() -> None:
    """Bullets after a Remaining line do not count."""
    content = """\
- [ ] Build login form
  Time log:
  • 2024-01-15 09:30-10:45 (1h15m) - Setup
  Remaining: 2h
  • 2024-01-17 09:00-10:00 (1h) - Late entry
"""
    task = extract_tasks_from_text(content, FILE_PATH)[0]
    assert len(task["time_entries"]) == 1
    assert task["total_time"] == pendulum.duration(minutes=75)


def test_extract_total_line_overrides_sum() -> None:
    """An explicit Total wins over the summed entries."""
    content = """\
- [ ] Write docs
  Time log:
  • 2024-01-15 09:00-10:00 (1h) - Draft
  Total: 3h
"""
    task = extract_tasks_from_text(content, FILE_PATH)[0]
    assert len(task["time_entries"]) == 1
    assert task["total_time"] == pendulum.duration(hours=3)


def test_extract_skips_malformed_entries() -> None:
    """A broken bullet is ignored and the rest still count."""
    content = """\
- [ ] Write docs
  Time log:
  • garbage
  • 2024-01-15 09:00-09:30 (30m) - Draft
"""
    task = extract_tasks_from_text(content, FILE_PATH)[0]
    assert len(task["time_entries"]) == 1
    assert task["time_entries"][0]["description"] == "Draft"


def test_extract_non_indented_line_ends_task_block() -> None:
    """A time log after a paragraph belongs to no task."""
    content = """\
- [ ] Task A
Some paragraph
  Time log:
  • 2024-01-15 09:00-10:00 (1h) - Orphan
"""
    task = extract_tasks_from_text(content, FILE_PATH)[0]
    assert task["time_entries"] == []


def test_extract_unindented_time_log_ends_task_block() -> None:
    """A Time log header at column 0 closes the task block."""
    content = """\
- [ ] Task A
Time log:
  • 2024-01-15 09:00-10:00 (1h) - Work
Remaining: 2h
"""
    task = extract_tasks_from_text(content, FILE_PATH)[0]
    assert task["time_entries"] == []
    assert task["remaining"] is None


def test_extract_blank_line_keeps_task_block_open() -> None:
    """Blank lines between a task and its log are allowed."""
    content = """\
- [ ] Task A

  Time log:
  • 2024-01-15 09:00-10:00 (1h) - Work
"""
    task = extract_tasks_from_text(content, FILE_PATH)[0]
    assert len(task["time_entries"]) == 1


def test_extract_nested_tasks() -> None:
    """Indented checkboxes are tasks of their own."""
    content = "- [ ] Parent\n  - [ ] Child\n    - [x] Grandchild"
    tasks = extract_tasks_from_text(content, FILE_PATH)
    assert [(task["text"], task["indent"]) for task in tasks] == [
        ("Parent", 0),
        ("Child", 2),
        ("Grandchild", 4),
    ]


def test_extract_bullets_without_header_are_not_entries() -> None:
    """Only bullets below a Time log header are parsed."""
    content = "- [ ] Task A\n  • 2024-01-15 09:00-10:00 (1h) - Work"
    assert extract_tasks_from_text(content, FILE_PATH)[0]["time_entries"] == []


def test_extract_invalid_due_date_stays_in_text() -> None:
    """An impossible due date is not lifted out."""
    task = extract_tasks_from_text("- [ ] Plan due:2024-13-45", FILE_PATH)[0]
    assert task["due"] is None
    assert task["text"] == "Plan due:2024-13-45"


def test_extract_deduplicates_tags() -> None:
    """The same tag in different case is kept once, first spelling wins."""
    task = extract_tasks_from_text("- [ ] Tidy #Home #home #chores", FILE_PATH)[0]
    assert task["tags"] == ["#Home", "#chores"]


def test_extract_ignores_lines_before_first_task() -> None:
    """Text without any checkbox has no tasks."""
    content = "  Time log:\n  • 2024-01-15 09:00-10:00 (1h) - Work\nNothing here"
    assert extract_tasks_from_text(content, FILE_PATH) == []


def test_extract_tasks_reads_file(write_note: Callable[[str, str], Path]) -> None:
    """File extraction records the resolved path."""
    path = write_note("projects/alpha.md", TIME_LOG_NOTE)
    tasks = extract_tasks(path)
    assert len(tasks) == 2
    assert tasks[0]["file_path"] == str(path.resolve())


def test_extract_is_stable_across_rewrites(
    write_note: Callable[[str, str], Path],
) -> None:
    """Writing the same content back yields the same tasks."""
    path = write_note("projects/alpha.md", TIME_LOG_NOTE)
    first = extract_tasks(path)
    path.write_text(path.read_text(encoding="utf-8"), encoding="utf-8")
    assert extract_tasks(path) == first
