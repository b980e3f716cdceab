"""Test fixtures for mdnotes."""

from datetime import timedelta
from pathlib import Path
from typing import Any, Callable, Optional

import pendulum
import pytest

from mdnotes import configuration
from mdnotes.model.task import Task
from mdnotes.model.time_entry import TimeEntry
from mdnotes.repository.timer import InMemoryTimerStateStore
from mdnotes.template.task import get_task_template


class FixedClock:
    """A clock that only moves when told to."""

    def __init__(self, now: pendulum.DateTime) -> None:
        self.now = now

    def __call__(self) -> pendulum.DateTime:
        return self.now

    def advance(self, **kwargs: Any) -> None:
        self.now = self.now.add(**kwargs)


class RecordingTimeEntryWriter:
    """Stands in for the time log writer and remembers every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, int, pendulum.DateTime, timedelta]] = []
        self.error: Optional[Exception] = None

    def __call__(
        self,
        file_path: str,
        task_line: int,
        start_time: pendulum.DateTime,
        elapsed: timedelta,
    ) -> TimeEntry:
        if self.error is not None:
            raise self.error
        self.calls.append((file_path, task_line, start_time, elapsed))
        return {
            "date": start_time.date(),
            "start": start_time,
            "end": start_time + elapsed,
            "duration": pendulum.duration(seconds=elapsed.total_seconds()),
            "description": "Work session",
        }


@pytest.fixture
def notes_root(tmp_path: Path) -> Path:
    """Create a notes root with every scanned directory."""
    root = tmp_path / "notes"
    for directory in configuration.TASK_DIRECTORIES:
        (root / directory).mkdir(parents=True)
    return root.resolve()


@pytest.fixture
def write_note(notes_root: Path) -> Callable[[str, str], Path]:
    """Write a note below the notes root and return its path."""

    def write(relative_path: str, content: str) -> Path:
        path = notes_root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return write


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(pendulum.datetime(2024, 1, 15, 9, 0, tz="local"))


@pytest.fixture
def timer_store() -> InMemoryTimerStateStore:
    return InMemoryTimerStateStore()


@pytest.fixture
def time_entry_writer() -> RecordingTimeEntryWriter:
    return RecordingTimeEntryWriter()


def make_task(
    text: str,
    file_path: str = "/notes/projects/alpha.md",
    line: int = 1,
    due: Optional[pendulum.Date] = None,
    tags: Optional[list[str]] = None,
) -> Task:
    task = get_task_template(text, line, 0, file_path)
    task["due"] = due
    task["tags"] = tags or []
    return task
