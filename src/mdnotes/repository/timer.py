# SPDX-License-Identifier: MIT

import json
from pathlib import Path
from typing import Any, Optional, Protocol

import pendulum

from mdnotes.errors import TimerStateError
from mdnotes.model.timer_state import TimerState
from mdnotes.repository.fileio import write_text_atomic
from mdnotes.time import (
    datetime_from_str,
    datetime_from_str_optional,
    datetime_to_iso_str,
    datetime_to_iso_str_optional,
)


class TimerStateStore(Protocol):
    """Holds at most one timer state record; no record means the timer is idle."""

    def load(self) -> Optional[TimerState]: ...

    def save(self, state: TimerState) -> None: ...

    def delete(self) -> None: ...


class InMemoryTimerStateStore:
    def __init__(self, state: Optional[TimerState] = None) -> None:
        self.state = state

    def load(self) -> Optional[TimerState]:
        return self.state

    def save(self, state: TimerState) -> None:
        self.state = state

    def delete(self) -> None:
        self.state = None


class JsonTimerStateRepository:
    """Persists the timer state as one JSON object in the notes root."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> Optional[TimerState]:
        if not self.path.is_file():
            return None
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return self.__deserialize(raw)
        except (OSError, ValueError, KeyError, TypeError) as e:
            raise TimerStateError(str(self.path), e) from e

    def save(self, state: TimerState) -> None:
        content = json.dumps(self.__serialize(state), indent=2) + "\n"
        try:
            write_text_atomic(self.path, content)
        except OSError as e:
            raise TimerStateError(str(self.path), e) from e

    def delete(self) -> None:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise TimerStateError(str(self.path), e) from e

    def __serialize(self, state: TimerState) -> dict[str, Any]:
        return {
            "is_active": state["is_active"],
            "task_text": state["task_text"],
            "file_path": state["file_path"],
            "task_line": state["task_line"],
            "start_time": datetime_to_iso_str(state["start_time"]),
            "is_paused": state["is_paused"],
            "paused_at": datetime_to_iso_str_optional(state["paused_at"]),
            "total_paused": state["total_paused"].total_seconds(),
        }

    def __deserialize(self, raw: dict[str, Any]) -> TimerState:
        return {
            "is_active": bool(raw["is_active"]),
            "task_text": str(raw["task_text"]),
            "file_path": str(raw["file_path"]),
            "task_line": int(raw["task_line"]),
            "start_time": datetime_from_str(raw["start_time"]),
            "is_paused": bool(raw["is_paused"]),
            "paused_at": datetime_from_str_optional(raw.get("paused_at")),
            "total_paused": pendulum.duration(seconds=float(raw["total_paused"])),
        }
