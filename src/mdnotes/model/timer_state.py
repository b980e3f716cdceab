# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

from mdnotes.model.task import Task
from mdnotes.model.time_entry import TimeEntry

TimerPhase = Literal["idle", "running", "paused"]


class TimerState(TypedDict):
    is_active: bool
    task_text: str
    file_path: str
    task_line: int
    start_time: pendulum.DateTime
    is_paused: bool
    paused_at: Optional[pendulum.DateTime]
    total_paused: pendulum.Duration


class TimerStatus(TypedDict):
    phase: TimerPhase
    state: Optional[TimerState]
    elapsed: pendulum.Duration


class StopResult(TypedDict):
    state: TimerState
    elapsed: pendulum.Duration
    entry: TimeEntry


class StartResult(TypedDict):
    task: Task
    state: TimerState
    previous: Optional[StopResult]
    warning: Optional[str]
