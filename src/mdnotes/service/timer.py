# SPDX-License-Identifier: MIT

from datetime import timedelta
from typing import Callable, Optional, Union

import pendulum

from mdnotes.errors import (
    AlreadyPaused,
    NoActiveTimer,
    NotesError,
    NotPaused,
    NothingToResume,
)
from mdnotes.model.task import Task
from mdnotes.model.time_entry import TimeEntry
from mdnotes.model.timer_state import (
    StartResult,
    StopResult,
    TimerState,
    TimerStatus,
)
from mdnotes.repository.timer import TimerStateStore
from mdnotes.service.task import find_task_by_text
from mdnotes.template.timer_state import get_timer_state_template
from mdnotes.time import now_local

TaskFinder = Callable[[str], Task]
TimeEntryWriter = Callable[[str, int, pendulum.DateTime, timedelta], TimeEntry]
Clock = Callable[[], pendulum.DateTime]


class TimerService:
    """
    The single work timer.

    Idle is the absence of a stored state. start moves to running, pause and
    resume toggle between running and paused, and stop logs the elapsed time
    into the task's note before returning to idle. The task a timer belongs
    to is snapshotted at start and never looked up again.
    """

    def __init__(
        self,
        store: TimerStateStore,
        find_task: TaskFinder,
        write_time_entry: TimeEntryWriter,
        clock: Clock = now_local,
    ) -> None:
        self.store = store
        self.find_task = find_task
        self.write_time_entry = write_time_entry
        self.clock = clock

    def start(self, search_text: str) -> StartResult:
        previous: Optional[StopResult] = None
        warning: Optional[str] = None

        try:
            if self.__load_active() is not None:
                previous = self.stop()
        except NotesError as e:
            warning = f"could not stop the previous timer: {e}"

        task = self.find_task(search_text)
        state = get_timer_state_template(task, self.clock())
        self.store.save(state)

        return {
            "task": task,
            "state": state,
            "previous": previous,
            "warning": warning,
        }

    def pause(self) -> TimerStatus:
        state = self.__load_active()
        if state is None:
            raise NoActiveTimer()
        if state["is_paused"]:
            raise AlreadyPaused()

        state["is_paused"] = True
        state["paused_at"] = self.clock()
        self.store.save(state)
        return self.__status_of(state)

    def resume(self, search_text: str = "") -> Union[TimerStatus, StartResult]:
        state = self.__load_active()
        if state is None:
            if search_text.strip() == "":
                raise NothingToResume()
            return self.start(search_text)
        if not state["is_paused"] or state["paused_at"] is None:
            raise NotPaused()

        now = self.clock()
        state["total_paused"] = state["total_paused"] + (now - state["paused_at"])
        state["is_paused"] = False
        state["paused_at"] = None
        self.store.save(state)
        return self.__status_of(state)

    def stop(self) -> StopResult:
        state = self.__load_active()
        if state is None:
            raise NoActiveTimer()

        elapsed = self.__elapsed(state, self.clock())
        entry = self.write_time_entry(
            state["file_path"], state["task_line"], state["start_time"], elapsed
        )
        # the state survives a failed write so the running timer is not lost
        self.store.delete()

        return {"state": state, "elapsed": elapsed, "entry": entry}

    def status(self) -> TimerStatus:
        state = self.__load_active()
        if state is None:
            return {"phase": "idle", "state": None, "elapsed": pendulum.duration()}
        return self.__status_of(state)

    def __load_active(self) -> Optional[TimerState]:
        state = self.store.load()
        if state is None or not state["is_active"]:
            return None
        return state

    def __status_of(self, state: TimerState) -> TimerStatus:
        return {
            "phase": "paused" if state["is_paused"] else "running",
            "state": state,
            "elapsed": self.__elapsed(state, self.clock()),
        }

    def __elapsed(self, state: TimerState, now: pendulum.DateTime) -> pendulum.Duration:
        elapsed = now - state["start_time"] - state["total_paused"]
        if state["is_paused"] and state["paused_at"] is not None:
            elapsed = elapsed - (now - state["paused_at"])
        if elapsed.total_seconds() < 0:
            return pendulum.duration()
        return pendulum.duration(seconds=elapsed.total_seconds())


def make_task_finder(get_tasks: Callable[[], list[Task]]) -> TaskFinder:
    def find_task(search_text: str) -> Task:
        return find_task_by_text(get_tasks(), search_text)

    return find_task
