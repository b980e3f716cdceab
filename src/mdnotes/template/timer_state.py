# SPDX-License-Identifier: MIT

import pendulum

from mdnotes.model.task import Task
from mdnotes.model.timer_state import TimerState


def get_timer_state_template(task: Task, start_time: pendulum.DateTime) -> TimerState:
    return {
        "is_active": True,
        "task_text": task["text"],
        "file_path": task["file_path"],
        "task_line": task["line"],
        "start_time": start_time,
        "is_paused": False,
        "paused_at": None,
        "total_paused": pendulum.duration(),
    }
