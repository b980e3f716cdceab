# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

import pendulum

from mdnotes.model.task import Task
from mdnotes.model.time_entry import TimeEntry

Period = Literal["today", "week", "month"]


class TaskTime(TypedDict):
    task: Task
    entries: list[TimeEntry]
    total_time: pendulum.Duration


class DailyTotal(TypedDict):
    date: pendulum.Date
    total_time: pendulum.Duration


class TimeReport(TypedDict):
    period: Period
    start: pendulum.DateTime
    end: pendulum.DateTime
    tasks: list[TaskTime]
    total_time: pendulum.Duration
    daily_totals: list[DailyTotal]
    daily_average: pendulum.Duration
