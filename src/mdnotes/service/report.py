# SPDX-License-Identifier: MIT

from typing import Callable, cast

import pendulum

from mdnotes.duration import sum_durations
from mdnotes.errors import InvalidPeriod
from mdnotes.model.report import DailyTotal, Period, TaskTime, TimeReport
from mdnotes.model.task import Task

PERIODS = ["today", "week", "month"]


def parse_period(period: str) -> Period:
    """
    Raises:
        InvalidPeriod: if period is not today, week or month
    """
    normalized = period.strip().lower()
    if normalized not in PERIODS:
        raise InvalidPeriod(period)
    return cast(Period, normalized)


def get_period_window(
    period: Period, now: pendulum.DateTime
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    """Return the [start, end) window of a period in local time; weeks start on Monday."""
    local_now = now.in_tz("local")
    match period:
        case "today":
            start = local_now.start_of("day")
            return start, start.add(days=1)
        case "week":
            start = local_now.start_of("day").subtract(days=local_now.isoweekday() - 1)
            return start, start.add(days=7)
        case "month":
            start = local_now.start_of("month")
            return start, start.add(months=1)
    raise InvalidPeriod(period)


def collect_time_data(
    period: str,
    get_tasks: Callable[[], list[Task]],
    now: pendulum.DateTime,
) -> TimeReport:
    """
    Aggregate the logged time of every task inside the period's window.

    The period is validated before any task is loaded. Tasks without an
    entry in the window are left out; the rest are sorted by time spent,
    most first.

    Raises:
        InvalidPeriod: if period is not today, week or month
    """
    normalized_period = parse_period(period)
    start, end = get_period_window(normalized_period, now)
    start_date = start.date()
    end_date = end.date()

    task_times: list[TaskTime] = []
    for task in get_tasks():
        entries = [
            entry
            for entry in task["time_entries"]
            if start_date <= entry["date"] < end_date
        ]
        if len(entries) == 0:
            continue
        task_times.append(
            {
                "task": task,
                "entries": entries,
                "total_time": sum_durations([entry["duration"] for entry in entries]),
            }
        )

    task_times.sort(key=lambda task_time: task_time["total_time"], reverse=True)
    total_time = sum_durations([task_time["total_time"] for task_time in task_times])

    day_count = max((end_date - start_date).days, 1)
    daily_totals: list[DailyTotal] = []
    if normalized_period != "today":
        daily_totals = __daily_totals(task_times, start_date, day_count)

    return {
        "period": normalized_period,
        "start": start,
        "end": end,
        "tasks": task_times,
        "total_time": total_time,
        "daily_totals": daily_totals,
        "daily_average": pendulum.duration(
            seconds=total_time.total_seconds() / day_count
        ),
    }


def __daily_totals(
    task_times: list[TaskTime], start_date: pendulum.Date, day_count: int
) -> list[DailyTotal]:
    days = [start_date.add(days=offset) for offset in range(day_count)]
    durations: dict[pendulum.Date, list[pendulum.Duration]] = {day: [] for day in days}
    for task_time in task_times:
        for entry in task_time["entries"]:
            durations[entry["date"]].append(entry["duration"])
    return [
        {"date": day, "total_time": sum_durations(durations[day])} for day in days
    ]
