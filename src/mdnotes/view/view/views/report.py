# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mdnotes.duration import format_duration
from mdnotes.model.report import TimeReport
from mdnotes.time import (
    date_to_display_day_str,
    date_to_display_str,
    datetime_to_clock_str,
)
from mdnotes.view.view.util import pluralize, relative_path, truncate
from mdnotes.view.view.views.header import header

PERIOD_TITLES = {"today": "Today", "week": "This Week", "month": "This Month"}


def time_report_view(notes_root: str, report: TimeReport) -> None:
    last_day = report["end"].subtract(days=1).date()
    header(
        notes_root,
        f"Time Report - {PERIOD_TITLES[report['period']]} "
        f"({date_to_display_str(report['start'].date())} to "
        f"{last_day.format('MMM D, YYYY')})",
    )
    console = Console()

    if len(report["tasks"]) == 0:
        console.print("[grey50]No time tracked for this period.[/grey50]")
        return

    console.print(
        f"[bold]Total Time: {format_duration(report['total_time'])}[/bold] "
        f"across {pluralize(len(report['tasks']), 'task')}"
    )

    total_seconds = report["total_time"].total_seconds()
    tasks_table = Table(box=box.SIMPLE, title="Task Breakdown")
    tasks_table.add_column("#", justify="right")
    tasks_table.add_column("task")
    tasks_table.add_column("time", justify="right")
    tasks_table.add_column("share", justify="right")
    tasks_table.add_column("sessions")

    for index, task_time in enumerate(report["tasks"], start=1):
        task = task_time["task"]
        share = (
            task_time["total_time"].total_seconds() / total_seconds * 100
            if total_seconds > 0
            else 0.0
        )
        sessions = "\n".join(
            f"{date_to_display_str(entry['date'])} "
            f"{datetime_to_clock_str(entry['start'])}-{datetime_to_clock_str(entry['end'])} "
            f"({format_duration(entry['duration'])}) - {entry['description']}"
            for entry in task_time["entries"]
        )
        location = f"{relative_path(task['file_path'], notes_root)}:L{task['line']}"
        tasks_table.add_row(
            str(index),
            f"{escape(truncate(task['text'], 50))}\n[grey50]{escape(location)}[/grey50]",
            format_duration(task_time["total_time"]),
            f"{share:.1f}%",
            escape(sessions),
        )
    console.print(tasks_table)

    if len(report["daily_totals"]) > 0:
        daily_table = Table(box=box.SIMPLE, title="Daily Breakdown")
        daily_table.add_column("day")
        daily_table.add_column("time", justify="right")
        for daily_total in report["daily_totals"]:
            if daily_total["total_time"].total_seconds() <= 0:
                continue
            daily_table.add_row(
                date_to_display_day_str(daily_total["date"]),
                format_duration(daily_total["total_time"]),
            )
        console.print(daily_table)

    console.print(
        f"[grey50]Average per day: {format_duration(report['daily_average'])}[/grey50]"
    )
