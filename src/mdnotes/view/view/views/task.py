# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mdnotes.model.task import Task
from mdnotes.model.task_stats import TaskStats
from mdnotes.service.task import critical_tasks, detect_priority, estimate_task_effort
from mdnotes.time import relative_due_str
from mdnotes.view.view.util import (
    format_tags,
    pluralize,
    relative_path,
    render_priority,
    render_time_info,
    truncate,
)
from mdnotes.view.view.views.header import header


def category_counts(stats: TaskStats) -> str:
    return (
        f"[bold red]URGENT ({len(stats['urgent'])})[/bold red]     "
        f"[bold yellow]TODAY ({len(stats['today'])})[/bold yellow]     "
        f"[bold red]OVERDUE ({len(stats['overdue'])})[/bold red]     "
        f"[grey50]OTHER ({len(stats['other'])})[/grey50]"
    )


def render_due(task: Task, today: pendulum.Date) -> str:
    due = task["due"]
    if due is None:
        return ""
    relative = relative_due_str(due, today)
    if due < today:
        return f"[bold red]{relative}[/bold red]"
    if due == today:
        return f"[bold yellow]due {relative}[/bold yellow]"
    return f"[grey50]due {relative}[/grey50]"


def tasks_view(
    notes_root: str,
    report_name: str,
    tasks: list[Task],
    stats: TaskStats,
    today: pendulum.Date,
) -> None:
    header(notes_root, report_name)
    console = Console()

    if len(stats["urgent"]) + len(stats["today"]) + len(stats["overdue"]) > 0:
        console.print(category_counts(stats))

    tasks_table = Table(box=box.SIMPLE)
    tasks_table.add_column("file")
    tasks_table.add_column("line", justify="right")
    tasks_table.add_column("priority")
    tasks_table.add_column("task")
    tasks_table.add_column("tags")
    tasks_table.add_column("due")
    tasks_table.add_column("time")
    tasks_table.add_column("estimate")

    overdue_count = 0
    today_count = 0
    current_file = ""
    for task in tasks:
        file_name = relative_path(task["file_path"], notes_root)
        if task["due"] is not None and task["due"] < today:
            overdue_count += 1
        elif task["due"] is not None and task["due"] == today:
            today_count += 1

        indent = "  " * (task["indent"] // 2)
        tasks_table.add_row(
            escape(file_name) if file_name != current_file else "",
            f"L{task['line']}",
            render_priority(detect_priority(task["text"])),
            indent + escape(truncate(task["text"], 60)),
            f"[cyan]{escape(format_tags(task['tags']))}[/cyan]",
            render_due(task, today),
            f"[yellow]{escape(render_time_info(task))}[/yellow]",
            f"[grey50]~{escape(task['estimate'] or estimate_task_effort(task['text']))}[/grey50]",
        )
        current_file = file_name

    console.print(tasks_table)

    footer = f"[bold]Total: {pluralize(len(tasks), 'task')}[/bold]"
    if overdue_count > 0:
        footer += f" [bold red]({overdue_count} overdue)[/bold red]"
    if today_count > 0:
        footer += f" [bold yellow]({today_count} due today)[/bold yellow]"
    console.print(footer)


def task_summary_view(
    notes_root: str,
    tasks: list[Task],
    stats: TaskStats,
    today: pendulum.Date,
) -> None:
    header(notes_root, "Task Overview")
    console = Console()
    console.print(category_counts(stats))
    console.print()

    if len(stats["quick_wins"]) > 0:
        console.print(f"Quick wins available ({len(stats['quick_wins'])} tasks <30min)")
    if len(stats["energy_needed"]) > 0:
        console.print(
            f"Energy needed ({len(stats['energy_needed'])} complex tasks requiring focus)"
        )
    if len(stats["blocked"]) > 0:
        console.print(f"Waiting on others ({len(stats['blocked'])} blocked tasks)")

    critical = critical_tasks(stats)
    if len(critical) > 0:
        critical_table = Table(box=box.SIMPLE, title="Top Critical Tasks")
        critical_table.add_column("#", justify="right")
        critical_table.add_column("priority")
        critical_table.add_column("task")
        critical_table.add_column("due")
        critical_table.add_column("estimate")
        critical_table.add_column("location")
        for index, task in enumerate(critical, start=1):
            critical_table.add_row(
                str(index),
                render_priority(detect_priority(task["text"])),
                escape(truncate(task["text"], 50)),
                render_due(task, today),
                f"~{estimate_task_effort(task['text'])}",
                escape(f"{relative_path(task['file_path'], notes_root)}:L{task['line']}"),
            )
        console.print(critical_table)

    console.print(f"[bold]Total: {pluralize(len(tasks), 'task')}[/bold]")
    console.print("[grey50]Use --full to see detailed view[/grey50]")


def no_tasks_view(has_any_tasks: bool) -> None:
    console = Console()
    if has_any_tasks:
        console.print("[bold yellow]No tasks match your filters[/bold yellow]")
        console.print("[grey50]Try adjusting your filter criteria[/grey50]")
    else:
        console.print("[bold green]No tasks found![/bold green]")
        console.print("[grey50]You're all caught up![/grey50]")
