# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mdnotes.duration import format_duration
from mdnotes.model.timer_state import StartResult, StopResult, TimerStatus
from mdnotes.time import datetime_to_clock_str
from mdnotes.view.view.util import relative_path
from mdnotes.view.view.views.header import header


def timer_started_view(notes_root: str, result: StartResult) -> None:
    header(notes_root, "time start")
    console = Console()

    if result["previous"] is not None:
        timer_stopped_view(notes_root, result["previous"], show_header=False)

    task = result["task"]
    location = relative_path(task["file_path"], notes_root)
    console.print(f"[bold green]Timer started:[/bold green] {escape(task['text'])}")
    console.print(f"[grey50]{escape(location)}:L{task['line']}[/grey50]")


def timer_stopped_view(
    notes_root: str, result: StopResult, show_header: bool = True
) -> None:
    if show_header:
        header(notes_root, "time stop")
    console = Console()
    console.print(
        f"[bold]Timer stopped:[/bold] {escape(result['state']['task_text'])}"
    )
    console.print(f"[green]Time logged: {format_duration(result['elapsed'])}[/green]")


def timer_status_view(notes_root: str, status: TimerStatus) -> None:
    header(notes_root, "time status")
    console = Console()

    state = status["state"]
    if status["phase"] == "idle" or state is None:
        console.print("[grey50]No active timer[/grey50]")
        return

    status_table = Table(box=box.SIMPLE)
    status_table.add_column("property")
    status_table.add_column("value")

    phase = "[yellow]paused[/yellow]" if status["phase"] == "paused" else "[green]running[/green]"
    status_table.add_row("status", phase)
    status_table.add_row("task", escape(state["task_text"]))
    status_table.add_row(
        "location",
        escape(f"{relative_path(state['file_path'], notes_root)}:L{state['task_line']}"),
    )
    status_table.add_row("started", datetime_to_clock_str(state["start_time"]))
    if state["paused_at"] is not None:
        status_table.add_row("paused at", datetime_to_clock_str(state["paused_at"]))
    if state["total_paused"].total_seconds() > 0:
        status_table.add_row("paused for", format_duration(state["total_paused"]))
    status_table.add_row("elapsed", format_duration(status["elapsed"]))

    console.print(status_table)
