# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdnotes import configuration
from mdnotes.errors import GitError, NotesError
from mdnotes.model.timer_state import StopResult
from mdnotes.repository.configuration import CONFIGURATION_REPO
from mdnotes.repository.timer import JsonTimerStateRepository
from mdnotes.service.report import collect_time_data
from mdnotes.service.time_log import add_time_entry
from mdnotes.service.timer import TimerService, make_task_finder
from mdnotes.terminal.custom_typer import AliasedTyperGroup
from mdnotes.terminal.notes import get_notes_root, load_tasks
from mdnotes.time import now_local
from mdnotes.version.version import Version
from mdnotes.view.view.views import report as report_view
from mdnotes.view.view.views import timer as timer_view

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def get_timer_service(notes_root: Path) -> TimerService:
    return TimerService(
        store=JsonTimerStateRepository(configuration.timer_state_path(notes_root)),
        find_task=make_task_finder(lambda: load_tasks(notes_root)),
        write_time_entry=add_time_entry,
    )


def commit_time_entry(notes_root: Path, stop_result: StopResult) -> None:
    config = CONFIGURATION_REPO.get_config()
    if not (config["use_git_versioning"] and config.get("commit_time_entries", False)):
        return
    version = Version(notes_root)
    try:
        version.commit_file(
            Path(stop_result["state"]["file_path"]),
            f"Log time: {stop_result['state']['task_text']}",
        )
    except GitError as e:
        logger.warning("time entry was logged but not committed: %s", e)


@app.command("start, s", no_args_is_help=True)
def start(
    search_text: Annotated[
        list[str], typer.Argument(help="text contained in the task to track")
    ],
) -> None:
    """Start tracking time on a task, stopping any running timer first."""
    notes_root = get_notes_root()
    timer_service = get_timer_service(notes_root)

    try:
        result = timer_service.start(" ".join(search_text))
    except NotesError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if result["warning"] is not None:
        logger.warning(result["warning"])
    if result["previous"] is not None:
        commit_time_entry(notes_root, result["previous"])

    timer_view.timer_started_view(str(notes_root), result)


@app.command("pause, p")
def pause() -> None:
    """Pause the running timer."""
    notes_root = get_notes_root()
    try:
        status = get_timer_service(notes_root).pause()
    except NotesError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    timer_view.timer_status_view(str(notes_root), status)


@app.command("resume, r")
def resume(
    search_text: Annotated[
        Optional[list[str]],
        typer.Argument(help="task to start when no timer is paused"),
    ] = None,
) -> None:
    """Resume the paused timer, or start one on the given task."""
    notes_root = get_notes_root()
    try:
        result = get_timer_service(notes_root).resume(" ".join(search_text or []))
    except NotesError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if "phase" in result:
        timer_view.timer_status_view(str(notes_root), result)  # type: ignore[arg-type]
    else:
        timer_view.timer_started_view(str(notes_root), result)  # type: ignore[arg-type]


@app.command("stop, x")
def stop() -> None:
    """Stop the timer and log the session into the task's note."""
    notes_root = get_notes_root()
    try:
        result = get_timer_service(notes_root).stop()
    except NotesError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    commit_time_entry(notes_root, result)
    timer_view.timer_stopped_view(str(notes_root), result)


@app.command("status, st")
def status() -> None:
    """Show the current timer."""
    notes_root = get_notes_root()
    try:
        timer_status = get_timer_service(notes_root).status()
    except NotesError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    timer_view.timer_status_view(str(notes_root), timer_status)


@app.command("report, rp")
def report(
    period: Annotated[
        str, typer.Argument(help="valid input: today, week, month")
    ] = "today",
) -> None:
    """Summarize the time logged in a period."""
    notes_root = get_notes_root()
    try:
        time_report = collect_time_data(
            period, lambda: load_tasks(notes_root), now_local()
        )
    except NotesError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    report_view.time_report_view(str(notes_root), time_report)
