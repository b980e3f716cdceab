# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional, cast

import typer

from mdnotes.model.task_filter import SortBy
from mdnotes.query.filter import filter_tasks, normalize_tag
from mdnotes.query.sort import sort_tasks
from mdnotes.service.task import analyze_task_stats, detect_context
from mdnotes.template.task_filter import get_task_filter_template
from mdnotes.terminal.notes import get_notes_root, load_tasks
from mdnotes.terminal.validate import validate_priority, validate_sort
from mdnotes.time import today_local
from mdnotes.view.view.views import task as task_report


def tasks(
    tags: Annotated[
        Optional[list[str]],
        typer.Option(
            "--tag",
            "-t",
            help="accepts multiple tag options, with or without the leading #",
        ),
    ] = None,
    priority: Annotated[
        Optional[str],
        typer.Option(
            "--priority",
            "-p",
            callback=validate_priority,
            help="valid input: high, medium, low",
        ),
    ] = None,
    overdue: Annotated[
        bool, typer.Option("--overdue", "-o", help="Only tasks past their due date")
    ] = False,
    today: Annotated[
        bool, typer.Option("--today", help="Only tasks due today")
    ] = False,
    focus: Annotated[
        bool, typer.Option("--focus", "-f", help="Overdue and due today tasks")
    ] = False,
    all: Annotated[
        bool, typer.Option("--all", "-a", help="Every task, without the smart default")
    ] = False,
    summary: Annotated[
        bool, typer.Option("--summary", help="Category counts and critical tasks")
    ] = False,
    full: Annotated[
        bool, typer.Option("--full", help="Detailed list of every task")
    ] = False,
    file_pattern: Annotated[
        Optional[str],
        typer.Option("--file", help="Only tasks whose file path contains this text"),
    ] = None,
    sort_by: Annotated[
        Optional[str],
        typer.Option(
            "--sort",
            "-s",
            callback=validate_sort,
            help="valid input: due, priority, file",
        ),
    ] = None,
) -> None:
    """Show tasks from the notes, by default the ones needing attention now."""
    notes_root = get_notes_root()
    current_day = today_local()

    criteria = get_task_filter_template()
    criteria["tags"] = [normalize_tag(tag) for tag in tags or []]
    criteria["priority"] = priority
    criteria["overdue"] = overdue
    criteria["today"] = today
    criteria["focus"] = focus
    criteria["all"] = all
    criteria["summary"] = summary
    criteria["full"] = full
    criteria["file_pattern"] = file_pattern
    # validate_sort has narrowed the option to a SortBy
    criteria["sort_by"] = cast(Optional[SortBy], sort_by)

    has_flags = (
        all
        or focus
        or overdue
        or today
        or summary
        or full
        or len(criteria["tags"]) > 0
        or priority is not None
        or file_pattern is not None
    )

    if not has_flags:
        context = detect_context(notes_root, Path.cwd())
        if context is not None:
            criteria["file_pattern"] = str(notes_root / context)
            report_name = f"Tasks in {context}/"
        else:
            criteria["focus"] = True
            report_name = "Focus: Overdue & Today's Tasks"
    elif focus:
        report_name = "Focus: Overdue & Today's Tasks"
    else:
        report_name = "Tasks"

    all_tasks = load_tasks(notes_root)
    filtered_tasks = filter_tasks(all_tasks, criteria, current_day)

    if len(filtered_tasks) == 0:
        task_report.no_tasks_view(len(all_tasks) > 0)
        return

    stats = analyze_task_stats(filtered_tasks, current_day)
    if summary:
        task_report.task_summary_view(
            str(notes_root), filtered_tasks, stats, current_day
        )
        return

    task_report.tasks_view(
        str(notes_root),
        report_name,
        sort_tasks(filtered_tasks, criteria["sort_by"]),
        stats,
        current_day,
    )
