# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mdnotes.model.note import (
    ChangedNote,
    NoteCreation,
    NoteFolder,
    NoteSetup,
    TodoChange,
    TodoChanges,
)
from mdnotes.view.view.util import pluralize, truncate
from mdnotes.view.view.views.header import header

STATUS_STYLES = {"modified": "yellow", "added": "green", "untracked": "cyan"}
TODO_CHANGE_SECTIONS = (
    ("new", "New todos", "green", "+"),
    ("completed", "Completed todos", "yellow", "✓"),
    ("modified", "Modified todos", "cyan", "~"),
)
TODO_TEXT_LENGTH = 60


def init_view(notes_root: str, setup: NoteSetup, versioning: str) -> None:
    header(notes_root, "init")
    console = Console()
    for path in setup["created"]:
        console.print(f"[green]Created[/green] {escape(path)}")
    for path in setup["existing"]:
        console.print(f"[grey50]Already exists[/grey50] {escape(path)}")
    if versioning != "":
        console.print(versioning)
    console.print("[bold green]Notes folder structure initialized![/bold green]")


def note_created_view(notes_root: str, creation: NoteCreation) -> None:
    header(notes_root, "create")
    console = Console()
    if creation["created"]:
        console.print(
            f"[bold green]Created new {creation['note_type']} note:[/bold green] "
            f"{escape(creation['path'])}"
        )
    else:
        console.print(
            f"[yellow]Note already exists:[/yellow] {escape(creation['path'])}"
        )


def notes_view(notes_root: str, folders: list[NoteFolder]) -> None:
    header(notes_root, "notes")
    console = Console()
    if len(folders) == 0:
        console.print("[grey50]No notes yet.[/grey50]")
        return

    notes_table = Table(box=box.SIMPLE)
    notes_table.add_column("folder")
    notes_table.add_column("note")
    for folder in folders:
        for index, file_name in enumerate(folder["files"]):
            notes_table.add_row(
                f"{folder['name']}/" if index == 0 else "", escape(file_name)
            )
    console.print(notes_table)


def changed_notes_view(
    notes_root: str, changed_notes: list[ChangedNote], todo_changes: TodoChanges
) -> None:
    header(notes_root, "Notes Status")
    console = Console()
    if len(changed_notes) == 0:
        console.print("[bold green]No changed notes[/bold green]")
        console.print("[grey50]All notes are up to date[/grey50]")
        return

    console.print(f"[bold]Changed Notes ({len(changed_notes)}):[/bold]")
    changed_table = Table(box=box.SIMPLE)
    changed_table.add_column("status")
    changed_table.add_column("note")
    changed_table.add_column("title")
    changed_table.add_column("tasks", justify="right")

    for status in ("modified", "added", "untracked"):
        style = STATUS_STYLES[status]
        for changed_note in changed_notes:
            if changed_note["status"] != status:
                continue
            changed_table.add_row(
                f"[{style}]{status}[/{style}]",
                escape(changed_note["path"]),
                f'"{escape(changed_note["title"])}"' if changed_note["title"] else "",
                pluralize(changed_note["task_count"], "task")
                if changed_note["task_count"] > 0
                else "",
            )
    console.print(changed_table)

    console.print("[bold]Todo Changes:[/bold]")
    if all(len(todo_changes[kind]) == 0 for kind, _, _, _ in TODO_CHANGE_SECTIONS):
        console.print("  [grey50]No todo changes in modified files[/grey50]")
        return

    for kind, title, style, marker in TODO_CHANGE_SECTIONS:
        changes = todo_changes[kind]
        if len(changes) == 0:
            continue
        console.print(f"  [{style}]{title} ({len(changes)}):[/{style}]")
        for change in changes:
            console.print(f"    {marker} {__render_todo_change(change)}")
        console.print()


def __render_todo_change(change: TodoChange) -> str:
    location = change["path"]
    if change["line"] is not None:
        location += f":L{change['line']}"
    return (
        f"{escape(truncate(change['text'], TODO_TEXT_LENGTH))} "
        f"[grey50]{escape(location)}[/grey50]"
    )
