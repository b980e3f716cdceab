# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from mdnotes.errors import GitError, NotesError
from mdnotes.repository.configuration import CONFIGURATION_REPO
from mdnotes.repository.task import TaskRepository
from mdnotes.service.note import (
    collect_todo_changes,
    create_note,
    get_changed_notes,
    init_notes,
    list_notes,
)
from mdnotes.service.search import search_notes, split_search_terms
from mdnotes.terminal.notes import get_notes_root
from mdnotes.time import today_local
from mdnotes.version.version import Version
from mdnotes.view.view.views import note as note_view
from mdnotes.view.view.views import search as search_view

logger = logging.getLogger(__name__)

DEFAULT_SAVE_MESSAGE = "Update notes"


def init() -> None:
    """Create the notes folder structure, templates and a git repository."""
    notes_root = get_notes_root()
    setup = init_notes(notes_root)

    versioning = ""
    if CONFIGURATION_REPO.get_config()["use_git_versioning"]:
        try:
            if Version(notes_root).initialize_notes_versioning():
                versioning = "[green]Initialized git repository[/green]"
            else:
                versioning = "[grey50]Git repository already exists[/grey50]"
        except GitError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)

    note_view.init_view(str(notes_root), setup, versioning)


def create(
    note_type: Annotated[
        str,
        typer.Argument(help="valid input: daily, project, meeting, design, learning"),
    ],
    title: Annotated[
        Optional[list[str]],
        typer.Argument(help="note title, required for every type except daily"),
    ] = None,
) -> None:
    """Create a note from its template."""
    notes_root = get_notes_root()
    title_text = " ".join(title or [])

    try:
        creation = create_note(notes_root, note_type, title_text, today_local())
    except NotesError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if creation["created"] and CONFIGURATION_REPO.get_config()["use_git_versioning"]:
        version = Version(notes_root)
        try:
            version.commit_file(
                Path(creation["path"]),
                f"Add {creation['note_type']} note: {creation['file_name']}",
            )
        except GitError as e:
            logger.warning("note was created but not committed: %s", e)

    note_view.note_created_view(str(notes_root), creation)


def list_command() -> None:
    """List the notes in each notes folder."""
    notes_root = get_notes_root()
    note_view.notes_view(str(notes_root), list_notes(notes_root))


def search(
    terms: Annotated[
        list[str],
        typer.Argument(help="words to search for; words starting with # filter by tag"),
    ],
) -> None:
    """Search note lines for text and tags."""
    notes_root = get_notes_root()
    query, tags = split_search_terms(terms)

    files, skipped = TaskRepository(notes_root).note_files()
    results, unreadable = search_notes(files, query, tags)
    for skipped_path in skipped + unreadable:
        logger.warning("skipped unreadable path: %s", skipped_path)

    search_view.search_results_view(str(notes_root), query, tags, results)


def save(
    message: Annotated[
        Optional[list[str]], typer.Argument(help="commit message")
    ] = None,
) -> None:
    """Commit every change in the notes folder."""
    notes_root = get_notes_root()
    commit_message = " ".join(message or []) or DEFAULT_SAVE_MESSAGE

    console = Console()
    version = Version(notes_root)
    try:
        if not version.is_versioned():
            typer.echo(
                f"Error: {notes_root} is not a git repository, run mdnotes init",
                err=True,
            )
            raise typer.Exit(1)
        committed = version.create_checkpoint(commit_message)
    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if committed:
        console.print(f"[green]Changes committed:[/green] {commit_message}")
    else:
        console.print("[green]No changes to commit[/green]")


def status() -> None:
    """Show the notes changed since the last commit."""
    notes_root = get_notes_root()
    version = Version(notes_root)
    try:
        if not version.is_versioned():
            typer.echo(
                f"Error: {notes_root} is not a git repository, run mdnotes init",
                err=True,
            )
            raise typer.Exit(1)
        changed = version.changed_files()
    except GitError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    note_view.changed_notes_view(
        str(notes_root),
        get_changed_notes(notes_root, changed),
        collect_todo_changes(notes_root, changed, version.diff_file),
    )
