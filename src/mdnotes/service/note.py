# SPDX-License-Identifier: MIT

import re
from pathlib import Path
from textwrap import dedent
from typing import Callable

import pendulum

from mdnotes import configuration
from mdnotes.errors import GitError, InvalidNoteType, MissingNoteTitle
from mdnotes.markdown.extract import extract_tasks
from mdnotes.markdown.line import TASK_PATTERN, classify_line
from mdnotes.model.note import (
    NOTE_TYPES,
    ChangedNote,
    NoteCreation,
    NoteFolder,
    NoteSetup,
    NoteType,
    TodoChange,
    TodoChanges,
)
from mdnotes.template.note import (
    NOTE_TEMPLATES,
    get_todo_changes_template,
    render_note_template,
)
from mdnotes.time import date_to_str

NOTE_DIRECTORY_BY_TYPE = {
    NoteType.DAILY: "daily",
    NoteType.PROJECT: "projects",
    NoteType.MEETING: "meetings",
    NoteType.DESIGN: "design",
    NoteType.LEARNING: "learning",
}

SUMMARY_LINE_LIMIT = 20
TITLE_MAX_LENGTH = 30
DIFF_LINE_PREFIXES = ("+", "-")

README = dedent("""\
    # Notes

    Organized note-taking system with templates and folder structure.

    ## Usage

    ```bash
    mdnotes init                          # Initialize folder structure
    mdnotes create daily                  # Create today's daily note
    mdnotes create project "Feature Name" # Create project documentation
    mdnotes create meeting "Team Standup" # Create meeting notes
    mdnotes create design "API Design"    # Create design document
    mdnotes create learning "New Topic"   # Create learning notes
    mdnotes list                          # List all notes
    mdnotes tasks                         # Show tasks
    mdnotes time start "task text"        # Track time on a task
    ```

    ## Structure

    - `daily/` - Daily notes (date-based)
    - `projects/` - Project documentation
    - `meetings/` - Meeting notes
    - `design/` - Technical design documents
    - `learning/` - Learning notes and tutorials
    - `todos/` - Task management
    - `templates/` - Note templates
    - `archive/` - Completed/old items
    """)

KEBAB_SEPARATOR_PATTERN = re.compile(r"[^a-zA-Z0-9]+")


def kebab_case(text: str) -> str:
    return KEBAB_SEPARATOR_PATTERN.sub("-", text).lower().strip("-")


def validate_note_type(note_type: str) -> str:
    normalized = note_type.strip().lower()
    if normalized not in NOTE_TYPES:
        raise InvalidNoteType(note_type)
    return normalized


def get_note_path(
    notes_root: Path, note_type: str, title: str, today: pendulum.Date
) -> Path:
    """
    Work out where a new note lives.

    Daily notes are named after the date, meeting notes after the date and
    title, and the other types after their title alone.

    Raises:
        InvalidNoteType: if note_type is not a known note type
        MissingNoteTitle: if a note other than a daily note has no title
    """
    note_type = validate_note_type(note_type)
    directory = notes_root / NOTE_DIRECTORY_BY_TYPE[note_type]

    if note_type == NoteType.DAILY:
        return directory / f"{date_to_str(today)}.md"

    slug = kebab_case(title)
    if slug == "":
        raise MissingNoteTitle(note_type)
    if note_type == NoteType.MEETING:
        return directory / f"{date_to_str(today)}-{slug}.md"
    return directory / f"{slug}.md"


def create_note(
    notes_root: Path, note_type: str, title: str, today: pendulum.Date
) -> NoteCreation:
    """Render a note from its template; an existing note is left untouched."""
    note_type = validate_note_type(note_type)
    path = get_note_path(notes_root, note_type, title, today)
    result: NoteCreation = {
        "path": str(path),
        "file_name": path.name,
        "note_type": note_type,
        "created": False,
    }

    if path.exists():
        return result

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_note_template(note_type, title, today), encoding="utf-8")
    result["created"] = True
    return result


def init_notes(notes_root: Path) -> NoteSetup:
    setup: NoteSetup = {"created": [], "existing": []}

    for directory in configuration.INIT_DIRECTORIES:
        directory_path = notes_root / directory
        if directory_path.is_dir():
            setup["existing"].append(f"{directory}/")
        else:
            directory_path.mkdir(parents=True, exist_ok=True)
            setup["created"].append(f"{directory}/")

    for note_type, template in NOTE_TEMPLATES.items():
        __write_if_missing(notes_root, f"templates/{note_type}.md", template, setup)

    __write_if_missing(notes_root, "README.md", README, setup)
    return setup


def list_notes(
    notes_root: Path, directories: list[str] = configuration.NOTE_DIRECTORIES
) -> list[NoteFolder]:
    folders: list[NoteFolder] = []
    for directory in directories:
        directory_path = notes_root / directory
        if not directory_path.is_dir():
            continue
        files = sorted(
            entry.name
            for entry in directory_path.iterdir()
            if entry.is_file() and entry.suffix in (".md", ".txt")
        )
        if len(files) > 0:
            folders.append({"name": directory, "files": files})
    return folders


def summarize_note(file_path: Path) -> tuple[str, int]:
    """
    Return a short title and the task count from the top of a note.

    The title is the first "# " heading, or else the first line longer than
    ten characters that is not front matter.
    """
    title = ""
    task_count = 0
    try:
        with file_path.open(encoding="utf-8") as f:
            for line_number, line in enumerate(f):
                if line_number >= SUMMARY_LINE_LIMIT:
                    break
                stripped = line.strip()
                if title == "":
                    if stripped.startswith("# "):
                        title = stripped[2:]
                    elif len(stripped) > 10 and not stripped.startswith("---"):
                        title = stripped
                if TASK_PATTERN.match(line):
                    task_count += 1
    except (OSError, UnicodeDecodeError):
        return "", 0

    if len(title) > TITLE_MAX_LENGTH:
        title = title[: TITLE_MAX_LENGTH - 3] + "..."
    return title, task_count


def get_changed_notes(notes_root: Path, changed: dict[str, str]) -> list[ChangedNote]:
    """Group porcelain statuses into modified, added and untracked notes, sorted by path."""
    changed_notes: list[ChangedNote] = []
    for path, status in sorted(changed.items()):
        if "M" in status:
            category = "modified"
        elif "A" in status:
            category = "added"
        elif "?" in status:
            category = "untracked"
        else:
            continue
        title, task_count = summarize_note(notes_root / path)
        changed_notes.append(
            {
                "path": path,
                "status": category,
                "title": title,
                "task_count": task_count,
            }
        )
    return changed_notes


def analyze_todo_changes(
    notes_root: Path, path: str, status: str, get_diff: Callable[[str], str]
) -> TodoChanges:
    """
    Work out which checkbox tasks a changed note gained, completed or modified.

    An untracked note has no history, so every task in it is new. A tracked
    note is read from its diff against the last commit; a diff that cannot be
    produced contributes no changes.
    """
    if "?" in status:
        changes = get_todo_changes_template()
        try:
            tasks = extract_tasks(notes_root / path)
        except (OSError, UnicodeDecodeError):
            return changes
        for task in tasks:
            changes["new"].append(
                {"text": task["text"], "path": path, "line": task["line"]}
            )
        return changes

    try:
        diff = get_diff(path)
    except GitError:
        return get_todo_changes_template()
    return parse_todo_diff(diff, path)


def parse_todo_diff(diff: str, path: str) -> TodoChanges:
    """
    Read task changes out of a unified diff.

    An added unchecked task is new, an added checked task is completed and a
    removed unchecked task counts as modified. Repeats are dropped.
    """
    changes = get_todo_changes_template()
    for diff_line in diff.splitlines():
        if diff_line.startswith(("+++", "---")) or not diff_line.startswith(
            DIFF_LINE_PREFIXES
        ):
            continue
        line = classify_line(diff_line[1:])
        if line["kind"] != "task":
            continue

        bucket: list[TodoChange]
        if diff_line.startswith("+"):
            bucket = changes["completed"] if line["checked"] else changes["new"]
        elif not line["checked"]:
            bucket = changes["modified"]
        else:
            continue

        change: TodoChange = {"text": line["text"], "path": path, "line": None}
        if change not in bucket:
            bucket.append(change)
    return changes


def collect_todo_changes(
    notes_root: Path, changed: dict[str, str], get_diff: Callable[[str], str]
) -> TodoChanges:
    collected = get_todo_changes_template()
    for path, status in sorted(changed.items()):
        changes = analyze_todo_changes(notes_root, path, status, get_diff)
        collected["new"] += changes["new"]
        collected["completed"] += changes["completed"]
        collected["modified"] += changes["modified"]
    return collected


def __write_if_missing(
    notes_root: Path, relative_path: str, content: str, setup: NoteSetup
) -> None:
    path = notes_root / relative_path
    if path.exists():
        setup["existing"].append(relative_path)
        return
    path.write_text(content, encoding="utf-8")
    setup["created"].append(relative_path)
