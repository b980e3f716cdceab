"""Tests for note creation, listing and search."""

from pathlib import Path
from typing import Callable

import pendulum
import pytest

from mdnotes.errors import GitError, InvalidNoteType, MissingNoteTitle
from mdnotes.service.note import (
    analyze_todo_changes,
    collect_todo_changes,
    create_note,
    get_changed_notes,
    get_note_path,
    init_notes,
    kebab_case,
    list_notes,
    parse_todo_diff,
    summarize_note,
)
from mdnotes.service.search import search_file, search_notes, split_search_terms

TODAY = pendulum.date(2024, 1, 15)

NOTE_DIFF = """diff --git a/projects/alpha.md b/projects/alpha.md
--- a/projects/alpha.md
+++ b/projects/alpha.md
@@ -1,4 +1,5 @@
 # Alpha
-- [ ] Ship release
+- [x] Ship release
+- [ ] Write changelog
+  - [ ] Write changelog
-- [x] Old done task
+plain text
"""


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Team Standup!", "team-standup"),
        ("  API   Design v2 ", "api-design-v2"),
        ("Über cool", "ber-cool"),
        ("!!!", ""),
    ],
)
def test_kebab_case(text: str, expected: str) -> None:
    """Runs of other characters become single dashes."""
    assert kebab_case(text) == expected


def test_get_note_path(notes_root: Path) -> None:
    """Each note type has its own folder and naming."""
    assert get_note_path(notes_root, "daily", "", TODAY) == (
        notes_root / "daily" / "2024-01-15.md"
    )
    assert get_note_path(notes_root, "Meeting", "Team Standup", TODAY) == (
        notes_root / "meetings" / "2024-01-15-team-standup.md"
    )
    assert get_note_path(notes_root, "project", "Feature X", TODAY) == (
        notes_root / "projects" / "feature-x.md"
    )


def test_get_note_path_errors(notes_root: Path) -> None:
    """Unknown types and missing titles are rejected."""
    with pytest.raises(InvalidNoteType):
        get_note_path(notes_root, "diary", "x", TODAY)
    with pytest.raises(MissingNoteTitle):
        get_note_path(notes_root, "project", "", TODAY)
    with pytest.raises(MissingNoteTitle):
        get_note_path(notes_root, "design", "???", TODAY)


def test_create_note(notes_root: Path) -> None:
    """A new note is rendered from its template."""
    creation = create_note(notes_root, "project", "Feature X", TODAY)

    assert creation["created"] is True
    assert creation["file_name"] == "feature-x.md"
    content = Path(creation["path"]).read_text(encoding="utf-8")
    assert content.startswith("# Feature X")


def test_create_note_keeps_existing(
    notes_root: Path, write_note: Callable[[str, str], Path]
) -> None:
    """An existing note is never overwritten."""
    path = write_note("daily/2024-01-15.md", "my notes")

    creation = create_note(notes_root, "daily", "", TODAY)

    assert creation["created"] is False
    assert path.read_text(encoding="utf-8") == "my notes"


def test_init_notes(tmp_path: Path) -> None:
    """Init creates folders, templates and a README once."""
    notes_root = tmp_path / "notes"

    setup = init_notes(notes_root)

    assert "daily/" in setup["created"]
    assert "archive/" in setup["created"]
    assert "templates/meeting.md" in setup["created"]
    assert "README.md" in setup["created"]
    assert (notes_root / "templates" / "learning.md").is_file()
    assert setup["existing"] == []

    again = init_notes(notes_root)
    assert again["created"] == []
    assert "README.md" in again["existing"]


def test_list_notes(notes_root: Path, write_note: Callable[[str, str], Path]) -> None:
    """Folders with notes are listed with sorted file names."""
    write_note("projects/b.md", "")
    write_note("projects/a.txt", "")
    write_note("projects/image.png", "")
    write_note("daily/2024-01-15.md", "")

    folders = list_notes(notes_root)

    assert folders == [
        {"name": "daily", "files": ["2024-01-15.md"]},
        {"name": "projects", "files": ["a.txt", "b.md"]},
    ]


def test_summarize_note(write_note: Callable[[str, str], Path]) -> None:
    """The heading is the title and checkboxes are counted."""
    path = write_note(
        "projects/long.md",
        "# A rather long project title for testing\n\n- [ ] One\n- [x] Two\n",
    )
    title, task_count = summarize_note(path)
    assert title == "A rather long project title..."
    assert task_count == 2


def test_get_changed_notes(
    notes_root: Path, write_note: Callable[[str, str], Path]
) -> None:
    """Porcelain codes map to modified, added and untracked."""
    write_note("daily/2024-01-15.md", "# Monday\n- [ ] Task\n")
    changed = get_changed_notes(
        notes_root,
        {
            "daily/2024-01-15.md": " M",
            "projects/new.md": "A ",
            "todos/list.md": "??",
            "old.md": " D",
        },
    )

    assert [(note["path"], note["status"]) for note in changed] == [
        ("daily/2024-01-15.md", "modified"),
        ("projects/new.md", "added"),
        ("todos/list.md", "untracked"),
    ]
    assert changed[0]["title"] == "Monday"
    assert changed[0]["task_count"] == 1


def test_analyze_todo_changes_untracked(
    notes_root: Path, write_note: Callable[[str, str], Path]
) -> None:
    """Every task in an untracked note is new."""
    write_note("todos/list.md", "# List\n- [ ] One\n- [x] Two\n")

    def no_diff(path: str) -> str:
        raise AssertionError(f"untracked notes have no diff: {path}")

    changes = analyze_todo_changes(notes_root, "todos/list.md", "??", no_diff)

    assert changes["new"] == [
        {"text": "One", "path": "todos/list.md", "line": 2},
        {"text": "Two", "path": "todos/list.md", "line": 3},
    ]
    assert changes["completed"] == []
    assert changes["modified"] == []


def test_parse_todo_diff() -> None:
    """Added, checked and removed tasks are told apart and deduplicated."""
    changes = parse_todo_diff(NOTE_DIFF, "projects/alpha.md")

    assert changes == {
        "new": [
            {"text": "Write changelog", "path": "projects/alpha.md", "line": None}
        ],
        "completed": [
            {"text": "Ship release", "path": "projects/alpha.md", "line": None}
        ],
        "modified": [
            {"text": "Ship release", "path": "projects/alpha.md", "line": None}
        ],
    }


def test_analyze_todo_changes_without_diff(notes_root: Path) -> None:
    """A diff git cannot produce contributes nothing."""

    def failing_diff(path: str) -> str:
        raise GitError(f"git diff failed for {path}")

    changes = analyze_todo_changes(notes_root, "projects/alpha.md", " M", failing_diff)

    assert changes == {"new": [], "completed": [], "modified": []}


def test_collect_todo_changes(
    notes_root: Path, write_note: Callable[[str, str], Path]
) -> None:
    """Changes from every changed note are merged."""
    write_note("todos/list.md", "- [ ] Call back\n")
    diffs = {"projects/alpha.md": NOTE_DIFF}

    changes = collect_todo_changes(
        notes_root,
        {"todos/list.md": "??", "projects/alpha.md": " M"},
        diffs.__getitem__,
    )

    assert [change["text"] for change in changes["new"]] == [
        "Write changelog",
        "Call back",
    ]
    assert [change["text"] for change in changes["completed"]] == ["Ship release"]


def test_split_search_terms() -> None:
    """Words starting with # are tags."""
    assert split_search_terms(["auth", "#urgent", "bug"]) == ("auth bug", ["#urgent"])


def test_search_file(write_note: Callable[[str, str], Path]) -> None:
    """Lines must contain the query and one of the tags."""
    path = write_note(
        "projects/alpha.md",
        "- [ ] Fix auth bug #urgent\n- [ ] Auth docs #docs\nunrelated\n",
    )

    results = search_file(path, "auth", ["urgent"])
    assert [(result["line"], result["tags"]) for result in results] == [
        (1, ["#urgent"])
    ]
    assert len(search_file(path, "AUTH", [])) == 2
    assert len(search_file(path, "", ["#docs"])) == 1


def test_search_notes_skips_unreadable(
    notes_root: Path, write_note: Callable[[str, str], Path]
) -> None:
    """Files that cannot be decoded are reported."""
    good = write_note("todos/list.md", "auth task")
    bad = notes_root / "todos" / "bad.md"
    bad.write_bytes(b"auth \xff")

    results, skipped = search_notes([bad, good], "auth", [])

    assert [result["content"] for result in results] == ["auth task"]
    assert skipped == [str(bad)]
