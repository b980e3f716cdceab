# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict


class NoteType:
    DAILY = "daily"
    PROJECT = "project"
    MEETING = "meeting"
    DESIGN = "design"
    LEARNING = "learning"


NOTE_TYPES = [
    NoteType.DAILY,
    NoteType.PROJECT,
    NoteType.MEETING,
    NoteType.DESIGN,
    NoteType.LEARNING,
]


class NoteFolder(TypedDict):
    name: str
    files: list[str]


class ChangedNote(TypedDict):
    path: str
    status: str
    title: str
    task_count: int


class NoteSetup(TypedDict):
    created: list[str]
    existing: list[str]


class NoteCreation(TypedDict):
    path: str
    file_name: str
    note_type: str
    created: bool


class TodoChange(TypedDict):
    text: str
    path: str
    line: Optional[int]


class TodoChanges(TypedDict):
    new: list[TodoChange]
    completed: list[TodoChange]
    modified: list[TodoChange]
