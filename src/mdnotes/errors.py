# SPDX-License-Identifier: MIT


class NotesError(Exception):
    """Base class for every failure the notes core reports to its caller."""

    pass


# parse level


class InvalidDurationFormat(NotesError):
    def __init__(self, value: str) -> None:
        super().__init__(
            f"invalid duration format: '{value}' (expected e.g. 1h15m, 2h or 45m)"
        )
        self.value = value


class MalformedTimeEntry(NotesError):
    def __init__(self, line: str, reason: str) -> None:
        super().__init__(f"malformed time entry ({reason}): {line.strip()}")
        self.line = line
        self.reason = reason


# lookup


class TaskNotFound(NotesError):
    def __init__(self, search_text: str) -> None:
        super().__init__(f"no task found matching: {search_text}")
        self.search_text = search_text


class NoActiveTimer(NotesError):
    def __init__(self) -> None:
        super().__init__("no active timer found")


class AlreadyPaused(NotesError):
    def __init__(self) -> None:
        super().__init__("timer is already paused")


class NotPaused(NotesError):
    def __init__(self) -> None:
        super().__init__("timer is not paused")


class NothingToResume(NotesError):
    def __init__(self) -> None:
        super().__init__("no paused timer found and no task specified")


# single file I/O


class FileReadError(NotesError):
    def __init__(self, path: str, cause: Exception) -> None:
        super().__init__(f"failed to read {path}: {cause}")
        self.path = path


class FileWriteError(NotesError):
    def __init__(self, path: str, cause: Exception) -> None:
        super().__init__(f"failed to write {path}: {cause}")
        self.path = path


class LineOutOfRange(NotesError):
    def __init__(self, path: str, line: int, line_count: int) -> None:
        super().__init__(
            f"task line {line} not found in {path} ({line_count} lines)"
        )
        self.path = path
        self.line = line


class TimerStateError(NotesError):
    def __init__(self, path: str, cause: Exception) -> None:
        super().__init__(f"unusable timer state in {path}: {cause}")
        self.path = path


# validation


class InvalidPeriod(NotesError):
    def __init__(self, period: str) -> None:
        super().__init__(
            f"invalid period: {period}. Use 'today', 'week', or 'month'"
        )
        self.period = period


class InvalidNoteType(NotesError):
    def __init__(self, note_type: str) -> None:
        super().__init__(
            f"invalid note type: {note_type}. "
            "Available types: daily, project, meeting, design, learning"
        )
        self.note_type = note_type


class MissingNoteTitle(NotesError):
    def __init__(self, note_type: str) -> None:
        super().__init__(f"{note_type} notes require a title")
        self.note_type = note_type


# version control


class GitError(NotesError):
    pass
