# SPDX-License-Identifier: MIT

import os
from pathlib import Path
from typing import Iterator

from mdnotes import configuration
from mdnotes.markdown.extract import extract_tasks
from mdnotes.model.task import Task, TaskScan

NOTE_FILE_SUFFIXES = (".md", ".txt")


class TaskRepository:
    """
    Reads tasks out of the notes tree.

    Nothing is cached: every call rescans the markdown files, which are the
    only record of a task. Directories or files that cannot be read are
    skipped and reported in the scan result instead of aborting the scan.
    """

    def __init__(
        self,
        base_dir: Path,
        directories: list[str] = configuration.TASK_DIRECTORIES,
    ) -> None:
        self.base_dir = base_dir
        self.directories = directories

    def scan(self) -> TaskScan:
        tasks: list[Task] = []
        skipped: list[str] = []

        for file_path in self.__walk_note_files(skipped):
            try:
                tasks += extract_tasks(file_path)
            except (OSError, UnicodeDecodeError):
                skipped.append(str(file_path))

        return {"tasks": tasks, "skipped": skipped}

    def note_files(self) -> tuple[list[Path], list[str]]:
        skipped: list[str] = []
        files = list(self.__walk_note_files(skipped))
        return files, skipped

    def __walk_note_files(self, skipped: list[str]) -> Iterator[Path]:
        for directory in self.directories:
            directory_path = self.base_dir / directory
            if not directory_path.is_dir():
                continue

            def on_error(error: OSError) -> None:
                skipped.append(str(error.filename))

            for root, dir_names, file_names in os.walk(
                directory_path, onerror=on_error
            ):
                dir_names.sort()
                for file_name in sorted(file_names):
                    if file_name.endswith(NOTE_FILE_SUFFIXES):
                        yield Path(root) / file_name
