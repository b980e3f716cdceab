# SPDX-License-Identifier: MIT

import shutil
import subprocess
from enum import Enum
from pathlib import Path
from typing import Optional

from mdnotes.errors import GitError


class GitCommand(Enum):
    STATUS = 0
    INIT = 1
    ADD = 2
    COMMIT = 3
    STATUS_PORCELAIN = 4
    DIFF_HEAD = 5


class Git:
    def is_git_repo(self, folder: Path) -> bool:
        self.__fail_if_git_not_available()
        result = self.__execute_git_command(GitCommand.STATUS, folder)
        if result.returncode != 0 or "not a git repository" in result.stderr:
            return False
        return True

    def init(self, folder: Path) -> None:
        self.__fail_if_git_not_available()
        self.__check(self.__execute_git_command(GitCommand.INIT, folder), "init")

    def add(self, folder: Path, paths: Optional[list[str]] = None) -> None:
        self.__fail_if_git_not_available()
        result = self.__execute_git_command(GitCommand.ADD, folder, paths=paths)
        self.__check(result, "add")

    def commit(self, folder: Path, message: str) -> None:
        self.__fail_if_git_not_available()
        result = self.__execute_git_command(GitCommand.COMMIT, folder, message=message)
        self.__check(result, "commit")

    def update(self, folder: Path, message: str) -> None:
        self.add(folder)
        self.commit(folder, message)

    def status_porcelain(self, folder: Path) -> str:
        self.__fail_if_git_not_available()
        result = self.__execute_git_command(GitCommand.STATUS_PORCELAIN, folder)
        self.__check(result, "status")
        return result.stdout

    def diff_head(self, folder: Path, path: str) -> str:
        self.__fail_if_git_not_available()
        result = self.__execute_git_command(
            GitCommand.DIFF_HEAD, folder, paths=[path]
        )
        self.__check(result, "diff")
        return result.stdout

    def __fail_if_git_not_available(self) -> None:
        git_available = shutil.which("git")
        if git_available is None:
            raise GitError("Git is not available on the system")

    def __check(self, result: subprocess.CompletedProcess[str], action: str) -> None:
        if result.returncode != 0:
            output = (result.stderr or result.stdout).strip()
            raise GitError(f"git {action} failed: {output}")

    def __execute_git_command(
        self,
        command: GitCommand,
        folder: Path,
        message: Optional[str] = None,
        paths: Optional[list[str]] = None,
    ) -> subprocess.CompletedProcess[str]:
        git_command = ["git", "-C", str(folder.resolve())]

        match command:
            case GitCommand.STATUS:
                git_command.append("status")
            case GitCommand.INIT:
                git_command.append("init")
            case GitCommand.ADD:
                git_command += ["add", "-A", "--"] + (paths or ["."])
            case GitCommand.COMMIT:
                git_command += ["commit", "-m", message or ""]
            case GitCommand.STATUS_PORCELAIN:
                git_command += ["status", "--porcelain"]
            case GitCommand.DIFF_HEAD:
                git_command += ["diff", "HEAD", "--"] + (paths or [])

        return subprocess.run(git_command, text=True, capture_output=True)
