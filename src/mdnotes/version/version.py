# SPDX-License-Identifier: MIT

from pathlib import Path
from textwrap import dedent

from mdnotes.version.git import Git

INITIAL_COMMIT_MESSAGE = "Initial commit: Set up notes structure"
NOTE_FILE_SUFFIXES = (".md", ".txt")


class Version:
    def __init__(self, notes_root: Path) -> None:
        self.notes_root = notes_root
        self.git = Git()

    def initialize_notes_versioning(self) -> bool:
        """Create the repository with a .gitignore and an initial commit; False if it already exists."""
        if (self.notes_root / ".git").exists():
            return False

        self.git.init(self.notes_root)
        gitignore_path = self.notes_root / ".gitignore"
        gitignore_path.write_text(
            dedent("""\
                # OS generated files
                .DS_Store
                .DS_Store?
                ._*
                .Spotlight-V100
                .Trashes
                ehthumbs.db
                Thumbs.db

                # Editor files
                .vscode/
                .idea/
                *.swp
                *.swo
                *~

                # Temporary files
                *.tmp
                *.temp

                # Timer state
                .timer_state.json
            """)
        )
        self.git.update(self.notes_root, INITIAL_COMMIT_MESSAGE)
        return True

    def is_versioned(self) -> bool:
        return self.git.is_git_repo(self.notes_root)

    def create_checkpoint(self, message: str) -> bool:
        """Commit every change in the notes root; False when there is nothing to commit."""
        if self.git.status_porcelain(self.notes_root).strip() == "":
            return False
        self.git.update(self.notes_root, message)
        return True

    def commit_file(self, file_path: Path, message: str) -> None:
        self.git.add(self.notes_root, [str(file_path.resolve())])
        self.git.commit(self.notes_root, message)

    def diff_file(self, relative_path: str) -> str:
        """Unified diff of one note against the last commit."""
        return self.git.diff_head(self.notes_root, relative_path)

    def changed_files(self) -> dict[str, str]:
        """Map changed note paths, relative to the notes root, to their porcelain status."""
        changed: dict[str, str] = {}
        for line in self.git.status_porcelain(self.notes_root).splitlines():
            if len(line) < 3:
                continue
            status = line[:2].strip()
            path = line[3:].strip()
            if " -> " in path:
                path = path.split(" -> ", 1)[1]
            path = path.strip('"')
            if path.endswith(NOTE_FILE_SUFFIXES):
                changed[path] = status
        return changed
