# SPDX-License-Identifier: MIT

import os
import tempfile
from pathlib import Path


def write_text_atomic(path: Path, content: str) -> None:
    """
    Replace the file at path with content via a temp file and rename.

    Text is written as UTF-8 without newline translation, so the caller's
    line endings reach the disk unchanged.
    """
    fd, temp_path = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        if path.exists():
            os.chmod(temp_path, path.stat().st_mode & 0o777)
        os.replace(temp_path, path)
    except BaseException:
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise
