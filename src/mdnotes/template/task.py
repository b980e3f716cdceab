# SPDX-License-Identifier: MIT

import pendulum

from mdnotes.model.task import Task


def get_task_template(text: str, line: int, indent: int, file_path: str) -> Task:
    return {
        "text": text,
        "line": line,
        "indent": indent,
        "completed": False,
        "due": None,
        "estimate": None,
        "tags": [],
        "file_path": file_path,
        "time_entries": [],
        "total_time": pendulum.duration(),
        "remaining": None,
    }
