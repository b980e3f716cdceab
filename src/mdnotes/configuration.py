# SPDX-License-Identifier: MIT

import os
from pathlib import Path
from typing import NotRequired, Optional, TypedDict

import platformdirs

APP_NAME = "mdnotes"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

NOTES_DIR_ENV_VAR = "MDNOTES_DIR"

# directories scanned for tasks, in scan order
TASK_DIRECTORIES = ["daily", "projects", "meetings", "design", "learning", "todos"]
# directories shown by the list command
NOTE_DIRECTORIES = ["daily", "projects", "meetings", "design", "learning"]
# directories created by init
INIT_DIRECTORIES = [
    "daily",
    "projects",
    "meetings",
    "design",
    "learning",
    "todos",
    "templates",
    "archive",
]

TIMER_STATE_FILENAME = ".timer_state.json"


class Configuration(TypedDict):
    notes_path: Optional[str]
    use_git_versioning: bool
    show_header: bool
    commit_time_entries: NotRequired[bool]


def get_default_configuration() -> Configuration:
    return {
        "notes_path": None,
        "use_git_versioning": True,
        "show_header": True,
        "commit_time_entries": False,
    }


def resolve_notes_path(notes_path: Optional[str]) -> Path:
    """
    Resolve the notes root.

    The MDNOTES_DIR environment variable wins over the configured notes_path,
    and the current working directory is used when neither is set.
    """
    env_path = os.environ.get(NOTES_DIR_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser().resolve()
    if notes_path is not None:
        return Path(notes_path).expanduser().resolve()
    return Path.cwd().resolve()


def timer_state_path(notes_root: Path) -> Path:
    return notes_root / TIMER_STATE_FILENAME
