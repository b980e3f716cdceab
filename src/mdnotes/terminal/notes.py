# SPDX-License-Identifier: MIT

import logging
from pathlib import Path

from mdnotes.model.task import Task
from mdnotes.repository.configuration import CONFIGURATION_REPO
from mdnotes.repository.task import TaskRepository

logger = logging.getLogger(__name__)


def get_notes_root() -> Path:
    notes_root = CONFIGURATION_REPO.get_notes_path()
    logger.debug("using notes root %s", notes_root)
    return notes_root


def load_tasks(notes_root: Path) -> list[Task]:
    scan = TaskRepository(notes_root).scan()
    for skipped_path in scan["skipped"]:
        logger.warning("skipped unreadable path: %s", skipped_path)
    logger.debug("scanned %d tasks", len(scan["tasks"]))
    return scan["tasks"]
