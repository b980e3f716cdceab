"""Smoke tests for the command line interface."""

from pathlib import Path
from typing import Callable

import pytest
from typer.testing import CliRunner

from mdnotes import configuration
from mdnotes.markdown.extract import extract_tasks
from mdnotes.repository.configuration import CONFIGURATION_REPO
from mdnotes.terminal.app import app

runner = CliRunner()

AUTH_NOTE = "# Alpha\n\n- [ ] Fix auth bug due:2099-01-01 #urgent\n- [ ] Write docs\n"


@pytest.fixture(autouse=True)
def cli_environment(notes_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point the CLI at the test notes root without git or a user config."""
    config = configuration.get_default_configuration()
    config["use_git_versioning"] = False
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", config)
    monkeypatch.setenv(configuration.NOTES_DIR_ENV_VAR, str(notes_root))
    monkeypatch.setenv("COLUMNS", "200")


def test_tasks_all(write_note: Callable[[str, str], Path]) -> None:
    """tasks --all lists every task."""
    write_note("projects/alpha.md", AUTH_NOTE)

    result = runner.invoke(app, ["tasks", "--all"])

    assert result.exit_code == 0, result.output
    assert "Fix auth bug" in result.output
    assert "Write docs" in result.output


def test_tasks_alias_with_no_matches(write_note: Callable[[str, str], Path]) -> None:
    """The t alias works and an empty result is explained."""
    write_note("projects/alpha.md", AUTH_NOTE)

    result = runner.invoke(app, ["t", "--overdue"])

    assert result.exit_code == 0, result.output
    assert "No tasks match your filters" in result.output


def test_tasks_sort_option(write_note: Callable[[str, str], Path]) -> None:
    """Sort orders are matched case-insensitively and unknown ones rejected."""
    write_note("projects/alpha.md", AUTH_NOTE)

    result = runner.invoke(app, ["tasks", "--all", "--sort", "PRIORITY"])
    assert result.exit_code == 0, result.output
    assert result.output.index("Fix auth bug") < result.output.index("Write docs")

    result = runner.invoke(app, ["tasks", "--all", "--sort", "size"])
    assert result.exit_code != 0


def test_tasks_rejects_unknown_priority() -> None:
    """Bad option values fail before any scan."""
    result = runner.invoke(app, ["tasks", "--priority", "extreme"])
    assert result.exit_code != 0


def test_time_start_status_stop(
    notes_root: Path, write_note: Callable[[str, str], Path]
) -> None:
    """A tracked session ends up in the task's time log."""
    path = write_note("projects/alpha.md", AUTH_NOTE)

    started = runner.invoke(app, ["time", "start", "auth"])
    assert started.exit_code == 0, started.output
    assert "Timer started" in started.output
    assert configuration.timer_state_path(notes_root).is_file()

    status = runner.invoke(app, ["tm", "st"])
    assert status.exit_code == 0, status.output
    assert "running" in status.output

    stopped = runner.invoke(app, ["time", "stop"])
    assert stopped.exit_code == 0, stopped.output
    assert "Timer stopped" in stopped.output
    assert not configuration.timer_state_path(notes_root).exists()

    tasks = extract_tasks(path)
    assert len(tasks[0]["time_entries"]) == 1
    assert tasks[0]["time_entries"][0]["description"] == "Work session"
    assert tasks[1]["time_entries"] == []


def test_time_errors_exit_with_message() -> None:
    """Timer errors are printed and exit with status 1."""
    result = runner.invoke(app, ["time", "pause"])
    assert result.exit_code == 1
    assert "Error: no active timer found" in result.output

    result = runner.invoke(app, ["time", "start", "missing"])
    assert result.exit_code == 1
    assert "no task found matching: missing" in result.output


def test_time_report_invalid_period() -> None:
    """An unknown period is an error."""
    result = runner.invoke(app, ["time", "report", "yearly"])
    assert result.exit_code == 1
    assert "invalid period" in result.output


def test_time_report_today(write_note: Callable[[str, str], Path]) -> None:
    """An empty report still renders."""
    write_note("projects/alpha.md", AUTH_NOTE)
    result = runner.invoke(app, ["time", "report"])
    assert result.exit_code == 0, result.output


def test_create_and_list(notes_root: Path) -> None:
    """Created notes show up in the listing."""
    result = runner.invoke(app, ["create", "project", "Feature", "X"])
    assert result.exit_code == 0, result.output
    assert (notes_root / "projects" / "feature-x.md").is_file()

    listing = runner.invoke(app, ["ls"])
    assert listing.exit_code == 0, listing.output
    assert "feature-x.md" in listing.output


def test_create_requires_title() -> None:
    """Only daily notes may omit the title."""
    result = runner.invoke(app, ["create", "project"])
    assert result.exit_code == 1
    assert "project notes require a title" in result.output


def test_search(write_note: Callable[[str, str], Path]) -> None:
    """Search prints matching lines."""
    write_note("projects/alpha.md", AUTH_NOTE)
    result = runner.invoke(app, ["search", "auth", "#urgent"])
    assert result.exit_code == 0, result.output
    assert "Fix auth bug" in result.output


def test_init_without_git(notes_root: Path) -> None:
    """init lays out the notes folders."""
    result = runner.invoke(app, ["init"])
    assert result.exit_code == 0, result.output
    assert (notes_root / "templates" / "daily.md").is_file()
    assert (notes_root / "README.md").is_file()


def test_status_outside_git() -> None:
    """status needs the notes root to be a git repository."""
    result = runner.invoke(app, ["status"])
    assert result.exit_code == 1
    assert "Error:" in result.output
