# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from mdnotes import configuration
from mdnotes.repository.configuration import CONFIGURATION_REPO
from mdnotes.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def configuration_table(title: Optional[str] = None) -> Table:
    config = CONFIGURATION_REPO.get_config()

    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "notes_path",
        config["notes_path"] if config["notes_path"] else "None (current directory)",
    )
    table.add_row("resolved notes root", str(CONFIGURATION_REPO.get_notes_path()))
    table.add_row(
        "use_git_versioning",
        "✓ Enabled" if config["use_git_versioning"] else "✗ Disabled",
    )
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row(
        "commit_time_entries",
        "✓ Enabled" if config.get("commit_time_entries", False) else "✗ Disabled",
    )
    table.add_row("config file", str(configuration.APP_CONFIG_PATH))
    return table


@app.command("show, v")
def show() -> None:
    """Display current configuration settings."""
    console = Console()
    console.print(configuration_table())


@app.command("set, s")
def set(
    notes_path: Annotated[
        Optional[str],
        typer.Option(
            "--notes-path",
            help="Notes root directory (None = current directory)",
        ),
    ] = None,
    remove_notes_path: Annotated[
        bool,
        typer.Option(
            "--remove-notes-path",
            help="Reset notes path to None (use current directory)",
        ),
    ] = False,
    use_git_versioning: Annotated[
        Optional[bool],
        typer.Option(
            "--use-git-versioning/--no-use-git-versioning",
            help="Enable/disable git commits of the notes folder",
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the header above command output",
        ),
    ] = None,
    commit_time_entries: Annotated[
        Optional[bool],
        typer.Option(
            "--commit-time-entries/--no-commit-time-entries",
            help="Enable/disable a git commit for every logged time entry",
        ),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    CONFIGURATION_REPO.update_config(
        notes_path=notes_path,
        remove_notes_path=remove_notes_path,
        use_git_versioning=use_git_versioning,
        show_header=show_header,
        commit_time_entries=commit_time_entries,
    )

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(configuration_table("Updated Configuration"))
