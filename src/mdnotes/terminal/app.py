# SPDX-License-Identifier: MIT

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from mdnotes.terminal import configuration, note, time
from mdnotes.terminal.custom_typer import OrderedAliasedTyperGroup
from mdnotes.terminal.task import tasks
from mdnotes.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="mdnotes - markdown notes, tasks and time tracking in the CLI",
    no_args_is_help=True,
)
app.command(name="init")(note.init)
app.command(name="create, c", no_args_is_help=True)(note.create)
app.command(name="list, ls")(note.list_command)
app.command(name="tasks, t")(tasks)
app.add_typer(time.app, name="time, tm", help="Track time on tasks")
app.command(name="search, s", no_args_is_help=True)(note.search)
app.command(name="status, st")(note.status)
app.command(name="save")(note.save)
app.add_typer(configuration.app, name="config", help="Show or change settings")


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(console=Console(stderr=True), show_path=verbose)
        ],
        force=True,
    )


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log debug output to stderr",
        ),
    ] = False,
) -> None:
    """
    mdnotes - markdown notes, tasks and time tracking in the CLI

    Global options that apply to all commands.
    """
    configure_logging(verbose)
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
