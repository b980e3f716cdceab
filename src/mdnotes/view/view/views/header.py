# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional

from rich import print
from rich.markup import escape
from rich.padding import Padding

from mdnotes.view.state import get_show_header


def display_root(notes_root: str) -> str:
    """Shorten a notes root below the home directory to ~/..."""
    root = Path(notes_root)
    try:
        return str(Path("~") / root.relative_to(Path.home()))
    except (ValueError, RuntimeError):
        return notes_root


def header(notes_root: str, sub_header: Optional[str] = None) -> None:
    """Print the mdnotes banner, the command's sub header and the notes root."""
    if not get_show_header():
        return

    lines = ["[dark_orange]mdnotes[/dark_orange]"]
    if sub_header is not None:
        lines.append(f"[sandy_brown]{escape(sub_header)}[/sandy_brown]")
    lines.append(f"[plum1]{escape(display_root(notes_root))}[/plum1]")

    print(Padding("\n".join(lines), (1, 0, 0, 1)))
