# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mdnotes.model.search_result import SearchResult
from mdnotes.view.view.util import format_tags, pluralize, relative_path, truncate
from mdnotes.view.view.views.header import header


def search_results_view(
    notes_root: str,
    query: str,
    tags: list[str],
    results: list[SearchResult],
) -> None:
    """
    Display search results in a table format.

    Args:
        notes_root: The notes root the paths are shown relative to
        query: The text that was searched for
        tags: The tags the search was limited to
        results: List of SearchResult objects to display
    """
    header(notes_root, f'Search Results for: "{query}" {format_tags(tags)}'.strip())

    console = Console()
    if not results:
        console.print("[grey50]No results found.[/grey50]")
        return

    search_table = Table(box=box.SIMPLE)
    search_table.add_column("file")
    search_table.add_column("line", justify="right")
    search_table.add_column("content")
    search_table.add_column("tags")

    current_file = ""
    for result in results:
        file_name = relative_path(result["file_path"], notes_root)
        search_table.add_row(
            escape(file_name) if file_name != current_file else "",
            f"L{result['line']}",
            escape(truncate(result["content"], 100)),
            f"[cyan]{escape(format_tags(result['tags']))}[/cyan]",
        )
        current_file = file_name

    console.print(search_table)
    console.print(f"[bold]Found {pluralize(len(results), 'result')}[/bold]")
