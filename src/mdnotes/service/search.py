# SPDX-License-Identifier: MIT

from pathlib import Path

from mdnotes.markdown.extract import TAG_PATTERN
from mdnotes.model.search_result import SearchResult
from mdnotes.query.filter import normalize_tag


def split_search_terms(terms: list[str]) -> tuple[str, list[str]]:
    """Split command line words into a text query and the #tags to filter on."""
    words = [term for term in terms if not term.startswith("#")]
    tags = [term for term in terms if term.startswith("#")]
    return " ".join(words), tags


def search_file(file_path: Path, query: str, tags: list[str]) -> list[SearchResult]:
    """
    Find the lines of a note that contain query and carry one of tags.

    An empty query matches every line and an empty tag list matches every
    line; both must hold for a line to be a result.
    """
    query_lower = query.lower()
    search_tags = {normalize_tag(tag).casefold() for tag in tags}
    results: list[SearchResult] = []

    content = file_path.read_text(encoding="utf-8")
    for line_number, line in enumerate(content.splitlines(), start=1):
        if query_lower != "" and query_lower not in line.lower():
            continue

        line_tags = ["#" + tag for tag in TAG_PATTERN.findall(line)]
        if len(search_tags) > 0 and not any(
            tag.casefold() in search_tags for tag in line_tags
        ):
            continue

        results.append(
            {
                "file_path": str(file_path.resolve()),
                "line": line_number,
                "content": line.strip(),
                "tags": line_tags,
            }
        )

    return results


def search_notes(
    files: list[Path], query: str, tags: list[str]
) -> tuple[list[SearchResult], list[str]]:
    """Search every file in order; unreadable files are returned as skipped."""
    results: list[SearchResult] = []
    skipped: list[str] = []
    for file_path in files:
        try:
            results += search_file(file_path, query, tags)
        except (OSError, UnicodeDecodeError):
            skipped.append(str(file_path))
    return results, skipped
