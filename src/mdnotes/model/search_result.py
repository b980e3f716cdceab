# SPDX-License-Identifier: MIT

from typing import TypedDict


class SearchResult(TypedDict):
    file_path: str
    line: int
    content: str
    tags: list[str]
