# SPDX-License-Identifier: MIT

"""Per-invocation view settings shared by every view."""

from contextvars import ContextVar

# the config file's show_header, overridden by --no-header
_show_header_var: ContextVar[bool] = ContextVar("mdnotes_show_header", default=True)


def set_show_header(value: bool) -> None:
    _show_header_var.set(value)


def get_show_header() -> bool:
    """Whether views print the mdnotes banner and notes root above their output."""
    return _show_header_var.get()
