# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer
import typer.core

COMMAND_ORDER = [
    "init",
    "create, c",
    "list, ls",
    "tasks, t",
    "time, tm",
    "search, s",
    "status, st",
    "save",
    "config",
]


class AliasedTyperGroup(typer.core.TyperGroup):
    """TyperGroup that supports comma-separated command aliases"""

    _CMD_SPLIT_P = re.compile(r" ?, ?")

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        cmd_name = self._group_cmd_name(cmd_name)
        return super().get_command(ctx, cmd_name)

    def _group_cmd_name(self, default_name: str) -> str:
        """Find the full command name if default_name is an alias"""
        for cmd in self.commands.values():
            name = cmd.name
            if name and default_name in self._CMD_SPLIT_P.split(name):
                return name
        return default_name


class OrderedAliasedTyperGroup(AliasedTyperGroup):
    """Lists the top level commands in workflow order instead of insertion order"""

    def list_commands(self, ctx: click.Context) -> list[str]:
        result = [name for name in COMMAND_ORDER if name in self.commands]
        result += [name for name in self.commands.keys() if name not in result]
        return result
