# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer
import typer.core


class AliasedTyperGroup(typer.core.TyperGroup):
    """Custom TyperGroup that supports comma-separated command aliases"""

    _CMD_SPLIT_P = re.compile(r" ?, ?")

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        """Override to resolve aliases to the full command name"""
        cmd_name = self._group_cmd_name(cmd_name)
        return super().get_command(ctx, cmd_name)

    def _group_cmd_name(self, default_name: str) -> str:
        """Find the full command name if default_name is an alias"""
        for cmd in self.commands.values():
            name = cmd.name
            if name and default_name in self._CMD_SPLIT_P.split(name):
                return name
        return default_name

    def add_command(self, cmd: click.Command, name: Optional[str] = None) -> None:
        """Override to prevent duplicate commands from being added"""
        if name is None:
            name = cmd.name

        # Check if this command is already registered (as an alias)
        existing_name = self._group_cmd_name(name or "")
        if existing_name in self.commands and existing_name != name:
            return

        super().add_command(cmd, name)


class OrderedAliasedTyperGroup(AliasedTyperGroup):
    """Lists the top-level commands in a fixed order instead of registration order"""

    def list_commands(self, ctx: click.Context) -> list[str]:
        desired_order = [
            "start, s",
            "themes, th",
            "config, c",
            "version, ve",
        ]

        result = [cmd_name for cmd_name in desired_order if cmd_name in self.commands]
        for cmd_name in self.commands.keys():
            if cmd_name not in result:
                result.append(cmd_name)

        return result
