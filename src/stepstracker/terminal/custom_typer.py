# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core

_ALIAS_SEPARATOR = re.compile(r"\s*,\s*")


def command_aliases(name: str) -> list[str]:
    """Split a registered name like "delete, del" into its aliases."""
    return [alias for alias in _ALIAS_SEPARATOR.split(name) if alias]


class AliasedTyperGroup(typer.core.TyperGroup):
    """
    Group whose commands are registered as "name, alias" and can be invoked
    by any of the comma-separated names.
    """

    def resolve_alias(self, cmd_name: str) -> str:
        if cmd_name in self.commands:
            return cmd_name
        for registered_name in self.commands:
            if cmd_name in command_aliases(registered_name):
                return registered_name
        return cmd_name

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.resolve_alias(cmd_name))

    def add_command(self, cmd: click.Command, name: Optional[str] = None) -> None:
        name = name or cmd.name
        # Typer may hand over the same command again under one of its aliases
        if name is not None and self.resolve_alias(name) != name:
            return
        super().add_command(cmd, name)


class OrderedAliasedTyperGroup(AliasedTyperGroup):
    """Root group listing its sub-apps in the order a user works through them."""

    COMMAND_ORDER = ["entry, e", "summary, s", "data, d", "config, c"]

    def list_commands(self, ctx: click.Context) -> list[str]:
        def position(name: str) -> int:
            if name in self.COMMAND_ORDER:
                return self.COMMAND_ORDER.index(name)
            return len(self.COMMAND_ORDER)

        return sorted(self.commands, key=position)
