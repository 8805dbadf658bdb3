# SPDX-License-Identifier: MIT

import re
from typing import Optional

import click
import typer.core


class AliasedTyperGroup(typer.core.TyperGroup):
    """
    TyperGroup whose command names list their aliases, e.g. "markdown, md".

    Any alias resolves to the registered command. Help lists commands in
    `command_order` (by first alias) followed by the rest in registration order.
    """

    _ALIAS_SEPARATOR = re.compile(r"\s*,\s*")
    command_order: tuple[str, ...] = ()

    @classmethod
    def aliases(cls, name: str) -> list[str]:
        return [alias for alias in cls._ALIAS_SEPARATOR.split(name) if alias]

    def resolve_alias(self, alias: str) -> Optional[str]:
        for name in self.commands:
            if alias == name or alias in self.aliases(name):
                return name
        return None

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, self.resolve_alias(cmd_name) or cmd_name)

    def list_commands(self, ctx: click.Context) -> list[str]:
        names = list(super().list_commands(ctx))
        if not self.command_order:
            return names

        def position(name: str) -> int:
            primary = self.aliases(name)[0]
            if primary in self.command_order:
                return self.command_order.index(primary)
            return len(self.command_order)

        return sorted(names, key=position)


class RootTyperGroup(AliasedTyperGroup):
    """Top-level command groups, listed in workflow order"""

    command_order = ("import", "export", "note", "convert", "config")
