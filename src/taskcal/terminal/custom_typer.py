# SPDX-License-Identifier: MIT

import re
from typing import Any, Optional

import click
import typer
import typer.core
from rich.console import Console
from rich.padding import Padding

from taskcal.repository.session import SESSION_REPO

console = Console()


def _show_active_workspace(ctx: click.Context) -> None:
    """Show the active workspace once per invocation chain"""
    if getattr(ctx, "_workspace_shown", False):
        return

    current: Optional[click.Context] = ctx
    while current is not None:
        current._workspace_shown = True  # type: ignore[attr-defined]
        current = current.parent

    session = SESSION_REPO.get_session()
    workspace_name = session["workspace_name"] or "none"
    signed_in_as = f" ({session['email']})" if session["email"] else ""

    console.print()
    console.print(
        Padding(
            f"[bold plum1]Workspace: {workspace_name}{signed_in_as}[/bold plum1]",
            (0, 0, 0, 1),
        )
    )


class WorkspaceAwareCommand(typer.core.TyperCommand):
    """Command that displays the active workspace in help text"""

    def format_help(
        self, ctx: click.Context, formatter: click.formatting.HelpFormatter
    ) -> None:
        _show_active_workspace(ctx)
        super().format_help(ctx, formatter)


class AliasedTyperGroup(typer.core.TyperGroup):
    """TyperGroup that supports comma-separated command aliases"""

    _CMD_SPLIT_P = re.compile(r" ?, ?")

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        cmd_name = self._group_cmd_name(cmd_name)
        return super().get_command(ctx, cmd_name)

    def _group_cmd_name(self, default_name: str) -> str:
        for cmd in self.commands.values():
            name = cmd.name
            if name and default_name in self._CMD_SPLIT_P.split(name):
                return name
        return default_name

    def add_command(self, cmd: click.Command, name: Optional[str] = None) -> None:
        if name is None:
            name = cmd.name

        # Already registered under its full aliased name
        existing_name = self._group_cmd_name(name or "")
        if existing_name in self.commands and existing_name != name:
            return

        super().add_command(cmd, name)


class WorkspaceAwareTyperGroup(AliasedTyperGroup):
    """Group that displays the active workspace in help text and supports aliases"""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.command_class = WorkspaceAwareCommand

    def list_commands(self, ctx: click.Context) -> list[str]:
        """Return commands in a fixed order, extras last"""
        desired_order = [
            "dashboard, d",
            "calendar, cal",
            "task, t",
            "project, p",
            "comment, cm",
            "auth, a",
            "sync, s",
            "config, c",
        ]

        result = [name for name in desired_order if name in self.commands]
        for cmd_name in self.commands.keys():
            if cmd_name not in result:
                result.append(cmd_name)
        return result

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        cmd = super().get_command(ctx, cmd_name)

        if cmd is not None and not isinstance(cmd, WorkspaceAwareCommand):
            original_format_help = cmd.format_help

            def workspace_aware_format_help(
                help_ctx: click.Context, formatter: click.formatting.HelpFormatter
            ) -> None:
                _show_active_workspace(help_ctx)
                original_format_help(help_ctx, formatter)

            cmd.format_help = workspace_aware_format_help  # type: ignore

        return cmd

    def format_help(
        self, ctx: click.Context, formatter: click.formatting.HelpFormatter
    ) -> None:
        _show_active_workspace(ctx)
        super().format_help(ctx, formatter)
