# SPDX-License-Identifier: MIT

import typer
from rich.console import Console

from taskcal.service import sync as sync_service
from taskcal.terminal.custom_typer import WorkspaceAwareTyperGroup

app = typer.Typer(cls=WorkspaceAwareTyperGroup, no_args_is_help=True)


@app.command("pull")
def pull() -> None:
    """Replace local projects, tasks and comments with the remote workspace."""
    result = sync_service.pull()
    Console().print(
        f"[green]Pulled[/green] {result['projects']} projects, "
        f"{result['tasks']} tasks, {result['comments']} comments"
    )
