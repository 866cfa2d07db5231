# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from taskcal.repository.session import SESSION_REPO
from taskcal.service import sync as sync_service
from taskcal.terminal.custom_typer import WorkspaceAwareTyperGroup

app = typer.Typer(cls=WorkspaceAwareTyperGroup, no_args_is_help=True)


@app.command("login, in")
def login(
    email: Annotated[str, typer.Option("--email", "-e", prompt=True)],
    password: Annotated[
        str, typer.Option("--password", prompt=True, hide_input=True)
    ],
    workspace: Annotated[
        Optional[str],
        typer.Option("--workspace", "-w", help="workspace name, first one if omitted"),
    ] = None,
) -> None:
    """Sign in to the backend and bind the session to a workspace."""
    session = sync_service.login(email, password, workspace)
    Console().print(
        f"[green]Signed in as[/green] {session['email']} "
        f"[dim]workspace: {session['workspace_name']}[/dim]"
    )


@app.command("logout, out")
def logout() -> None:
    sync_service.logout()
    Console().print("[green]Signed out[/green]")


@app.command("demo")
def demo() -> None:
    """Use a local workspace without a backend."""
    session = sync_service.start_demo_session()
    Console().print(f"[green]Using[/green] {session['workspace_name']}")


@app.command("status, st")
def status() -> None:
    session = SESSION_REPO.get_session()

    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")
    table.add_row("email", session["email"] or "None")
    table.add_row("user_id", session["user_id"] or "None")
    table.add_row("workspace", session["workspace_name"] or "None")
    table.add_row("workspace_id", session["workspace_id"] or "None")
    table.add_row(
        "signed in",
        "✓ Yes" if session["access_token"] is not None else "✗ No (local only)",
    )
    Console().print(table)
