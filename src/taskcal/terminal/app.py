# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console

from taskcal import state as app_state
from taskcal.exceptions import TaskcalError
from taskcal.logger import configure_logging
from taskcal.terminal import (
    auth,
    calendar,
    comment,
    configuration,
    project,
    sync,
    task,
)
from taskcal.terminal.custom_typer import WorkspaceAwareTyperGroup
from taskcal.terminal.dashboard import dashboard
from taskcal.view import state as view_state

app = typer.Typer(
    cls=WorkspaceAwareTyperGroup,
    help="taskcal - Tasks, projects and a calendar in the CLI",
    no_args_is_help=True,
)
app.command(name="dashboard, d")(dashboard)
app.add_typer(calendar.app, name="calendar, cal")
app.add_typer(task.app, name="task, t")
app.add_typer(project.app, name="project, p")
app.add_typer(comment.app, name="comment, cm")
app.add_typer(auth.app, name="auth, a")
app.add_typer(sync.app, name="sync, s")
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    clear_ids: Annotated[
        Optional[bool],
        typer.Option(
            "--clear-ids/--no-clear-ids",
            help="Clear the ID map before listing (overrides clear_ids_on_view)",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """
    taskcal - Tasks, projects and a calendar in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if clear_ids is not None:
        app_state.set_clear_ids(clear_ids)
    if verbose:
        configure_logging(verbose=True)


def run() -> None:
    try:
        app()
    except TaskcalError as e:
        Console(stderr=True).print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)
