# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import pendulum
import typer
from rich.console import Console

from taskcal.id_map import clear_id_map_if_required, resolve_id, resolve_project
from taskcal.model.entity_id import EntityId
from taskcal.model.task import TaskPriority, TaskStatus
from taskcal.repository.comment import COMMENT_REPO
from taskcal.repository.session import SESSION_REPO
from taskcal.repository.task import TASK_REPO
from taskcal.service import task as task_service
from taskcal.service.dashboard import ALL, recent_tasks
from taskcal.service.data_source import RepositoryDataSource
from taskcal.terminal.completion import (
    complete_priority,
    complete_project,
    complete_status,
)
from taskcal.terminal.custom_typer import WorkspaceAwareTyperGroup
from taskcal.terminal.parse import DATE_HELP, parse_date
from taskcal.terminal.validate import (
    validate_priority,
    validate_status,
    validate_status_filter,
)
from taskcal.view.view.views import task as task_report

app = typer.Typer(cls=WorkspaceAwareTyperGroup, no_args_is_help=True)


def _show_task(id: EntityId) -> None:
    task_report.single_task_view(
        SESSION_REPO.get_workspace_name(),
        TASK_REPO.get_task(id),
        RepositoryDataSource().get_projects(),
        COMMENT_REPO.get_comments_for_task(id),
    )


@app.command("add, a", no_args_is_help=True)
def add(
    title: str,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    project: Annotated[
        Optional[str],
        typer.Option(
            "--project",
            "-p",
            help="project name or id",
            autocompletion=complete_project,
        ),
    ] = None,
    status: Annotated[
        str,
        typer.Option(
            "--status",
            "-s",
            callback=validate_status,
            autocompletion=complete_status,
            help="pending, in_progress, completed (or todo, doing, done)",
        ),
    ] = "pending",
    priority: Annotated[
        str,
        typer.Option(
            "--priority",
            "-pr",
            callback=validate_priority,
            autocompletion=complete_priority,
            help="low, medium, high",
        ),
    ] = "medium",
    start: Annotated[
        Optional[pendulum.Date],
        typer.Option("--start", "-st", parser=parse_date, help=DATE_HELP),
    ] = None,
    due: Annotated[
        Optional[pendulum.Date],
        typer.Option("--due", "-u", parser=parse_date, help=DATE_HELP),
    ] = None,
) -> None:
    project_id = resolve_project(project) if project is not None else None

    try:
        id = task_service.create_task(
            title,
            description,
            project_id,
            cast(TaskStatus, status),
            cast(TaskPriority, priority),
            start,
            due,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e))

    _show_task(id)


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: str,
    title: Annotated[Optional[str], typer.Option("--title", "-t")] = None,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    project: Annotated[
        Optional[str],
        typer.Option(
            "--project",
            "-p",
            help="project name or id",
            autocompletion=complete_project,
        ),
    ] = None,
    status: Annotated[
        Optional[str],
        typer.Option(
            "--status",
            "-s",
            callback=validate_status,
            autocompletion=complete_status,
        ),
    ] = None,
    priority: Annotated[
        Optional[str],
        typer.Option(
            "--priority",
            "-pr",
            callback=validate_priority,
            autocompletion=complete_priority,
        ),
    ] = None,
    start: Annotated[
        Optional[pendulum.Date],
        typer.Option("--start", "-st", parser=parse_date, help=DATE_HELP),
    ] = None,
    due: Annotated[
        Optional[pendulum.Date],
        typer.Option("--due", "-u", parser=parse_date, help=DATE_HELP),
    ] = None,
    remove_description: Annotated[
        bool, typer.Option("--remove-description", "-rd")
    ] = False,
    remove_project: Annotated[bool, typer.Option("--remove-project", "-rp")] = False,
    remove_start: Annotated[bool, typer.Option("--remove-start", "-rst")] = False,
    remove_due: Annotated[bool, typer.Option("--remove-due", "-ru")] = False,
) -> None:
    real_id = resolve_id("tasks", id)
    project_id = resolve_project(project) if project is not None else None

    if start is not None or due is not None or remove_start or remove_due:
        try:
            task_service.modify_task_dates(
                real_id, start, due, remove_start, remove_due
            )
        except ValueError as e:
            raise typer.BadParameter(str(e))

    TASK_REPO.modify_task(
        real_id,
        title=title,
        description=description,
        project_id=project_id,
        status=cast(Optional[TaskStatus], status),
        priority=cast(Optional[TaskPriority], priority),
        remove_description=remove_description,
        remove_project_id=remove_project,
    )

    _show_task(real_id)


@app.command("start")
def start(id: str) -> None:
    real_id = resolve_id("tasks", id)
    task_service.set_task_status(real_id, "in_progress")
    _show_task(real_id)


@app.command("complete, done")
def complete(id: str) -> None:
    real_id = resolve_id("tasks", id)
    task_service.complete_task(real_id)
    _show_task(real_id)


@app.command("reopen")
def reopen(id: str) -> None:
    real_id = resolve_id("tasks", id)
    task_service.set_task_status(real_id, "pending")
    _show_task(real_id)


@app.command("delete, del")
def delete(id: str) -> None:
    real_id = resolve_id("tasks", id)
    task = TASK_REPO.get_task(real_id)
    removed_comments = task_service.delete_task(real_id)

    console = Console()
    console.print(
        f"[green]Deleted task[/green] {task['title']}"
        + (f" [dim]({removed_comments} comments)[/dim]" if removed_comments else "")
    )


@app.command("show, s")
def show(id: str) -> None:
    _show_task(resolve_id("tasks", id))


@app.command("list, ls")
def list_tasks(
    status: Annotated[
        str,
        typer.Option(
            "--status",
            "-s",
            callback=validate_status_filter,
            autocompletion=complete_status,
            help="all, or a status",
        ),
    ] = ALL,
    project: Annotated[
        Optional[str],
        typer.Option("--project", "-p", autocompletion=complete_project),
    ] = None,
    no_wrap: Annotated[bool, typer.Option("--no-wrap")] = False,
) -> None:
    project_id = resolve_project(project) if project is not None else ALL
    clear_id_map_if_required()

    data_source = RepositoryDataSource()
    tasks = recent_tasks(data_source.get_tasks(), status, project_id)

    task_report.tasks_view(
        SESSION_REPO.get_workspace_name(),
        "tasks",
        tasks,
        data_source.get_projects(),
        no_wrap,
    )
