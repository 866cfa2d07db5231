# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import typer
from rich.console import Console

from taskcal.color import get_random_project_color
from taskcal.id_map import clear_id_map_if_required, resolve_project
from taskcal.model.project import ProjectColor
from taskcal.repository.project import PROJECT_REPO
from taskcal.repository.session import SESSION_REPO
from taskcal.service import project as project_service
from taskcal.service.data_source import RepositoryDataSource
from taskcal.terminal.completion import complete_color, complete_project
from taskcal.terminal.custom_typer import WorkspaceAwareTyperGroup
from taskcal.terminal.validate import validate_color
from taskcal.view.view.views import project as project_report

app = typer.Typer(cls=WorkspaceAwareTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    name: str,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    color: Annotated[
        Optional[str],
        typer.Option(
            "--color",
            "-col",
            callback=validate_color,
            autocompletion=complete_color,
            help="random when omitted",
        ),
    ] = None,
) -> None:
    if RepositoryDataSource().find_project_by_name(name) is not None:
        raise typer.BadParameter(f"A project with the name '{name}' already exists")

    project_color = color if color is not None else get_random_project_color()
    id = project_service.create_project(
        name, description, cast(ProjectColor, project_color)
    )

    project_report.single_project_view(
        SESSION_REPO.get_workspace_name(), PROJECT_REPO.get_project(id)
    )


@app.command("modify, m", no_args_is_help=True)
def modify(
    project: Annotated[str, typer.Argument(autocompletion=complete_project)],
    name: Annotated[Optional[str], typer.Option("--name", "-n")] = None,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    color: Annotated[
        Optional[str],
        typer.Option(
            "--color",
            "-col",
            callback=validate_color,
            autocompletion=complete_color,
        ),
    ] = None,
    remove_description: Annotated[
        bool, typer.Option("--remove-description", "-rd")
    ] = False,
) -> None:
    real_id = resolve_project(project)
    PROJECT_REPO.modify_project(
        real_id,
        name=name,
        description=description,
        color=cast(Optional[ProjectColor], color),
        remove_description=remove_description,
    )

    project_report.single_project_view(
        SESSION_REPO.get_workspace_name(), PROJECT_REPO.get_project(real_id)
    )


@app.command("delete, del")
def delete(
    project: Annotated[str, typer.Argument(autocompletion=complete_project)],
) -> None:
    """Delete a project together with its tasks and their comments."""
    real_id = resolve_project(project)
    name = PROJECT_REPO.get_project(real_id)["name"]
    removed_tasks, removed_comments = project_service.delete_project(real_id)

    console = Console()
    console.print(
        f"[green]Deleted project[/green] {name} "
        f"[dim]({removed_tasks} tasks, {removed_comments} comments)[/dim]"
    )


@app.command("show, s")
def show(
    project: Annotated[str, typer.Argument(autocompletion=complete_project)],
) -> None:
    project_report.single_project_view(
        SESSION_REPO.get_workspace_name(),
        PROJECT_REPO.get_project(resolve_project(project)),
    )


@app.command("list, ls")
def list_projects() -> None:
    clear_id_map_if_required()
    data_source = RepositoryDataSource()
    project_report.projects_view(
        SESSION_REPO.get_workspace_name(),
        data_source.get_projects(),
        data_source.get_tasks(),
    )
