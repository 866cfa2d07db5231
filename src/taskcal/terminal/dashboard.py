# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from taskcal.id_map import clear_id_map_if_required, resolve_project
from taskcal.repository.configuration import CONFIGURATION_REPO
from taskcal.repository.session import SESSION_REPO
from taskcal.service.dashboard import ALL, dashboard_stats, recent_tasks
from taskcal.service.data_source import RepositoryDataSource
from taskcal.terminal.completion import complete_project, complete_status
from taskcal.terminal.validate import validate_status_filter
from taskcal.view.view.views.dashboard import dashboard_view


def dashboard(
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
    limit: Annotated[Optional[int], typer.Option("--limit", "-l")] = None,
) -> None:
    """Show task counts and the most recently created tasks."""
    config = CONFIGURATION_REPO.get_config()
    project_id = resolve_project(project) if project is not None else ALL
    clear_id_map_if_required()

    data_source = RepositoryDataSource()
    tasks = data_source.get_tasks()
    projects = data_source.get_projects()

    dashboard_view(
        SESSION_REPO.get_workspace_name(),
        dashboard_stats(tasks, projects),
        recent_tasks(
            tasks,
            status,
            project_id,
            limit if limit is not None else config["recent_tasks_limit"],
        ),
        projects,
    )
