# SPDX-License-Identifier: MIT

from typing import cast

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from taskcal.color import project_style
from taskcal.model.entity_id import EntityId
from taskcal.model.project import Project
from taskcal.model.task import Task
from taskcal.repository.id_map import ID_MAP_REPO
from taskcal.service.dashboard import dashboard_stats
from taskcal.view.view.views.header import header


def projects_view(
    workspace_name: str,
    projects: list[Project],
    tasks: list[Task],
) -> None:
    header(workspace_name, "projects")

    projects_table = Table(box=box.SIMPLE)
    projects_table.add_column("id")
    projects_table.add_column("name")
    projects_table.add_column("color")
    projects_table.add_column("tasks")
    projects_table.add_column("done")
    projects_table.add_column("description")

    for project in projects:
        project_tasks = [task for task in tasks if task["project_id"] == project["id"]]
        stats = dashboard_stats(project_tasks, [])
        projects_table.add_row(
            str(ID_MAP_REPO.associate_id("projects", cast(EntityId, project["id"]))),
            Text(project["name"], style=project_style(project["color"])),
            project["color"],
            str(stats["total"]),
            str(stats["completed"]),
            project["description"] or "",
        )

    console = Console()
    console.print(projects_table)


def single_project_view(workspace_name: str, project: Project) -> None:
    header(workspace_name, "project")

    project_table = Table(box=box.SIMPLE)
    project_table.add_column("property")
    project_table.add_column("value")
    project_table.add_row(
        "id",
        str(ID_MAP_REPO.associate_id("projects", cast(EntityId, project["id"]))),
    )
    project_table.add_row(
        "name", Text(project["name"], style=project_style(project["color"]))
    )
    project_table.add_row("color", project["color"])
    project_table.add_row("description", project["description"] or "")

    console = Console()
    console.print(project_table)
