# SPDX-License-Identifier: MIT

from typing import Optional, cast

from rich import box
from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from taskcal.model.entity_id import EntityId
from taskcal.model.project import Project
from taskcal.model.task import Task
from taskcal.repository.id_map import ID_MAP_REPO
from taskcal.service.dashboard import DashboardStats, is_overdue
from taskcal.time import date_to_display_str_optional
from taskcal.view.view.util import priority_text, project_text, status_text, truncate
from taskcal.view.view.views.header import header


def dashboard_view(
    workspace_name: str,
    stats: DashboardStats,
    recent: list[Task],
    projects: Optional[list[Project]] = None,
) -> None:
    header(workspace_name, "dashboard")

    console = Console()

    cards = [
        Panel(Text(str(stats["total"]), style="bold"), title="Total tasks"),
        Panel(Text(str(stats["pending"]), style="bold yellow"), title="Pending"),
        Panel(Text(str(stats["in_progress"]), style="bold cyan"), title="In progress"),
        Panel(Text(str(stats["projects"]), style="bold magenta"), title="Projects"),
    ]
    console.print()
    console.print(Columns(cards, equal=True, expand=False))

    if not recent:
        console.print(
            Panel(
                Text("No tasks yet. Add one with 'taskcal task add'.", style="dim"),
                box=box.ROUNDED,
                expand=False,
            )
        )
        return

    recent_table = Table(box=box.SIMPLE, title="Recent tasks")
    recent_table.add_column("id")
    recent_table.add_column("title")
    recent_table.add_column("project")
    recent_table.add_column("priority")
    recent_table.add_column("status")
    recent_table.add_column("due")
    recent_table.add_column("description")

    for task in recent:
        due = Text()
        due_str = date_to_display_str_optional(task["due_date"])
        if due_str is not None:
            if is_overdue(task):
                due.append(f"! {due_str}", style="bold red")
            else:
                due.append(due_str, style="dim")

        recent_table.add_row(
            str(ID_MAP_REPO.associate_id("tasks", cast(EntityId, task["id"]))),
            task["title"],
            project_text(task, projects),
            priority_text(task["priority"]),
            status_text(task["status"]),
            due,
            truncate(task["description"] or "No description", 40),
        )

    console.print(recent_table)
