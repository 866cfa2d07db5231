# SPDX-License-Identifier: MIT

from typing import Optional, cast

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from taskcal.color import COMPLETED_TASK_COLOR
from taskcal.model.comment import Comment
from taskcal.model.entity_id import EntityId
from taskcal.model.project import Project
from taskcal.model.task import Task
from taskcal.repository.id_map import ID_MAP_REPO
from taskcal.service.dashboard import is_overdue
from taskcal.time import (
    date_to_display_str_optional,
    datetime_to_display_local_datetime_str,
)
from taskcal.view.view.util import (
    is_task_completed,
    priority_text,
    project_text,
    status_text,
    task_state,
)
from taskcal.view.view.views.comment import comments_table
from taskcal.view.view.views.header import header


def tasks_view(
    workspace_name: str,
    report_name: str,
    tasks: list[Task],
    projects: Optional[list[Project]] = None,
    no_wrap: bool = False,
) -> None:
    header(workspace_name, report_name)

    tasks_table = Table(box=box.SIMPLE)
    tasks_table.add_column("id")
    tasks_table.add_column("state")
    for column in ["title", "project", "priority", "start", "due"]:
        if no_wrap:
            tasks_table.add_column(column, no_wrap=True, overflow="ellipsis")
        else:
            tasks_table.add_column(column)

    for task in tasks:
        title = Text(task["title"])
        if is_task_completed(task):
            title.stylize(COMPLETED_TASK_COLOR)

        due = Text(date_to_display_str_optional(task["due_date"]) or "")
        if is_overdue(task):
            due.stylize("bold red")

        tasks_table.add_row(
            str(ID_MAP_REPO.associate_id("tasks", cast(EntityId, task["id"]))),
            task_state(task),
            title,
            project_text(task, projects),
            priority_text(task["priority"]),
            date_to_display_str_optional(task["start_date"]) or "",
            due,
        )

    console = Console()
    console.print(tasks_table)


def single_task_view(
    workspace_name: str,
    task: Task,
    projects: Optional[list[Project]] = None,
    comments: Optional[list[Comment]] = None,
) -> None:
    header(workspace_name, "task")

    task_table = Table(box=box.SIMPLE)
    task_table.add_column("property")
    task_table.add_column("value")

    task_table.add_row(
        "id",
        str(ID_MAP_REPO.associate_id("tasks", cast(EntityId, task["id"]))),
    )
    task_table.add_row("title", task["title"])
    task_table.add_row("project", project_text(task, projects))
    task_table.add_row("status", status_text(task["status"]))
    task_table.add_row("priority", priority_text(task["priority"]))
    task_table.add_row("start", date_to_display_str_optional(task["start_date"]) or "")
    task_table.add_row("due", date_to_display_str_optional(task["due_date"]) or "")
    task_table.add_row("description", task["description"] or "")
    task_table.add_row("created", datetime_to_display_local_datetime_str(task["created"]))
    task_table.add_row("updated", datetime_to_display_local_datetime_str(task["updated"]))

    console = Console()
    console.print(task_table)

    if comments:
        console.print(comments_table(comments))
