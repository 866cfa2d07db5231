# SPDX-License-Identifier: MIT

from typing import Optional

from rich.text import Text

from taskcal.color import COMPLETED_TASK_COLOR
from taskcal.model.project import Project
from taskcal.model.task import Task
from taskcal.service.display import (
    find_project,
    get_priority_config,
    get_status_config,
    normalize_status,
    project_label,
)


def task_state(task: Task) -> str:
    """
    Get the state symbol for a task.

    Returns:
        "X" if completed, "/" if in progress, " " if pending
    """
    status = normalize_status(task["status"])
    if status == "completed":
        return "X"
    elif status == "in_progress":
        return "/"
    return " "


def is_task_completed(task: Task) -> bool:
    return normalize_status(task["status"]) == "completed"


def status_text(status: Optional[str]) -> Text:
    config = get_status_config(status)
    return Text(config["label"], style=config["style"])


def priority_text(priority: Optional[str]) -> Text:
    config = get_priority_config(priority)
    return Text(config["label"], style=config["style"])


def project_text(task: Task, projects: Optional[list[Project]]) -> Text:
    config = project_label(find_project(task.get("project_id"), projects))
    return Text(config["label"], style=config["style"])


def truncate(text: str, width: int) -> str:
    if width <= 3 or len(text) <= width:
        return text[: max(width, 0)]
    return text[: width - 3] + "..."


def task_style(task: Task, projects: Optional[list[Project]]) -> str:
    if is_task_completed(task):
        return COMPLETED_TASK_COLOR
    return project_label(find_project(task.get("project_id"), projects))["style"]
