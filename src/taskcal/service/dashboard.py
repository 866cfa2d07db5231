# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from taskcal.model.entity_id import EntityId
from taskcal.model.project import Project
from taskcal.model.task import Task
from taskcal.service.display import normalize_status
from taskcal.time import to_local_date, today_local

ALL = "all"


class DashboardStats(TypedDict):
    total: int
    pending: int
    in_progress: int
    completed: int
    projects: int


def dashboard_stats(
    tasks: Optional[list[Task]], projects: Optional[list[Project]]
) -> DashboardStats:
    tasks = tasks or []
    statuses = [normalize_status(task.get("status")) for task in tasks]
    return {
        "total": len(tasks),
        "pending": statuses.count("pending"),
        "in_progress": statuses.count("in_progress"),
        "completed": statuses.count("completed"),
        "projects": len(projects or []),
    }


def recent_tasks(
    tasks: Optional[list[Task]],
    status: str = ALL,
    project_id: Optional[EntityId] = ALL,
    limit: Optional[int] = None,
) -> list[Task]:
    """
    Filter tasks by status and project, newest first.

    status and project_id accept "all" to skip that filter. Status aliases
    such as "todo" or "done" are matched against their canonical status.
    """
    filtered = list(tasks or [])

    if status != ALL:
        wanted = normalize_status(status)
        filtered = [
            task for task in filtered if normalize_status(task.get("status")) == wanted
        ]

    if project_id != ALL:
        filtered = [task for task in filtered if task.get("project_id") == project_id]

    filtered.sort(key=lambda task: task["created"], reverse=True)

    if limit is not None:
        filtered = filtered[:limit]
    return filtered


def is_overdue(task: Task, today: Optional[pendulum.Date] = None) -> bool:
    """A task is overdue when its due date has passed and it is not completed."""
    due_date = to_local_date(task.get("due_date"))
    if due_date is None:
        return False
    if today is None:
        today = today_local()
    return due_date < today and normalize_status(task.get("status")) != "completed"
