# SPDX-License-Identifier: MIT

from typing import Any, Optional

from taskcal.model.calendar import DatePopup, PopupRow, TaskDetail
from taskcal.model.entity_id import EntityId
from taskcal.model.project import Project
from taskcal.model.task import Task
from taskcal.service.display import (
    find_project,
    get_priority_config,
    get_status_config,
    normalize_priority,
    normalize_status,
)
from taskcal.service.event_resolver import events_for_date
from taskcal.time import date_to_str, to_local_date, today_local

ACTION_EDIT = "edit"
ACTION_DELETE = "delete"
ACTION_COMPLETE = "complete"


def date_line(task: Task) -> Optional[str]:
    start_date = to_local_date(task.get("start_date"))
    due_date = to_local_date(task.get("due_date"))
    if start_date is not None and due_date is not None:
        return f"{date_to_str(start_date)} → {date_to_str(due_date)}"
    if start_date is not None:
        return f"starts {date_to_str(start_date)}"
    if due_date is not None:
        return f"due {date_to_str(due_date)}"
    return None


def popup_row(task: Task, projects: Optional[list[Project]]) -> PopupRow:
    project = find_project(task.get("project_id"), projects)
    return {
        "task_id": task["id"],
        "title": task["title"],
        "project_name": project["name"] if project is not None else None,
        "project_color": project["color"] if project is not None else None,
        "status": normalize_status(task["status"]),
        "status_label": get_status_config(task["status"])["label"],
        "priority_label": get_priority_config(task["priority"])["label"],
        "description": task.get("description"),
        "date_line": date_line(task),
    }


def date_popup(
    date: Any,
    tasks: Optional[list[Task]],
    projects: Optional[list[Project]] = None,
) -> DatePopup:
    """
    Build the event list shown when a calendar day is selected.

    Rows follow the order of the task collection. An invalid date is shown as
    today with no rows.
    """
    target = to_local_date(date)
    if target is None:
        return {"date": today_local(), "empty": True, "rows": []}
    rows = [popup_row(task, projects) for task in events_for_date(target, tasks)]
    return {"date": target, "empty": len(rows) == 0, "rows": rows}


def task_detail(
    task_id: EntityId,
    tasks: Optional[list[Task]],
    projects: Optional[list[Project]] = None,
) -> Optional[TaskDetail]:
    """Build the detail panel for one task, or None if the id is unknown."""
    task = next((task for task in tasks or [] if task["id"] == task_id), None)
    if task is None:
        return None

    project = find_project(task.get("project_id"), projects)
    status = normalize_status(task["status"])

    actions = [ACTION_EDIT, ACTION_DELETE]
    if status != "completed":
        actions.append(ACTION_COMPLETE)

    return {
        "task_id": task["id"],
        "title": task["title"],
        "project_name": project["name"] if project is not None else None,
        "project_color": project["color"] if project is not None else None,
        "status": status,
        "status_label": get_status_config(status)["label"],
        "priority": normalize_priority(task["priority"]),
        "priority_label": get_priority_config(task["priority"])["label"],
        "start_date": to_local_date(task.get("start_date")),
        "due_date": to_local_date(task.get("due_date")),
        "description": task.get("description"),
        "actions": actions,
    }
