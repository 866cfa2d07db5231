# SPDX-License-Identifier: MIT

import logging
from typing import Optional, cast

import pendulum

from taskcal.exceptions import EntityNotFoundError
from taskcal.model.entity_id import EntityId
from taskcal.model.task import TaskPriority, TaskStatus
from taskcal.repository.comment import COMMENT_REPO
from taskcal.repository.project import PROJECT_REPO
from taskcal.repository.session import SESSION_REPO
from taskcal.repository.task import TASK_REPO
from taskcal.service.display import normalize_status
from taskcal.template.task import get_task_template

logger = logging.getLogger(__name__)


def validate_date_interval(
    start_date: Optional[pendulum.Date], due_date: Optional[pendulum.Date]
) -> None:
    """Reject a start date that falls after the due date."""
    if start_date is not None and due_date is not None and start_date > due_date:
        raise ValueError(
            f"start date {start_date.to_date_string()} is after due date {due_date.to_date_string()}"
        )


def create_task(
    title: str,
    description: Optional[str] = None,
    project_id: Optional[EntityId] = None,
    status: TaskStatus = "pending",
    priority: TaskPriority = "medium",
    start_date: Optional[pendulum.Date] = None,
    due_date: Optional[pendulum.Date] = None,
) -> EntityId:
    validate_date_interval(start_date, due_date)
    if project_id is not None and not PROJECT_REPO.project_exists(project_id):
        raise EntityNotFoundError("project", project_id)

    task = get_task_template()
    task["workspace_id"] = SESSION_REPO.get_session()["workspace_id"]
    task["title"] = title
    task["description"] = description
    task["project_id"] = project_id
    task["status"] = status
    task["priority"] = priority
    task["start_date"] = start_date
    task["due_date"] = due_date

    id = TASK_REPO.save_new_task(task)
    logger.info("created task %s", id)
    return id


def modify_task_dates(
    id: EntityId,
    start_date: Optional[pendulum.Date],
    due_date: Optional[pendulum.Date],
    remove_start_date: bool,
    remove_due_date: bool,
) -> None:
    """Apply date changes after checking the resulting interval."""
    task = TASK_REPO.get_task(id)
    new_start = None if remove_start_date else (start_date or task["start_date"])
    new_due = None if remove_due_date else (due_date or task["due_date"])
    validate_date_interval(new_start, new_due)
    TASK_REPO.modify_task(
        id,
        start_date=start_date,
        due_date=due_date,
        remove_start_date=remove_start_date,
        remove_due_date=remove_due_date,
    )


def set_task_status(id: EntityId, status: str) -> None:
    TASK_REPO.modify_task(id, status=cast(TaskStatus, normalize_status(status)))


def complete_task(id: EntityId) -> None:
    set_task_status(id, "completed")


def delete_task(id: EntityId) -> int:
    """Delete a task and its comments. Returns the number of comments removed."""
    TASK_REPO.delete_task(id)
    removed = COMMENT_REPO.delete_comments_for_task(id)
    logger.info("deleted task %s and %d comments", id, removed)
    return removed
