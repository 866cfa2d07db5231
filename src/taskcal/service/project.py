# SPDX-License-Identifier: MIT

import logging
from typing import Optional, cast

from taskcal.model.entity_id import EntityId
from taskcal.model.project import ProjectColor
from taskcal.repository.project import PROJECT_REPO
from taskcal.repository.session import SESSION_REPO
from taskcal.repository.task import TASK_REPO
from taskcal.service.task import delete_task
from taskcal.template.project import get_project_template

logger = logging.getLogger(__name__)


def create_project(
    name: str,
    description: Optional[str] = None,
    color: ProjectColor = "blue",
) -> EntityId:
    project = get_project_template()
    project["workspace_id"] = SESSION_REPO.get_session()["workspace_id"]
    project["name"] = name
    project["description"] = description
    project["color"] = color

    id = PROJECT_REPO.save_new_project(project)
    logger.info("created project %s", id)
    return id


def delete_project(id: EntityId) -> tuple[int, int]:
    """
    Delete a project along with its tasks and their comments.

    Returns the number of tasks and comments removed.
    """
    PROJECT_REPO.delete_project(id)

    removed_tasks = 0
    removed_comments = 0
    for task in TASK_REPO.get_all_tasks():
        if task["project_id"] == id:
            removed_comments += delete_task(cast(EntityId, task["id"]))
            removed_tasks += 1

    logger.info(
        "deleted project %s with %d tasks and %d comments",
        id,
        removed_tasks,
        removed_comments,
    )
    return removed_tasks, removed_comments
