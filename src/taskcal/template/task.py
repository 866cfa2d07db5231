# SPDX-License-Identifier: MIT

from taskcal.model.entity_type import EntityType
from taskcal.model.task import Task
from taskcal.time import now_utc


def get_task_template() -> Task:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.TASK,
        "workspace_id": None,
        "project_id": None,
        "title": "",
        "description": None,
        "status": "pending",
        "priority": "medium",
        "start_date": None,
        "due_date": None,
        "created": now,
        "updated": now,
    }
