# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict, get_args

import pendulum

from taskcal.model.entity_id import EntityId

TaskStatus = Literal["pending", "in_progress", "completed"]
TaskPriority = Literal["low", "medium", "high"]

TASK_STATUSES: tuple[str, ...] = get_args(TaskStatus)
TASK_PRIORITIES: tuple[str, ...] = get_args(TaskPriority)


class Task(TypedDict):
    id: Optional[EntityId]
    entity_type: str
    workspace_id: Optional[EntityId]
    project_id: Optional[EntityId]
    title: str
    description: Optional[str]
    status: TaskStatus
    priority: TaskPriority
    start_date: Optional[pendulum.Date]
    due_date: Optional[pendulum.Date]
    created: pendulum.DateTime
    updated: pendulum.DateTime
