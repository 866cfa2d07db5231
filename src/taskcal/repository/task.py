# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional, cast

import pendulum
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from taskcal import configuration, time
from taskcal.exceptions import EntityNotFoundError
from taskcal.model.entity_id import EntityId, generate_entity_id
from taskcal.model.task import Task, TaskPriority, TaskStatus

logger = logging.getLogger(__name__)


class TaskRepository:
    def __init__(self) -> None:
        self._tasks: Optional[list[Task]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def __load_data(self) -> None:
        self._tasks = []
        if not configuration.DATA_TASKS_DIR.is_dir():
            return
        for file_path in sorted(configuration.DATA_TASKS_DIR.iterdir()):
            if file_path.suffix != ".yaml":
                continue
            raw_task = load(file_path.read_text(), Loader=Loader)
            if raw_task is not None:
                self._tasks.append(self.__convert_task_for_deserialization(raw_task))
        # Collection order is creation order
        self._tasks.sort(key=lambda task: task["created"])
        logger.debug("loaded %d tasks", len(self._tasks))

    def __save_data(self) -> None:
        configuration.DATA_TASKS_DIR.mkdir(parents=True, exist_ok=True)

        # Write dirty entities
        for task in self.tasks:
            if task["id"] in self._dirty_ids:
                serializable_task = self.__convert_task_for_serialization(
                    deepcopy(task)
                )
                file_path = configuration.DATA_TASKS_DIR / f"{task['id']}.yaml"
                file_path.write_text(dump(serializable_task, Dumper=Dumper))

        # Remove hard-deleted entity files
        for entity_id in self._deleted_ids:
            file_path = configuration.DATA_TASKS_DIR / f"{entity_id}.yaml"
            if file_path.exists():
                file_path.unlink()

        # Clear tracking sets
        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._tasks is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_task_for_serialization(self, task: Task) -> dict[str, Any]:
        serializable_task = cast(dict[str, Any], task)
        serializable_task["start_date"] = time.date_to_str_optional(
            serializable_task["start_date"]
        )
        serializable_task["due_date"] = time.date_to_str_optional(
            serializable_task["due_date"]
        )
        serializable_task["created"] = time.datetime_to_iso_str(
            serializable_task["created"]
        )
        serializable_task["updated"] = time.datetime_to_iso_str(
            serializable_task["updated"]
        )
        return serializable_task

    def __convert_task_for_deserialization(self, task: dict[str, Any]) -> Task:
        deserializable_task = task
        deserializable_task["start_date"] = time.to_local_date(
            deserializable_task.get("start_date")
        )
        deserializable_task["due_date"] = time.to_local_date(
            deserializable_task.get("due_date")
        )
        deserializable_task["created"] = time.datetime_from_str(
            deserializable_task["created"]
        )
        deserializable_task["updated"] = time.datetime_from_str(
            deserializable_task["updated"]
        )
        return cast(Task, deserializable_task)

    def __find(self, id: EntityId) -> Task:
        for task in self.tasks:
            if task["id"] == id:
                return task
        raise EntityNotFoundError("task", id)

    def save_new_task(self, task: Task) -> EntityId:
        self.is_dirty = True

        if task["id"] is None:
            task["id"] = generate_entity_id()

        self.tasks.append(task)
        self._dirty_ids.add(task["id"])

        return task["id"]

    def modify_task(
        self,
        id: EntityId,
        title: Optional[str] = None,
        description: Optional[str] = None,
        project_id: Optional[EntityId] = None,
        status: Optional[TaskStatus] = None,
        priority: Optional[TaskPriority] = None,
        start_date: Optional[pendulum.Date] = None,
        due_date: Optional[pendulum.Date] = None,
        remove_description: bool = False,
        remove_project_id: bool = False,
        remove_start_date: bool = False,
        remove_due_date: bool = False,
    ) -> None:
        task = self.__find(id)

        self.is_dirty = True
        self._dirty_ids.add(id)

        # Set updated timestamp to current moment
        task["updated"] = time.now_utc()
        if title is not None:
            task["title"] = title
        if description is not None:
            task["description"] = description
        if project_id is not None:
            task["project_id"] = project_id
        if status is not None:
            task["status"] = status
        if priority is not None:
            task["priority"] = priority
        if start_date is not None:
            task["start_date"] = start_date
        if due_date is not None:
            task["due_date"] = due_date

        if remove_description:
            task["description"] = None
        if remove_project_id:
            task["project_id"] = None
        if remove_start_date:
            task["start_date"] = None
        if remove_due_date:
            task["due_date"] = None

    def delete_task(self, id: EntityId) -> None:
        task = self.__find(id)
        self.is_dirty = True
        self.tasks.remove(task)
        self._dirty_ids.discard(id)
        self._deleted_ids.add(id)

    def replace_all_tasks(self, tasks: list[Task]) -> None:
        """Swap the whole collection, deleting files for tasks that went away."""
        self.is_dirty = True
        new_ids = {task["id"] for task in tasks}
        for task in self.tasks:
            if task["id"] not in new_ids and task["id"] is not None:
                self._deleted_ids.add(task["id"])
        self._tasks = deepcopy(tasks)
        self._dirty_ids = {task["id"] for task in tasks if task["id"] is not None}

    def get_all_tasks(self) -> list[Task]:
        return deepcopy(self.tasks)

    def get_task(self, id: EntityId) -> Task:
        return deepcopy(self.__find(id))

    def task_exists(self, id: EntityId) -> bool:
        return any(task["id"] == id for task in self.tasks)


TASK_REPO = TaskRepository()
