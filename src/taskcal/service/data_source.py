# SPDX-License-Identifier: MIT

from typing import Optional

from taskcal.model.entity_id import EntityId
from taskcal.model.project import Project
from taskcal.model.task import Task
from taskcal.repository.project import PROJECT_REPO
from taskcal.repository.session import SESSION_REPO
from taskcal.repository.task import TASK_REPO


class RepositoryDataSource:
    """Tasks and projects of the session's workspace, read from the repositories."""

    def __workspace_id(self) -> Optional[EntityId]:
        return SESSION_REPO.get_session()["workspace_id"]

    def get_tasks(self) -> list[Task]:
        workspace_id = self.__workspace_id()
        return [
            task
            for task in TASK_REPO.get_all_tasks()
            if task["workspace_id"] == workspace_id
        ]

    def get_projects(self) -> list[Project]:
        workspace_id = self.__workspace_id()
        return [
            project
            for project in PROJECT_REPO.get_all_projects()
            if project["workspace_id"] == workspace_id
        ]

    def find_project_by_name(self, name: str) -> Optional[Project]:
        for project in self.get_projects():
            if project["name"] == name:
                return project
        return None
