# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from taskcal import configuration, time
from taskcal.exceptions import EntityNotFoundError
from taskcal.model.entity_id import EntityId, generate_entity_id
from taskcal.model.project import Project, ProjectColor

logger = logging.getLogger(__name__)


class ProjectRepository:
    def __init__(self) -> None:
        self._projects: Optional[list[Project]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()

    @property
    def projects(self) -> list[Project]:
        if self._projects is None:
            self.__load_data()
        if self._projects is None:
            raise ValueError()
        return self._projects

    def __load_data(self) -> None:
        self._projects = []
        if not configuration.DATA_PROJECTS_DIR.is_dir():
            return
        for file_path in sorted(configuration.DATA_PROJECTS_DIR.iterdir()):
            if file_path.suffix != ".yaml":
                continue
            raw_project = load(file_path.read_text(), Loader=Loader)
            if raw_project is not None:
                self._projects.append(
                    self.__convert_project_for_deserialization(raw_project)
                )
        self._projects.sort(key=lambda project: project["created"])
        logger.debug("loaded %d projects", len(self._projects))

    def __save_data(self) -> None:
        configuration.DATA_PROJECTS_DIR.mkdir(parents=True, exist_ok=True)

        for project in self.projects:
            if project["id"] in self._dirty_ids:
                serializable_project = self.__convert_project_for_serialization(
                    deepcopy(project)
                )
                file_path = configuration.DATA_PROJECTS_DIR / f"{project['id']}.yaml"
                file_path.write_text(dump(serializable_project, Dumper=Dumper))

        for entity_id in self._deleted_ids:
            file_path = configuration.DATA_PROJECTS_DIR / f"{entity_id}.yaml"
            if file_path.exists():
                file_path.unlink()

        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._projects is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_project_for_serialization(self, project: Project) -> dict[str, Any]:
        serializable_project = cast(dict[str, Any], project)
        serializable_project["created"] = time.datetime_to_iso_str(
            serializable_project["created"]
        )
        serializable_project["updated"] = time.datetime_to_iso_str(
            serializable_project["updated"]
        )
        return serializable_project

    def __convert_project_for_deserialization(
        self, project: dict[str, Any]
    ) -> Project:
        deserializable_project = project
        deserializable_project["created"] = time.datetime_from_str(
            deserializable_project["created"]
        )
        deserializable_project["updated"] = time.datetime_from_str(
            deserializable_project["updated"]
        )
        return cast(Project, deserializable_project)

    def __find(self, id: EntityId) -> Project:
        for project in self.projects:
            if project["id"] == id:
                return project
        raise EntityNotFoundError("project", id)

    def save_new_project(self, project: Project) -> EntityId:
        self.is_dirty = True

        if project["id"] is None:
            project["id"] = generate_entity_id()

        self.projects.append(project)
        self._dirty_ids.add(project["id"])

        return project["id"]

    def modify_project(
        self,
        id: EntityId,
        name: Optional[str] = None,
        description: Optional[str] = None,
        color: Optional[ProjectColor] = None,
        remove_description: bool = False,
    ) -> None:
        project = self.__find(id)

        self.is_dirty = True
        self._dirty_ids.add(id)

        project["updated"] = time.now_utc()
        if name is not None:
            project["name"] = name
        if description is not None:
            project["description"] = description
        if color is not None:
            project["color"] = color

        if remove_description:
            project["description"] = None

    def delete_project(self, id: EntityId) -> None:
        project = self.__find(id)
        self.is_dirty = True
        self.projects.remove(project)
        self._dirty_ids.discard(id)
        self._deleted_ids.add(id)

    def replace_all_projects(self, projects: list[Project]) -> None:
        self.is_dirty = True
        new_ids = {project["id"] for project in projects}
        for project in self.projects:
            if project["id"] not in new_ids and project["id"] is not None:
                self._deleted_ids.add(project["id"])
        self._projects = deepcopy(projects)
        self._dirty_ids = {
            project["id"] for project in projects if project["id"] is not None
        }

    def get_all_projects(self) -> list[Project]:
        return deepcopy(self.projects)

    def get_project(self, id: EntityId) -> Project:
        return deepcopy(self.__find(id))

    def project_exists(self, id: EntityId) -> bool:
        return any(project["id"] == id for project in self.projects)

    def find_project_by_name(self, name: str) -> Optional[Project]:
        for project in self.projects:
            if project["name"] == name:
                return deepcopy(project)
        return None


PROJECT_REPO = ProjectRepository()
