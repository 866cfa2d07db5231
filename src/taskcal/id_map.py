# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from taskcal import state as app_state
from taskcal.model.entity_id import EntityId
from taskcal.repository.id_map import ID_MAP_REPO
from taskcal.repository.project import PROJECT_REPO
from taskcal.service.data_source import RepositoryDataSource


def clear_id_map_if_required() -> None:
    if app_state.get_clear_ids():
        ID_MAP_REPO.clear_ids()


def resolve_id(entity_type: str, id: str) -> EntityId:
    """
    Resolve a CLI id to a real entity id.

    Short numeric ids come from the last listing; anything else is taken as
    a full entity id.
    """
    if id.isdigit():
        real_id: Optional[EntityId] = ID_MAP_REPO.get_real_id(entity_type, int(id))
        if real_id is None:
            raise typer.BadParameter(
                f"No {entity_type} with short id {id}; list them again first"
            )
        return real_id
    return id


def resolve_project(value: str) -> EntityId:
    """
    Resolve a --project value given as a short id, a full id or a name.
    """
    if value.isdigit():
        return resolve_id("projects", value)
    if PROJECT_REPO.project_exists(value):
        return value
    project = RepositoryDataSource().find_project_by_name(value)
    if project is None or project["id"] is None:
        raise typer.BadParameter(f"No project named '{value}'")
    return project["id"]
