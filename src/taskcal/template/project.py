# SPDX-License-Identifier: MIT

from taskcal.model.entity_type import EntityType
from taskcal.model.project import Project
from taskcal.time import now_utc


def get_project_template() -> Project:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.PROJECT,
        "workspace_id": None,
        "name": "",
        "description": None,
        "color": "blue",
        "created": now,
        "updated": now,
    }
