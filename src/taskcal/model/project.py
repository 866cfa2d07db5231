# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict, get_args

import pendulum

from taskcal.model.entity_id import EntityId

ProjectColor = Literal[
    "blue",
    "green",
    "red",
    "yellow",
    "purple",
    "orange",
    "pink",
    "gray",
]

PROJECT_COLORS: tuple[str, ...] = get_args(ProjectColor)


class Project(TypedDict):
    id: Optional[EntityId]
    entity_type: str
    workspace_id: Optional[EntityId]
    name: str
    description: Optional[str]
    color: ProjectColor
    created: pendulum.DateTime
    updated: pendulum.DateTime
