# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from taskcal.model.entity_id import EntityId


class Comment(TypedDict):
    id: Optional[EntityId]
    entity_type: str
    task_id: EntityId
    content: str
    author: Optional[str]
    created: pendulum.DateTime
