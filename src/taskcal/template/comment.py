# SPDX-License-Identifier: MIT

from taskcal.model.comment import Comment
from taskcal.model.entity_id import UNSET_ENTITY_ID
from taskcal.model.entity_type import EntityType
from taskcal.time import now_utc


def get_comment_template() -> Comment:
    return {
        "id": None,
        "entity_type": EntityType.COMMENT,
        "task_id": UNSET_ENTITY_ID,
        "content": "",
        "author": None,
        "created": now_utc(),
    }
