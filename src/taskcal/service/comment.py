# SPDX-License-Identifier: MIT

from typing import Optional

from taskcal.exceptions import EntityNotFoundError
from taskcal.model.entity_id import EntityId
from taskcal.repository.comment import COMMENT_REPO
from taskcal.repository.session import SESSION_REPO
from taskcal.repository.task import TASK_REPO
from taskcal.template.comment import get_comment_template


def add_comment(
    task_id: EntityId, content: str, author: Optional[str] = None
) -> EntityId:
    if not TASK_REPO.task_exists(task_id):
        raise EntityNotFoundError("task", task_id)

    comment = get_comment_template()
    comment["task_id"] = task_id
    comment["content"] = content
    comment["author"] = author if author is not None else SESSION_REPO.get_session()["email"]
    return COMMENT_REPO.save_new_comment(comment)
