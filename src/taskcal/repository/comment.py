# SPDX-License-Identifier: MIT

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
from taskcal.model.comment import Comment
from taskcal.model.entity_id import EntityId, generate_entity_id


class CommentRepository:
    def __init__(self) -> None:
        self._comments: Optional[list[Comment]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()

    @property
    def comments(self) -> list[Comment]:
        if self._comments is None:
            self.__load_data()
        if self._comments is None:
            raise ValueError()
        return self._comments

    def __load_data(self) -> None:
        self._comments = []
        if not configuration.DATA_COMMENTS_DIR.is_dir():
            return
        for file_path in sorted(configuration.DATA_COMMENTS_DIR.iterdir()):
            if file_path.suffix != ".yaml":
                continue
            raw_comment = load(file_path.read_text(), Loader=Loader)
            if raw_comment is not None:
                raw_comment["created"] = time.datetime_from_str(raw_comment["created"])
                self._comments.append(cast(Comment, raw_comment))
        self._comments.sort(key=lambda comment: comment["created"])

    def __save_data(self) -> None:
        configuration.DATA_COMMENTS_DIR.mkdir(parents=True, exist_ok=True)

        for comment in self.comments:
            if comment["id"] in self._dirty_ids:
                serializable_comment = cast(dict[str, Any], deepcopy(comment))
                serializable_comment["created"] = time.datetime_to_iso_str(
                    serializable_comment["created"]
                )
                file_path = configuration.DATA_COMMENTS_DIR / f"{comment['id']}.yaml"
                file_path.write_text(dump(serializable_comment, Dumper=Dumper))

        for entity_id in self._deleted_ids:
            file_path = configuration.DATA_COMMENTS_DIR / f"{entity_id}.yaml"
            if file_path.exists():
                file_path.unlink()

        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._comments is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def save_new_comment(self, comment: Comment) -> EntityId:
        self.is_dirty = True

        if comment["id"] is None:
            comment["id"] = generate_entity_id()

        self.comments.append(comment)
        self._dirty_ids.add(comment["id"])

        return comment["id"]

    def delete_comment(self, id: EntityId) -> None:
        matches = [comment for comment in self.comments if comment["id"] == id]
        if len(matches) == 0:
            raise EntityNotFoundError("comment", id)
        self.is_dirty = True
        self.comments.remove(matches[0])
        self._dirty_ids.discard(id)
        self._deleted_ids.add(id)

    def delete_comments_for_task(self, task_id: EntityId) -> int:
        doomed = [comment for comment in self.comments if comment["task_id"] == task_id]
        for comment in doomed:
            self.delete_comment(cast(EntityId, comment["id"]))
        return len(doomed)

    def replace_all_comments(self, comments: list[Comment]) -> None:
        self.is_dirty = True
        new_ids = {comment["id"] for comment in comments}
        for comment in self.comments:
            if comment["id"] not in new_ids and comment["id"] is not None:
                self._deleted_ids.add(comment["id"])
        self._comments = deepcopy(comments)
        self._dirty_ids = {
            comment["id"] for comment in comments if comment["id"] is not None
        }

    def get_all_comments(self) -> list[Comment]:
        return deepcopy(self.comments)

    def get_comments_for_task(self, task_id: EntityId) -> list[Comment]:
        return deepcopy(
            [comment for comment in self.comments if comment["task_id"] == task_id]
        )


COMMENT_REPO = CommentRepository()
