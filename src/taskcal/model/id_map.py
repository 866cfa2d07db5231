# SPDX-License-Identifier: MIT

from typing import Literal, TypeAlias, TypedDict

EntityType = Literal[
    "tasks",
    "projects",
    "comments",
]


IdMapDict: TypeAlias = "dict[EntityType, IdMapMapping]"


class IdMap(TypedDict):
    """
    All dictionaries are mapped in the following way:

    Synthetic id : real entity id.

    Synthetic ids are the short integers shown in listings; real ids are the
    uuids stored on disk.

    Example:

    Task with an id of "0b6c...".
    Synthetic id for that task is 7.

    real_task_id = id_map["tasks"]["synthetic_to_real"][7] # returns "0b6c..."
    """

    tasks: "IdMapMapping"
    projects: "IdMapMapping"
    comments: "IdMapMapping"


class IdMapMapping(TypedDict):
    synthetic_to_real: dict[int, str]
    real_to_synthetic: dict[str, int]
