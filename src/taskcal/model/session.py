# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from taskcal.model.entity_id import EntityId


class Session(TypedDict):
    """
    The signed-in user and the workspace new entities are stamped with.

    A session without an access token is a local (demo) session.
    """

    user_id: Optional[str]
    email: Optional[str]
    access_token: Optional[str]
    workspace_id: Optional[EntityId]
    workspace_name: Optional[str]
