# SPDX-License-Identifier: MIT

from taskcal.model.session import Session


def get_session_template() -> Session:
    return {
        "user_id": None,
        "email": None,
        "access_token": None,
        "workspace_id": None,
        "workspace_name": None,
    }
