# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional, TypedDict, cast

from taskcal import configuration, time
from taskcal.backend.supabase import SupabaseClient
from taskcal.exceptions import AuthenticationError, BackendError
from taskcal.model.comment import Comment
from taskcal.model.entity_id import generate_entity_id
from taskcal.model.entity_type import EntityType
from taskcal.model.project import PROJECT_COLORS, Project, ProjectColor
from taskcal.model.session import Session
from taskcal.model.task import Task, TaskPriority, TaskStatus
from taskcal.repository.comment import COMMENT_REPO
from taskcal.repository.configuration import CONFIGURATION_REPO
from taskcal.repository.project import PROJECT_REPO
from taskcal.repository.session import SESSION_REPO
from taskcal.repository.task import TASK_REPO
from taskcal.service.display import normalize_priority, normalize_status

logger = logging.getLogger(__name__)

DEMO_WORKSPACE_NAME = "Demo workspace"


class PullResult(TypedDict):
    projects: int
    tasks: int
    comments: int


def get_client(access_token: Optional[str] = None) -> SupabaseClient:
    url, anon_key = configuration.resolve_backend_settings(
        CONFIGURATION_REPO.get_config()
    )
    if url is None or anon_key is None:
        raise BackendError(
            "No backend configured. Set backend_url and backend_anon_key with "
            f"'taskcal config set' or the {configuration.BACKEND_URL_ENV} and "
            f"{configuration.BACKEND_ANON_KEY_ENV} environment variables."
        )
    return SupabaseClient(url, anon_key, access_token=access_token)


def login(
    email: str,
    password: str,
    workspace_name: Optional[str] = None,
    client: Optional[SupabaseClient] = None,
) -> Session:
    """Sign in and bind the session to a workspace (by name, else the first)."""
    if client is None:
        client = get_client()
    client.login(email, password)

    workspaces = client.list_workspaces()
    if workspace_name is not None:
        workspaces = [w for w in workspaces if w.get("name") == workspace_name]
    if not workspaces:
        raise AuthenticationError("No workspace available for this account")
    workspace = workspaces[0]

    session: Session = {
        "user_id": client.user_id,
        "email": client.email,
        "access_token": client.token,
        "workspace_id": workspace["id"],
        "workspace_name": workspace.get("name"),
    }
    SESSION_REPO.set_session(session)
    return session


def start_demo_session() -> Session:
    """Local-only session; nothing is fetched from the backend."""
    session = SESSION_REPO.get_session()
    session["user_id"] = None
    session["email"] = None
    session["access_token"] = None
    if session["workspace_id"] is None:
        session["workspace_id"] = generate_entity_id()
    session["workspace_name"] = DEMO_WORKSPACE_NAME
    SESSION_REPO.set_session(session)
    return session


def logout() -> None:
    SESSION_REPO.clear_session()


def _remote_timestamp(row: dict[str, Any], key: str) -> Any:
    value = row.get(key)
    if value is None:
        return time.now_utc()
    return time.datetime_from_str(str(value))


def project_from_row(row: dict[str, Any]) -> Project:
    color = row.get("color")
    if color not in PROJECT_COLORS:
        color = "gray"
    return {
        "id": str(row["id"]),
        "entity_type": EntityType.PROJECT,
        "workspace_id": row.get("workspace_id"),
        "name": row.get("name") or "",
        "description": row.get("description"),
        "color": cast(ProjectColor, color),
        "created": _remote_timestamp(row, "created_at"),
        "updated": _remote_timestamp(row, "updated_at"),
    }


def task_from_row(row: dict[str, Any]) -> Task:
    return {
        "id": str(row["id"]),
        "entity_type": EntityType.TASK,
        "workspace_id": row.get("workspace_id"),
        "project_id": row.get("project_id"),
        "title": row.get("title") or "",
        "description": row.get("description"),
        "status": cast(TaskStatus, normalize_status(row.get("status"))),
        "priority": cast(TaskPriority, normalize_priority(row.get("priority"))),
        "start_date": time.to_local_date(row.get("start_date")),
        "due_date": time.to_local_date(row.get("due_date")),
        "created": _remote_timestamp(row, "created_at"),
        "updated": _remote_timestamp(row, "updated_at"),
    }


def comment_from_row(row: dict[str, Any]) -> Comment:
    return {
        "id": str(row["id"]),
        "entity_type": EntityType.COMMENT,
        "task_id": str(row["task_id"]),
        "content": row.get("content") or "",
        "author": row.get("author") or row.get("user_id"),
        "created": _remote_timestamp(row, "created_at"),
    }


def pull(client: Optional[SupabaseClient] = None) -> PullResult:
    """
    Replace the local projects, tasks and comments with the remote workspace.

    Remote data wins; local-only changes are discarded.
    """
    session = SESSION_REPO.get_session()
    if session["access_token"] is None or session["workspace_id"] is None:
        raise AuthenticationError("Sign in with 'taskcal auth login' before pulling")
    if client is None:
        client = get_client(session["access_token"])

    workspace_id = session["workspace_id"]
    projects = [project_from_row(row) for row in client.list_projects(workspace_id)]
    tasks = [task_from_row(row) for row in client.list_tasks(workspace_id)]
    comments = [
        comment_from_row(row)
        for row in client.list_comments([cast(str, task["id"]) for task in tasks])
    ]

    PROJECT_REPO.replace_all_projects(projects)
    TASK_REPO.replace_all_tasks(tasks)
    COMMENT_REPO.replace_all_comments(comments)

    logger.info(
        "pulled %d projects, %d tasks, %d comments",
        len(projects),
        len(tasks),
        len(comments),
    )
    return {"projects": len(projects), "tasks": len(tasks), "comments": len(comments)}
