# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from taskcal.color import (
    DEFAULT_PROJECT_STYLE,
    PRIORITY_STYLES,
    STATUS_STYLES,
    project_style,
)
from taskcal.model.entity_id import EntityId
from taskcal.model.project import Project

NO_PROJECT_LABEL = "No project"

# Status values written by older clients
STATUS_ALIASES = {
    "todo": "pending",
    "doing": "in_progress",
    "done": "completed",
}


class LabelConfig(TypedDict):
    label: str
    style: str


_STATUS_CONFIG: dict[str, LabelConfig] = {
    "pending": {"label": "Pending", "style": STATUS_STYLES["pending"]},
    "in_progress": {"label": "In progress", "style": STATUS_STYLES["in_progress"]},
    "completed": {"label": "Completed", "style": STATUS_STYLES["completed"]},
}

_PRIORITY_CONFIG: dict[str, LabelConfig] = {
    "high": {"label": "● High", "style": PRIORITY_STYLES["high"]},
    "medium": {"label": "● Medium", "style": PRIORITY_STYLES["medium"]},
    "low": {"label": "● Low", "style": PRIORITY_STYLES["low"]},
}


def normalize_status(status: Optional[str]) -> str:
    """Map alias and unknown statuses onto pending / in_progress / completed."""
    if status is None:
        return "pending"
    status = STATUS_ALIASES.get(status, status)
    if status not in _STATUS_CONFIG:
        return "pending"
    return status


def normalize_priority(priority: Optional[str]) -> str:
    if priority is None or priority not in _PRIORITY_CONFIG:
        return "medium"
    return priority


def get_status_config(status: Optional[str]) -> LabelConfig:
    return _STATUS_CONFIG[normalize_status(status)]


def get_priority_config(priority: Optional[str]) -> LabelConfig:
    return _PRIORITY_CONFIG[normalize_priority(priority)]


def find_project(
    project_id: Optional[EntityId], projects: Optional[list[Project]]
) -> Optional[Project]:
    if project_id is None or not projects:
        return None
    for project in projects:
        if project["id"] == project_id:
            return project
    return None


def project_label(project: Optional[Project]) -> LabelConfig:
    if project is None:
        return {"label": NO_PROJECT_LABEL, "style": DEFAULT_PROJECT_STYLE}
    return {"label": project["name"], "style": project_style(project["color"])}
