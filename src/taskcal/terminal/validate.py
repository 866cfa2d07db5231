# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from taskcal.model.project import PROJECT_COLORS
from taskcal.model.task import TASK_PRIORITIES, TASK_STATUSES
from taskcal.service.display import STATUS_ALIASES, normalize_status

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_status(status: Optional[str]) -> Optional[str]:
    """Accept canonical statuses and their aliases, return the canonical one."""
    if status is None:
        return None
    accepted = list(TASK_STATUSES) + list(STATUS_ALIASES.keys())
    if status not in accepted:
        raise typer.BadParameter(
            f"Status must be one of: {', '.join(accepted)}"
        )
    return normalize_status(status)


def validate_status_filter(status: Optional[str]) -> Optional[str]:
    if status is None or status == "all":
        return status
    return validate_status(status)


def validate_priority(priority: Optional[str]) -> Optional[str]:
    if priority is None:
        return None
    if priority not in TASK_PRIORITIES:
        raise typer.BadParameter(
            f"Priority must be one of: {', '.join(TASK_PRIORITIES)}"
        )
    return priority


def validate_color(color: Optional[str]) -> Optional[str]:
    if color is None:
        return None
    if color not in PROJECT_COLORS:
        raise typer.BadParameter(f"Color must be one of: {', '.join(PROJECT_COLORS)}")
    return color


def validate_log_level(level: Optional[str]) -> Optional[str]:
    if level is None:
        return None
    if level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"Log level must be one of: {', '.join(LOG_LEVELS)}")
    return level.upper()


def validate_cap(cap: Optional[int]) -> Optional[int]:
    if cap is None:
        return None
    if cap < 0:
        raise typer.BadParameter("Cap must not be negative")
    return cap
