from taskcal.model.project import PROJECT_COLORS
from taskcal.model.task import TASK_PRIORITIES, TASK_STATUSES
from taskcal.service.data_source import RepositoryDataSource
from taskcal.service.display import STATUS_ALIASES


def complete_project(incomplete: str) -> list[str]:
    """Return list of project names for shell completion."""

    all_projects = RepositoryDataSource().get_projects()
    return [
        project["name"]
        for project in all_projects
        if project["name"].startswith(incomplete)
    ]


def complete_status(incomplete: str) -> list[str]:
    statuses = list(TASK_STATUSES) + list(STATUS_ALIASES.keys())
    return [status for status in statuses if status.startswith(incomplete)]


def complete_priority(incomplete: str) -> list[str]:
    return [priority for priority in TASK_PRIORITIES if priority.startswith(incomplete)]


def complete_color(incomplete: str) -> list[str]:
    return [color for color in PROJECT_COLORS if color.startswith(incomplete)]
